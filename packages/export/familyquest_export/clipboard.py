"""Host clipboard backends for PNG images."""

from __future__ import annotations

import os
import platform
import shutil
import subprocess
import tempfile
from pathlib import Path

from familyquest_renderer.errors import ClipboardError


class ClipboardBackend:
    """Writes PNG bytes to the system clipboard; raises on any denial."""

    name = "unsupported"

    def write_png(self, payload: bytes, timeout_s: float) -> None:
        raise ClipboardError("No image clipboard is available on this host")


class CommandClipboardBackend(ClipboardBackend):
    """Pipes the image into a clipboard tool such as ``wl-copy`` or ``xclip``."""

    def __init__(self, name: str, argv: list[str]) -> None:
        self.name = name
        self.argv = argv

    def write_png(self, payload: bytes, timeout_s: float) -> None:
        # The tools fork to keep serving the selection; never wait on their output pipes.
        subprocess.run(
            self.argv,
            input=payload,
            check=True,
            timeout=timeout_s,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )


class _TempFileClipboardBackend(ClipboardBackend):
    def write_png(self, payload: bytes, timeout_s: float) -> None:
        with tempfile.TemporaryDirectory(prefix="familyquest-clip-") as tmp:
            path = Path(tmp) / "card.png"
            path.write_bytes(payload)
            subprocess.run(self.command(path), check=True, timeout=timeout_s, capture_output=True)

    def command(self, path: Path) -> list[str]:
        raise NotImplementedError


class MacClipboardBackend(_TempFileClipboardBackend):
    name = "osascript"

    def command(self, path: Path) -> list[str]:
        script = f'set the clipboard to (read (POSIX file "{path}") as «class PNGf»)'
        return ["osascript", "-e", script]


class WindowsClipboardBackend(_TempFileClipboardBackend):
    name = "powershell"

    def command(self, path: Path) -> list[str]:
        script = (
            "Add-Type -AssemblyName System.Windows.Forms; "
            "Add-Type -AssemblyName System.Drawing; "
            f"$img = [System.Drawing.Image]::FromFile('{path}'); "
            "[System.Windows.Forms.Clipboard]::SetImage($img); "
            "$img.Dispose()"
        )
        return ["powershell", "-NoProfile", "-STA", "-Command", script]


def detect_backend() -> ClipboardBackend:
    system = platform.system()
    if system == "Windows":
        return WindowsClipboardBackend()
    if system == "Darwin":
        return MacClipboardBackend()
    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
        return CommandClipboardBackend("wl-copy", ["wl-copy", "--type", "image/png"])
    if os.environ.get("DISPLAY") and shutil.which("xclip"):
        return CommandClipboardBackend("xclip", ["xclip", "-selection", "clipboard", "-t", "image/png", "-i"])
    return ClipboardBackend()
