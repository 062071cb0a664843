"""Output sinks for encoded card images: save to disk and system clipboard."""

from __future__ import annotations

import asyncio
import logging
import os
import subprocess
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from familyquest_renderer.encoding import decode_data_uri
from familyquest_renderer.errors import ClipboardError, InvalidDataUriError

from .clipboard import ClipboardBackend, detect_backend

DEFAULT_FILENAME = "family-quest-card.png"
DEFAULT_CLIPBOARD_TIMEOUT_S = 10.0

logger = logging.getLogger("familyquest.export")


def card_filename(card_id: str | None = None) -> str:
    if not card_id:
        return DEFAULT_FILENAME
    return f"family-quest-card-{card_id}.png"


def default_download_dir() -> Path:
    override = os.environ.get("FAMILYQUEST_DOWNLOAD_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / "Downloads"


def download(data_uri: str, filename: str = DEFAULT_FILENAME, directory: Path | str | None = None) -> None:
    """Save the image under ``filename`` in the downloads directory.

    Only the base name of ``filename`` is used. No retry.
    """
    _mime, payload = decode_data_uri(data_uri)
    target_dir = Path(directory).expanduser() if directory else default_download_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / (Path(filename).name or DEFAULT_FILENAME)
    target.write_bytes(payload)
    logger.info(
        f"card saved path={target} bytes={len(payload)}",
        extra={"event": "card_downloaded", "target": str(target), "size_bytes": len(payload)},
    )


def _as_png(mime: str, payload: bytes) -> bytes:
    if mime == "image/png":
        return payload
    try:
        with Image.open(BytesIO(payload)) as img:
            buf = BytesIO()
            img.save(buf, format="PNG")
            return buf.getvalue()
    except (UnidentifiedImageError, OSError) as exc:
        raise ClipboardError(f"Cannot convert {mime} data to PNG", cause=exc) from exc


async def copy_to_clipboard(
    data_uri: str,
    backend: ClipboardBackend | None = None,
    timeout_s: float = DEFAULT_CLIPBOARD_TIMEOUT_S,
) -> None:
    """Write the image to the system clipboard as PNG.

    Raises ``ClipboardError`` when the host denies or cannot provide clipboard
    access. There is no fallback sink.
    """
    try:
        mime, payload = decode_data_uri(data_uri)
    except InvalidDataUriError as exc:
        raise ClipboardError("Clipboard copy needs an image data URI", cause=exc) from exc

    png = _as_png(mime, payload)
    backend = backend or detect_backend()
    try:
        await asyncio.to_thread(backend.write_png, png, timeout_s)
    except ClipboardError:
        logger.warning(
            f"clipboard unavailable backend={backend.name}",
            extra={"event": "clipboard_failed", "backend": backend.name},
        )
        raise
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning(
            f"clipboard write failed backend={backend.name} error={exc!r}",
            extra={"event": "clipboard_failed", "backend": backend.name},
        )
        raise ClipboardError(f"Clipboard write denied by {backend.name}", cause=exc) from exc

    logger.info(
        f"card copied backend={backend.name} bytes={len(png)}",
        extra={"event": "card_copied", "backend": backend.name, "size_bytes": len(png)},
    )
