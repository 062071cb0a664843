"""Image export: data URI encoding, file download and clipboard sinks."""

from familyquest_renderer.encoding import decode_data_uri, encode

from .clipboard import (
    ClipboardBackend,
    CommandClipboardBackend,
    MacClipboardBackend,
    WindowsClipboardBackend,
    detect_backend,
)
from .sinks import DEFAULT_FILENAME, card_filename, copy_to_clipboard, default_download_dir, download

__all__ = [
    "DEFAULT_FILENAME",
    "ClipboardBackend",
    "CommandClipboardBackend",
    "MacClipboardBackend",
    "WindowsClipboardBackend",
    "card_filename",
    "copy_to_clipboard",
    "decode_data_uri",
    "default_download_dir",
    "detect_backend",
    "download",
    "encode",
]
