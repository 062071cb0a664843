"""Environment report for the ``doctor`` command."""

from __future__ import annotations

import os
import platform
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np
import PIL
import psutil
from PIL import features

from familyquest_export import default_download_dir, detect_backend
from familyquest_renderer.fonts import EMOJI_FONT_FAMILY, font_path, load_font

from .config import AppConfig, config_path


def scrub_home(value: Any, home: str | None = None) -> Any:
    """Replace the user's home directory with ``~`` in every string of ``value``.

    Font, log and download paths end up in pasted bug reports; the account
    name should not.
    """
    home = home or str(Path.home())
    if isinstance(value, str):
        return "~" + value[len(home):] if value == home or value.startswith(home + os.sep) else value
    if isinstance(value, dict):
        return {k: scrub_home(v, home) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [scrub_home(v, home) for v in value]
    return value


def _fonts(cfg: AppConfig) -> dict[str, str | None]:
    return {
        "regular": font_path(load_font(16, cfg.render.font_family, "400")),
        "bold": font_path(load_font(16, cfg.render.font_family, "600")),
        "emoji": font_path(load_font(16, EMOJI_FONT_FAMILY)),
    }


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    process = psutil.Process()
    download_dir = Path(cfg.export.download_dir).expanduser() if cfg.export.download_dir else default_download_dir()
    payload: dict[str, Any] = {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "pillow": PIL.__version__,
        "numpy": np.__version__,
        "features": {
            "freetype2": bool(features.check("freetype2")),
            "zlib": bool(features.check("zlib")),
            "raqm": bool(features.check("raqm")),
        },
        "fonts": _fonts(cfg),
        "clipboard_backend": detect_backend().name,
        "rss_mb": float(process.memory_info().rss) / (1024 * 1024),
        "config_path": str(config_path()),
        "download_dir": str(download_dir),
        "config": asdict(cfg),
    }
    return scrub_home(payload)
