"""Persistent settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from familyquest_renderer.catalog import CARD_COLOR_SCHEMES, DEFAULT_COLOR_SCHEME_NAME
from familyquest_renderer.fonts import DEFAULT_FONT_FAMILY

CONFIG_VERSION = 1

MIN_DIMENSION = 16
MAX_DIMENSION = 4096


@dataclass
class RenderConfig:
    default_width: int = 400
    default_height: int = 400
    font_family: str = DEFAULT_FONT_FAMILY
    color_scheme: str = DEFAULT_COLOR_SCHEME_NAME
    image_format: str = "PNG"


@dataclass
class ExportConfig:
    download_dir: str | None = None
    default_filename: str = "family-quest-card.png"
    clipboard_timeout_s: float = 10.0


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def app_dir() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "FamilyQuest"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "FamilyQuest"
    return Path.home() / ".config" / "familyquest"


def config_path() -> Path:
    return app_dir() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    defaults = RenderConfig()
    for name in ("default_width", "default_height"):
        try:
            value = int(getattr(cfg.render, name))
        except (TypeError, ValueError):
            value = getattr(defaults, name)
        setattr(cfg.render, name, max(MIN_DIMENSION, min(MAX_DIMENSION, value)))
    if cfg.render.color_scheme not in CARD_COLOR_SCHEMES:
        cfg.render.color_scheme = DEFAULT_COLOR_SCHEME_NAME
    if not isinstance(cfg.render.font_family, str) or not cfg.render.font_family.strip():
        cfg.render.font_family = DEFAULT_FONT_FAMILY
    if str(cfg.render.image_format).upper() not in ("PNG", "JPEG", "WEBP"):
        cfg.render.image_format = "PNG"
    cfg.render.image_format = str(cfg.render.image_format).upper()


def _normalize_export(cfg: AppConfig) -> None:
    try:
        timeout = float(cfg.export.clipboard_timeout_s)
    except (TypeError, ValueError):
        timeout = ExportConfig().clipboard_timeout_s
    cfg.export.clipboard_timeout_s = max(1.0, min(60.0, timeout))
    if not cfg.export.default_filename:
        cfg.export.default_filename = ExportConfig().default_filename


def _normalize_diagnostics(cfg: AppConfig) -> None:
    try:
        cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))
    except (TypeError, ValueError):
        cfg.diagnostics.keep_log_files = DiagnosticsConfig().keep_log_files


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        render=_merge(RenderConfig, data.get("render", {})),
        export=_merge(ExportConfig, data.get("export", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_render(cfg)
    _normalize_export(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
