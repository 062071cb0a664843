"""Core app services for settings, logging and diagnostics."""

from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .logging_setup import configure_logging

__all__ = [
    "AppConfig",
    "build_doctor_payload",
    "configure_logging",
    "load_config",
    "save_config",
]
