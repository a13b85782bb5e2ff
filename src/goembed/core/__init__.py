"""Core subsystem: configuration, logging, identifiers and Go package helpers."""

from goembed.core.config import EmbedSettings, load_settings
from goembed.core.identifiers import sanitise
from goembed.core.logging import configure_logging, get_logger
from goembed.core.package import detect_package, write_package

__all__ = [
    "EmbedSettings",
    "configure_logging",
    "detect_package",
    "get_logger",
    "load_settings",
    "sanitise",
    "write_package",
]
