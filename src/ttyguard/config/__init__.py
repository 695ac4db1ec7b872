"""Configuration loading, paths, and derived settings."""

from __future__ import annotations

from .config import COPY_CHUNK_SIZE_DEFAULT, TRUNCATION_LIMIT_DEFAULT, Config
from .paths import default_config_path
from .settings import RuntimeSettings

__all__ = [
    "COPY_CHUNK_SIZE_DEFAULT",
    "Config",
    "RuntimeSettings",
    "TRUNCATION_LIMIT_DEFAULT",
    "default_config_path",
]
