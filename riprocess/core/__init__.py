"""Configuration, errors and directory selection shared by the pipeline."""
from __future__ import annotations

from .config import Config, ImageConfig, RecordConfig, TimestampConfig
from .errors import (
    ConfigError,
    InvalidBoundError,
    InvalidImageNumberError,
    InvalidTimestampFileNameError,
    NoTimestampsError,
    RecordCountMismatchError,
    RiprocessError,
    TimestampCountMismatchError,
    TimestampParseError,
)
from .paths import select_paths

__all__ = [
    "Config",
    "ImageConfig",
    "RecordConfig",
    "TimestampConfig",
    "ConfigError",
    "InvalidBoundError",
    "InvalidImageNumberError",
    "InvalidTimestampFileNameError",
    "NoTimestampsError",
    "RecordCountMismatchError",
    "RiprocessError",
    "TimestampCountMismatchError",
    "TimestampParseError",
    "select_paths",
]
