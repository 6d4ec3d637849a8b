"""Query and generate material for RiPROCESS projects."""
from __future__ import annotations

from .alignment import Image, ImageList, align_records, image_list, pair_images
from .core import (
    Config,
    ConfigError,
    ImageConfig,
    InvalidBoundError,
    InvalidImageNumberError,
    InvalidTimestampFileNameError,
    NoTimestampsError,
    RecordConfig,
    RecordCountMismatchError,
    RiprocessError,
    TimestampConfig,
    TimestampCountMismatchError,
    TimestampParseError,
)
from .sources import image_paths, read_timestamps, timestamp_paths

__all__ = [
    "Config",
    "ImageConfig",
    "RecordConfig",
    "TimestampConfig",
    "Image",
    "ImageList",
    "align_records",
    "image_list",
    "image_paths",
    "pair_images",
    "read_timestamps",
    "timestamp_paths",
    "ConfigError",
    "InvalidBoundError",
    "InvalidImageNumberError",
    "InvalidTimestampFileNameError",
    "NoTimestampsError",
    "RecordCountMismatchError",
    "RiprocessError",
    "TimestampCountMismatchError",
    "TimestampParseError",
    "main",
]


def __getattr__(name: str):  # pragma: no cover - thin lazy loader
    if name == "main":
        from . import cli

        return cli.main
    raise AttributeError(name)
