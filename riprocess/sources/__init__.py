"""File selection for camera images and timestamp logs."""
from __future__ import annotations

from .images import IMAGE_FILE_NAME_RE, image_number, image_paths
from .timestamps import (
    TIMESTAMP_FILE_NAME_RE,
    read_timestamp_files,
    read_timestamps,
    timestamp_file_key,
    timestamp_paths,
)

__all__ = [
    "IMAGE_FILE_NAME_RE",
    "TIMESTAMP_FILE_NAME_RE",
    "image_number",
    "image_paths",
    "read_timestamp_files",
    "read_timestamps",
    "timestamp_file_key",
    "timestamp_paths",
]
