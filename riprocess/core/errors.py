"""Exception types raised while building an image list.

Filesystem problems are not wrapped: ``OSError`` (and its subclasses such as
``FileNotFoundError``) propagates unchanged from directory listings and file
reads.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

__all__ = [
    "RiprocessError",
    "ConfigError",
    "TimestampParseError",
    "InvalidBoundError",
    "InvalidImageNumberError",
    "InvalidTimestampFileNameError",
    "NoTimestampsError",
    "RecordCountMismatchError",
    "TimestampCountMismatchError",
]


class RiprocessError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(RiprocessError, ValueError):
    """The configuration file is not valid TOML or holds a value of the wrong type."""


class TimestampParseError(RiprocessError, ValueError):
    """A line of a timestamp (``.eif``) file is not a floating point number.

    Attributes:
        path: File that failed to parse.
        line_number: 1-based line number of the offending line.
        text: The offending line, stripped.
    """

    def __init__(self, path: Path, line_number: int, text: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.text = text
        super().__init__(
            f"{self.path}:{line_number}: invalid timestamp {text!r}"
        )


class InvalidBoundError(RiprocessError, ValueError):
    """A configured first/last bound does not match any discovered file.

    Attributes:
        value: The configured bound.
        directory: Directory that was scanned.
    """

    kind = "bound"

    def __init__(self, value: Any, directory: Path) -> None:
        self.value = value
        self.directory = Path(directory)
        super().__init__(f"invalid {self.kind} {value!r}: no such file in {self.directory}")


class InvalidImageNumberError(InvalidBoundError):
    """A configured first/last image number has no matching image."""

    kind = "image number"


class InvalidTimestampFileNameError(InvalidBoundError):
    """A configured first/last timestamp file name has no matching file."""

    kind = "timestamp file name"


class NoTimestampsError(RiprocessError):
    """A timestamp file selected for a record holds no timestamps.

    Attributes:
        index: 0-based record index of the first empty sequence.
        path: Source file of that sequence, when known.
    """

    def __init__(self, index: int, path: Optional[Path] = None) -> None:
        self.index = index
        self.path = Path(path) if path is not None else None
        source = f" ({self.path})" if self.path is not None else ""
        super().__init__(f"no timestamps for record {index}{source}")


class RecordCountMismatchError(RiprocessError):
    """The number of record start times differs from the number of timestamp files."""

    def __init__(self, records: int, timestamps: int) -> None:
        self.records = records
        self.timestamps = timestamps
        super().__init__(
            f"record count mismatch: {records} records, {timestamps} timestamp files"
        )


class TimestampCountMismatchError(RiprocessError):
    """The number of aligned timestamps differs from the number of images."""

    def __init__(self, timestamps: int, images: int) -> None:
        self.timestamps = timestamps
        self.images = images
        super().__init__(
            f"timestamp count mismatch: {timestamps} timestamps, {images} images"
        )
