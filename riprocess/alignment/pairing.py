"""Pair selected images with aligned timestamps."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence

import numpy as np

from ..core.config import Config
from ..core.errors import TimestampCountMismatchError
from ..sources import image_paths, read_timestamp_files, timestamp_paths
from .records import align_records

__all__ = ["Image", "ImageList", "pair_images", "image_list"]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Image:
    """One camera image and its corrected timestamp."""

    path: Path
    timestamp: float


class ImageList:
    """Iterator over :class:`Image` records.

    It can be consumed once; iterating again yields nothing.
    """

    def __init__(self, paths: Sequence[Path], timestamps: Sequence[float]) -> None:
        self._iter = zip(list(paths), [float(t) for t in timestamps])

    def __iter__(self) -> Iterator[Image]:
        return self

    def __next__(self) -> Image:
        path, timestamp = next(self._iter)
        return Image(path=path, timestamp=timestamp)


def pair_images(paths: Sequence[Path], timestamps: Sequence[float]) -> ImageList:
    """Combine image ``i`` with timestamp ``i``.

    Raises:
        TimestampCountMismatchError: The counts differ. Two empty inputs are
            not an error.
    """
    if len(paths) != len(timestamps):
        raise TimestampCountMismatchError(timestamps=len(timestamps), images=len(paths))
    return ImageList(paths, timestamps)


def image_list(config: Config) -> ImageList:
    """Build the image list for *config*.

    Every selection, parse and count check runs before this returns, so a
    failure never leaves a partially written list behind.

    Raises:
        OSError: A directory or timestamp file cannot be read.
        InvalidBoundError: A configured first/last bound matches no file.
        TimestampParseError: A timestamp file holds a non-numeric line.
        NoTimestampsError: A selected timestamp file is empty.
        RecordCountMismatchError: Start times and timestamp files differ in number.
        TimestampCountMismatchError: Timestamps and images differ in number.
    """
    images: List[Path] = image_paths(config.images)
    files: List[Path] = timestamp_paths(config.timestamps)
    sequences = read_timestamp_files(files)
    timestamps: np.ndarray = align_records(config.records.start_times, sequences, files)
    logger.info(
        "%d images, %d timestamp files, %d timestamps",
        len(images),
        len(files),
        len(timestamps),
    )
    return pair_images(images, timestamps)
