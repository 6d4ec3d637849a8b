# -*- coding: utf-8 -*-
"""
Timestamps for camera images.

Timestamps are stored in ``.eif`` files, usually in ``04_CAM_RAW/01_EIF``.
Each file is named ``YYMMDD_HHMMSS.eif`` and holds one timestamp per line,
in seconds on a clock local to its recording session.

Docstring style: Google Style
"""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np

from ..core.config import TimestampConfig
from ..core.errors import InvalidTimestampFileNameError, TimestampParseError
from ..core.paths import select_paths

__all__ = [
    "TIMESTAMP_FILE_NAME_RE",
    "timestamp_file_key",
    "timestamp_paths",
    "read_timestamps",
    "read_timestamp_files",
]


logger = logging.getLogger(__name__)

TIMESTAMP_FILE_NAME_RE = re.compile(r"^[0-9]{6}_[0-9]{6}\.eif$")


def timestamp_file_key(file_name: str) -> Optional[str]:
    """Return *file_name* if it is a timestamp file name, else None.

    The naming scheme makes lexical order chronological, so the name itself is
    the selection key.
    """
    if TIMESTAMP_FILE_NAME_RE.match(file_name) is None:
        return None
    return file_name


def timestamp_paths(config: TimestampConfig) -> List[Path]:
    """Return the timestamp file paths for *config*, in chronological order.

    Args:
        config: Timestamp selection. ``first_timestamp_file_name`` and
            ``last_timestamp_file_name`` bound the selection inclusively.

    Returns:
        Sorted paths of the selected ``.eif`` files.

    Raises:
        OSError: The timestamp directory cannot be listed.
        InvalidTimestampFileNameError: A configured bound is not the name of
            a timestamp file in the directory.
    """
    return select_paths(
        config.path,
        timestamp_file_key,
        first=config.first_timestamp_file_name,
        last=config.last_timestamp_file_name,
        error=InvalidTimestampFileNameError,
    )


def read_timestamps(path: Union[str, "os.PathLike[str]"]) -> np.ndarray:
    """Read one ``.eif`` file.

    Blank lines are skipped; every other line must be a floating point
    number in plain decimal or exponent notation. Order is preserved and
    values are not checked for monotonicity.

    Args:
        path: Timestamp file.

    Returns:
        1-D ``float64`` array, empty for an empty file.

    Raises:
        OSError: The file cannot be read.
        TimestampParseError: A line is not valid UTF-8 or not a number.
    """
    values: List[float] = []
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            raw = raw.strip()
            if not raw:
                continue
            try:
                text = raw.decode("utf-8")
                # float() also takes "1_000.5", which is not a timestamp
                if "_" in text:
                    raise ValueError(text)
                values.append(float(text))
            except ValueError as exc:
                raise TimestampParseError(
                    Path(path), line_number, raw.decode("utf-8", "replace")
                ) from exc
    logger.debug("%s: %d timestamps", path, len(values))
    return np.array(values, dtype=np.float64)


def read_timestamp_files(paths: Iterable[Union[str, "os.PathLike[str]"]]) -> List[np.ndarray]:
    """Read several ``.eif`` files, keeping their order."""
    return [read_timestamps(path) for path in paths]
