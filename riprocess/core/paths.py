"""Directory scanning with pattern filtering and inclusive range bounds."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple, Type, Union

from .errors import InvalidBoundError

__all__ = ["select_paths"]


logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def select_paths(
    directory: PathLike,
    extract_key: Callable[[str], Optional[Any]],
    first: Optional[Any] = None,
    last: Optional[Any] = None,
    error: Type[InvalidBoundError] = InvalidBoundError,
) -> List[Path]:
    """Return the sorted paths in *directory* whose key lies in ``[first, last]``.

    Entries for which ``extract_key`` returns ``None`` are skipped silently.
    A bound that is set must equal the key of at least one discovered entry,
    checked against every matching entry before the range is applied.

    Args:
        directory: Directory to list.
        extract_key: Maps a file name to its selection key, or ``None`` when
            the name does not match the expected pattern.
        first: Inclusive lower bound, ``None`` for unbounded.
        last: Inclusive upper bound, ``None`` for unbounded.
        error: ``InvalidBoundError`` subclass raised for a bad bound.

    Returns:
        Matching paths (``directory / name``) sorted ascending.

    Raises:
        OSError: The directory cannot be listed.
        InvalidBoundError: ``first`` or ``last`` matches no discovered entry.
    """
    directory = Path(directory)

    candidates: List[Tuple[Any, str]] = []
    for name in os.listdir(directory):
        key = extract_key(name)
        if key is not None:
            candidates.append((key, name))

    keys = {key for key, _ in candidates}
    for bound in (first, last):
        if bound is not None and bound not in keys:
            raise error(bound, directory)

    paths = sorted(
        directory / name
        for key, name in candidates
        if (first is None or first <= key) and (last is None or key <= last)
    )
    logger.debug(
        "%s: %d matching files, %d selected (first=%r, last=%r)",
        directory,
        len(candidates),
        len(paths),
        first,
        last,
    )
    return paths
