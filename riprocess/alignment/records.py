# -*- coding: utf-8 -*-
"""
Align per-record timestamp sequences onto the absolute time base.

The ``.eif`` clock restarts for every record, so only its position inside a
100 second epoch is meaningful. The record's start time, transcribed by hand
from the processing project, provides the epoch. Drift inside an epoch is not
corrected.

Docstring style: Google Style
"""
from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence, Union

import numpy as np

from ..core.errors import NoTimestampsError, RecordCountMismatchError

__all__ = ["EPOCH_SECONDS", "epoch_base", "align_records"]


logger = logging.getLogger(__name__)

EPOCH_SECONDS = 100.0


def epoch_base(value: float) -> np.float64:
    """Return ``value`` with its remainder modulo :data:`EPOCH_SECONDS` removed.

    The remainder is truncated (``fmod``), so negative values keep their sign.
    """
    value = np.float64(value)
    return value - np.fmod(value, EPOCH_SECONDS)


def align_records(
    start_times: Sequence[float],
    sequences: Sequence[np.ndarray],
    sources: Optional[Sequence[Union[str, "os.PathLike[str]"]]] = None,
) -> np.ndarray:
    """Rebase each record's timestamps and flatten them in record order.

    For record ``i`` every timestamp ``t`` becomes
    ``t - epoch_base(sequences[i][0]) + epoch_base(start_times[i])``,
    evaluated left to right.

    Args:
        start_times: Start time of each record.
        sequences: Parsed timestamps of each record, in the same order.
        sources: Optional file of each sequence, used in error messages.

    Returns:
        1-D ``float64`` array: record 0's timestamps first, in file order,
        then record 1's, and so on.

    Raises:
        RecordCountMismatchError: ``start_times`` and ``sequences`` differ in
            length.
        NoTimestampsError: A sequence is empty; reports the first one.
    """
    if len(start_times) != len(sequences):
        raise RecordCountMismatchError(records=len(start_times), timestamps=len(sequences))

    for index, sequence in enumerate(sequences):
        if len(sequence) == 0:
            source = sources[index] if sources is not None else None
            raise NoTimestampsError(index, source)

    aligned: List[np.ndarray] = []
    for index, (start_time, sequence) in enumerate(zip(start_times, sequences)):
        sequence = np.asarray(sequence, dtype=np.float64)
        timestamp_base = epoch_base(sequence[0])
        record_base = epoch_base(start_time)
        logger.debug(
            "record %d: %d timestamps, timestamp base %.1f, record base %.1f",
            index,
            len(sequence),
            timestamp_base,
            record_base,
        )
        aligned.append(sequence - timestamp_base + record_base)

    if not aligned:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(aligned)
