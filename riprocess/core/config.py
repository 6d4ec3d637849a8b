# -*- coding: utf-8 -*-
"""
Image list configuration data classes.

The configuration is a TOML file with three tables::

    [images]
    path = "data/images"
    first_image_number = 3522
    last_image_number = 3525

    [timestamps]
    path = "data/timestamps"
    first_timestamp_file_name = "170621_202939.eif"
    last_timestamp_file_name = "170621_203040.eif"

    [records]
    start_times = [332978.669, 333039.279]

Every key is optional. Relative directories are resolved against the
current working directory.

Docstring style: Google Style
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from .errors import ConfigError

if TYPE_CHECKING:
    from ..alignment.pairing import ImageList

__all__ = ["Config", "ImageConfig", "TimestampConfig", "RecordConfig"]


logger = logging.getLogger(__name__)


def _check_optional(value: Any, expected: type, key: str) -> None:
    if value is None:
        return
    # bool is an int subclass, but `first_image_number = true` is a mistake
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigError(
            f"{key} must be {expected.__name__}, got {type(value).__name__} {value!r}"
        )


@dataclass
class ImageConfig:
    """Selection of camera images.

    Attributes:
        path: Directory that holds the ``DSC#####.JPG`` images.
        first_image_number: Number of the first image to use. If None, the
            first image in the directory is used.
        last_image_number: Number of the last image to use. If None, the last
            image in the directory is used.
    """

    path: Path = field(default_factory=Path)
    first_image_number: Optional[int] = None
    last_image_number: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate bound types and normalise the directory."""
        self.path = Path(self.path)
        _check_optional(self.first_image_number, int, "images.first_image_number")
        _check_optional(self.last_image_number, int, "images.last_image_number")


@dataclass
class TimestampConfig:
    """Selection of timestamp (``.eif``) files.

    Attributes:
        path: Directory that holds the ``NNNNNN_NNNNNN.eif`` files.
        first_timestamp_file_name: Name of the first file to use. If None,
            the first file in the directory is used.
        last_timestamp_file_name: Name of the last file to use. If None, the
            last file in the directory is used.
    """

    path: Path = field(default_factory=Path)
    first_timestamp_file_name: Optional[str] = None
    last_timestamp_file_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate bound types and normalise the directory."""
        self.path = Path(self.path)
        _check_optional(
            self.first_timestamp_file_name, str, "timestamps.first_timestamp_file_name"
        )
        _check_optional(
            self.last_timestamp_file_name, str, "timestamps.last_timestamp_file_name"
        )


@dataclass
class RecordConfig:
    """Records of the processing project.

    Start times are transcribed by hand for now, one per record, in the same
    order as the selected timestamp files.

    Attributes:
        start_times: The start time of each record.
    """

    start_times: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate start times and convert them to floats."""
        if isinstance(self.start_times, (str, bytes)) or not isinstance(
            self.start_times, (list, tuple)
        ):
            raise ConfigError(
                f"records.start_times must be a list, got {type(self.start_times).__name__}"
            )
        values: List[float] = []
        for i, value in enumerate(self.start_times):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(
                    f"records.start_times[{i}] must be a number, got {value!r}"
                )
            values.append(float(value))
        self.start_times = values


@dataclass
class Config:
    """Complete configuration for building an image list.

    Attributes:
        images: Image selection.
        timestamps: Timestamp file selection.
        records: Record start times.
    """

    images: ImageConfig = field(default_factory=ImageConfig)
    timestamps: TimestampConfig = field(default_factory=TimestampConfig)
    records: RecordConfig = field(default_factory=RecordConfig)

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "Config":
        """Load a configuration from a TOML file.

        Args:
            path: TOML configuration file.

        Returns:
            The parsed configuration.

        Raises:
            OSError: The file cannot be read.
            ConfigError: The file is not valid UTF-8 TOML or holds bad values.
        """
        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
                raise ConfigError(f"{path}: {exc}") from exc
        logger.debug("Loaded configuration from %s", path)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build a configuration from already parsed data.

        Unknown tables and keys are ignored.

        Raises:
            ConfigError: A table is not a mapping or a value has the wrong type.
        """
        images = _table(data, "images")
        timestamps = _table(data, "timestamps")
        records = _table(data, "records")
        return cls(
            images=ImageConfig(
                path=_path(images, "images"),
                first_image_number=images.get("first_image_number"),
                last_image_number=images.get("last_image_number"),
            ),
            timestamps=TimestampConfig(
                path=_path(timestamps, "timestamps"),
                first_timestamp_file_name=timestamps.get("first_timestamp_file_name"),
                last_timestamp_file_name=timestamps.get("last_timestamp_file_name"),
            ),
            records=RecordConfig(start_times=records.get("start_times", [])),
        )

    def image_paths(self) -> List[Path]:
        """Return the selected image paths. See :func:`riprocess.sources.image_paths`."""
        from ..sources import image_paths

        return image_paths(self.images)

    def timestamp_paths(self) -> List[Path]:
        """Return the selected ``.eif`` paths. See :func:`riprocess.sources.timestamp_paths`."""
        from ..sources import timestamp_paths

        return timestamp_paths(self.timestamps)

    def image_list(self) -> "ImageList":
        """Return the image/timestamp pairs. See :func:`riprocess.alignment.image_list`."""
        from ..alignment import image_list

        return image_list(self)


def _table(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{name}] must be a table, got {type(table).__name__}")
    return dict(table)


def _path(table: Mapping[str, Any], name: str) -> Path:
    value = table.get("path", "")
    if not isinstance(value, str):
        raise ConfigError(f"{name}.path must be str, got {type(value).__name__}")
    return Path(value)
