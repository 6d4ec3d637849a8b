"""Camera images.

Images are sometimes inside the processing project tree, in
``04_CAM_RAW/03_IMG``, and sometimes in an external folder. Only files named
``DSC#####.JPG`` are considered.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from ..core.config import ImageConfig
from ..core.errors import InvalidImageNumberError
from ..core.paths import select_paths

__all__ = ["IMAGE_FILE_NAME_RE", "image_number", "image_paths"]


IMAGE_FILE_NAME_RE = re.compile(r"^DSC(?P<image_number>[0-9]{5})\.JPG$")


def image_number(file_name: str) -> Optional[int]:
    """Return the 5-digit number encoded in an image file name, or None."""
    match = IMAGE_FILE_NAME_RE.match(file_name)
    if match is None:
        return None
    return int(match.group("image_number"))


def image_paths(config: ImageConfig) -> List[Path]:
    """Return the image paths for *config*, sorted by image number.

    The paths are limited by ``first_image_number`` and
    ``last_image_number``. Because the numbers are zero padded, path order is
    numeric order.

    Raises:
        OSError: The image directory cannot be listed.
        InvalidImageNumberError: A configured bound is not the number of any
            image in the directory.
    """
    return select_paths(
        config.path,
        image_number,
        first=config.first_image_number,
        last=config.last_image_number,
        error=InvalidImageNumberError,
    )
