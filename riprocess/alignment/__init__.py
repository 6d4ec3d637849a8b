"""Timestamp alignment and image pairing."""
from __future__ import annotations

from .pairing import Image, ImageList, image_list, pair_images
from .records import EPOCH_SECONDS, align_records, epoch_base

__all__ = [
    "EPOCH_SECONDS",
    "Image",
    "ImageList",
    "align_records",
    "epoch_base",
    "image_list",
    "pair_images",
]
