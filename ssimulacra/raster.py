# raster.py
"""
Input raster checks and channel promotion.

Rasters are uint8 numpy arrays shaped (H, W) or (H, W, C), in OpenCV channel
order (BGR / BGRA).
"""
import logging

import numpy as np

from .errors import (
    ChannelMismatch, DimensionMismatch, ImageTooSmall, UnsupportedChannelCount,
    UnsupportedSampleType
)
from .weights import MIN_SIZE

SUPPORTED_CHANNELS = (1, 3, 4)


def channel_count(img: np.ndarray) -> int:
    return 1 if img.ndim == 2 else img.shape[2]


def as_planes(img: np.ndarray) -> np.ndarray:
    """Return `img` as a 3-D (H, W, C) array; OpenCV drops the trailing axis of single-channel results."""
    if img.ndim == 2:
        return img[:, :, np.newaxis]
    return img


def add_opaque_alpha(img: np.ndarray) -> np.ndarray:
    alpha = np.full(img.shape[:2] + (1,), 255, dtype=img.dtype)
    return np.concatenate([img, alpha], axis=2)


def promote_channels(img1: np.ndarray, img2: np.ndarray) -> tuple:
    """
    Pad a 3-channel image with an opaque alpha plane when the other one has 4.
    Pairs that cannot be promoted are returned untouched for validate_pair to reject.
    """
    n1, n2 = channel_count(img1), channel_count(img2)
    if n1 == n2 or n1 < 3 or n2 < 3:
        return img1, img2
    if n1 == 3:
        logging.debug('Promoting original image to 4 channels')
        img1 = add_opaque_alpha(img1)
    if n2 == 3:
        logging.debug('Promoting distorted image to 4 channels')
        img2 = add_opaque_alpha(img2)
    return img1, img2


def validate_pair(img1: np.ndarray, img2: np.ndarray) -> int:
    """Check that two rasters can be compared and return their shared channel count."""
    if img1.shape[:2] != img2.shape[:2]:
        raise DimensionMismatch(img1.shape, img2.shape)
    if img1.shape[0] < MIN_SIZE or img1.shape[1] < MIN_SIZE:
        raise ImageTooSmall(img1.shape)
    n1, n2 = channel_count(img1), channel_count(img2)
    if n1 != n2 and min(n1, n2) < 3:
        raise ChannelMismatch(n1, n2)
    for nchan in (n1, n2):
        if nchan not in SUPPORTED_CHANNELS:
            raise UnsupportedChannelCount(nchan)
    if n1 != n2:
        # 3 vs 4 channels that were not promoted first
        raise ChannelMismatch(n1, n2)
    for img in (img1, img2):
        if img.dtype != np.uint8:
            raise UnsupportedSampleType(img.dtype)
    return n1
