# decoder.py
import logging
import os

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeFailure


def read_avif(path: str) -> np.ndarray:
    """Decode an AVIF file through Pillow into a 3-channel BGR raster."""
    try:
        with Image.open(path) as im:
            rgb = np.asarray(im.convert('RGB'))
    except (UnidentifiedImageError, OSError) as exc:
        raise DecodeFailure(path, str(exc)) from exc
    return np.ascontiguousarray(rgb[:, :, ::-1])


def to_8bit(img: np.ndarray, path: str) -> np.ndarray:
    if img.dtype == np.uint8:
        return img
    if img.dtype == np.uint16:
        logging.warning('%s has 16-bit samples; reducing to 8 bits', path)
        return (img // 257).astype(np.uint8)
    raise DecodeFailure(path, f'unsupported sample type {img.dtype}')


def load_image(path: str) -> np.ndarray:
    """
    Read an image file as an 8-bit raster in OpenCV channel order
    (gray, BGR or BGRA, alpha kept when the file has one).
    """
    if not os.path.isfile(path):
        raise DecodeFailure(path, 'no such file')
    ext = os.path.splitext(path)[1].lower()
    if ext == '.avif':
        img = read_avif(path)
    else:
        img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
        if img is None:
            raise DecodeFailure(path)
    img = to_8bit(img, path)
    logging.info('Loaded %s: %dx%d, %d channel(s)', path, img.shape[1], img.shape[0],
                 1 if img.ndim == 2 else img.shape[2])
    return img
