# diagnostics.py
"""
Human-viewable renderings of the level-0 maps, written next to the results
when the command line is given an output prefix.

Only color input gets diagnostics; layouts are in OpenCV (BGR) order.
"""
import logging

import cv2
import numpy as np

# edge differences are tiny, scale them well past 255 to make them visible
EDGE_GAIN = 5000


def _to_u8(values: np.ndarray, gain: float) -> np.ndarray:
    return np.clip(np.rint(values * gain), 0, 255).astype(np.uint8)


def _with_alpha(planes: list, nchan: int) -> np.ndarray:
    if nchan == 4:
        planes = planes + [np.full_like(planes[0], 255)]
    return np.dstack(planes)


def edge_image(edge_map: np.ndarray) -> np.ndarray:
    """Blue = chroma edges (wrapping sum), green and red = luma edges."""
    p = _to_u8(edge_map, EDGE_GAIN)
    chroma = p[:, :, 1] + p[:, :, 2]  # uint8 arithmetic wraps
    return _with_alpha([chroma, p[:, :, 0], p[:, :, 0]], edge_map.shape[2])


def ssim_image(ssim_map: np.ndarray) -> np.ndarray:
    """Inverted and channel-swapped SSIM so problem areas stand out."""
    p = 255 - _to_u8(ssim_map, 255)
    return _with_alpha([p[:, :, 2], p[:, :, 0], p[:, :, 1]], ssim_map.shape[2])


def write_diagnostics(evaluation, prefix: str) -> list:
    """Write `<prefix>.edgediff.png` and `<prefix>.ssim.png`; returns the paths written."""
    if evaluation.channels < 3 or evaluation.edge_map is None:
        logging.info('No diagnostic images for %d-channel input', evaluation.channels)
        return []
    written = []
    for suffix, image in (('.edgediff.png', edge_image(evaluation.edge_map)),
                          ('.ssim.png', ssim_image(evaluation.ssim_map))):
        path = prefix + suffix
        if not cv2.imwrite(path, image):
            logging.warning('Could not write %s', path)
            continue
        logging.info('Wrote %s', path)
        written.append(path)
    return written
