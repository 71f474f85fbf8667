# metric.py
"""
Public entry points: compare two 8-bit rasters and get one dissimilarity score.
"""
import logging
from dataclasses import dataclass

import numpy as np

from .colorspace import normalize
from .raster import promote_channels, validate_pair
from .score import ScoreAccumulator
from .ssim import evaluate_pyramid

CHANNEL_ORDERS = ('bgr', 'rgb')


@dataclass
class Evaluation:
    """Outcome of one comparison.

    `edge_map` is the level-0 edge difference (0 = no introduced edge) and
    `ssim_map` the level-0 SSIM map; both are (H, W, C) and only kept on request.
    """
    score: float
    channels: int
    levels: int
    edge_map: np.ndarray = None
    ssim_map: np.ndarray = None


def _to_bgr(img: np.ndarray, channel_order: str) -> np.ndarray:
    if channel_order not in CHANNEL_ORDERS:
        raise ValueError(f'channel_order must be one of {CHANNEL_ORDERS}, got {channel_order!r}')
    if channel_order == 'rgb' and img.ndim == 3 and img.shape[2] >= 3:
        order = [2, 1, 0] + list(range(3, img.shape[2]))
        return img[:, :, order]
    return img


def evaluate(original: np.ndarray, distorted: np.ndarray, *,
             channel_order: str = 'bgr', keep_maps: bool = False) -> Evaluation:
    """
    Score how visible the differences between `original` and `distorted` are.

    Inputs are uint8 arrays shaped (H, W) or (H, W, C), C in {1, 3, 4}, at
    least 8x8. A 3-channel image compared with a 4-channel one is given an
    opaque alpha plane first. Raises a SsimulacraError subclass, without doing
    any work, when the pair cannot be compared.
    """
    original = _to_bgr(np.asarray(original), channel_order)
    distorted = _to_bgr(np.asarray(distorted), channel_order)
    original, distorted = promote_channels(original, distorted)
    nchan = validate_pair(original, distorted)

    height, width = original.shape[:2]
    logging.info('Comparing %dx%d images with %d channel(s)', width, height, nchan)

    img1 = normalize(original)
    img2 = normalize(distorted)
    del original, distorted

    acc = ScoreAccumulator()
    pyramid = evaluate_pyramid(img1, img2, acc)
    score = acc.finalize()
    logging.info('Final score %.8f (sum %.6f of %.6f over %d scales)',
                 score, acc.score, acc.score_max, pyramid.levels)

    evaluation = Evaluation(score=score, channels=nchan, levels=pyramid.levels)
    if keep_maps:
        evaluation.edge_map = pyramid.edge_map
        evaluation.ssim_map = pyramid.ssim_map
    return evaluation


def compare(original: np.ndarray, distorted: np.ndarray, *, channel_order: str = 'bgr') -> float:
    """Dissimilarity in [0, 1]; 0 means the images are identical."""
    return evaluate(original, distorted, channel_order=channel_order).score
