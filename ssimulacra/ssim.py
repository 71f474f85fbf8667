# ssim.py
"""
Multi-scale SSIM over a Gaussian pyramid of normalized buffers.

Each level computes the standard local-statistics SSIM map, scores its mean
and its worst 4x4 block per channel, then halves both buffers. Level 0 also
feeds the edge and grid artifact detectors.
"""
import logging
from dataclasses import dataclass

import cv2
import numpy as np

from .artifacts import edge_difference, edge_score, grid_artifacts
from .raster import as_planes
from .score import ScoreAccumulator
from .weights import (
    BLUR_KSIZE, BLUR_SIGMA, C1, C2, CHROMA_WEIGHT, EDGE_MAP, MIN_SIZE,
    MIN_WEIGHT, MSCALE_WEIGHTS, NUM_SCALES, SCALE_WEIGHTS, SSIM_MAP
)


@dataclass
class PyramidResult:
    levels: int
    edge_map: np.ndarray = None
    ssim_map: np.ndarray = None


def blur(img: np.ndarray) -> np.ndarray:
    return as_planes(cv2.GaussianBlur(img, BLUR_KSIZE, BLUR_SIGMA))


def downscale(img: np.ndarray, factor: float) -> np.ndarray:
    return as_planes(cv2.resize(img, (0, 0), fx=factor, fy=factor,
                                interpolation=cv2.INTER_AREA))


def ssim_numerator(img1, img2, mu1, mu2) -> np.ndarray:
    mu1_mu2 = mu1 * mu2 * 2
    sigma12 = blur(img1 * img2) * 2 - mu1_mu2 + C2
    return (mu1_mu2 + C1) * sigma12


def ssim_denominator(img1, img2, mu1, mu2) -> np.ndarray:
    mu_sq = mu1 ** 2 + mu2 ** 2
    sigma_sq = (blur(img1 ** 2) + blur(img2 ** 2)) - mu_sq + C2
    return (mu_sq + C1) * sigma_sq


def score_average(ssim_map: np.ndarray, nchan: int, scale: int, acc: ScoreAccumulator):
    avg = ssim_map.mean(axis=(0, 1))
    for i in range(nchan):
        factor = CHROMA_WEIGHT if i > 0 else 1.0
        acc.add(factor * avg[i] * SCALE_WEIGHTS[i][scale],
                factor * SCALE_WEIGHTS[i][scale])
    return avg


def score_worst_block(ssim_map: np.ndarray, nchan: int, scale: int, acc: ScoreAccumulator):
    """Worst SSIM of a 4x4 block; larger blocks are covered by the coarser scales."""
    worst = downscale(ssim_map, 0.25).min(axis=(0, 1))
    for i in range(nchan):
        acc.add(MIN_WEIGHT[i] * worst[i] * MSCALE_WEIGHTS[i][scale],
                MIN_WEIGHT[i] * MSCALE_WEIGHTS[i][scale])
    return worst


def evaluate_pyramid(img1: np.ndarray, img2: np.ndarray, acc: ScoreAccumulator) -> PyramidResult:
    """
    Run up to NUM_SCALES levels over two normalized (H, W, C) buffers.

    Stops early once either dimension drops below MIN_SIZE. Returns the number
    of levels scored with the level-0 edge-difference and SSIM maps.
    """
    nchan = img1.shape[2]
    result = PyramidResult(levels=0)

    for scale in range(NUM_SCALES):
        height, width = img1.shape[:2]
        if height < MIN_SIZE or width < MIN_SIZE:
            break

        mu1 = blur(img1)
        mu2 = blur(img2)
        numerator = ssim_numerator(img1, img2, mu1, mu2)

        if scale == 0:
            result.edge_map = edge_difference(img1, img2, mu1, mu2)
            inverted = 1.0 - result.edge_map
            acc.add(*edge_score(inverted, nchan))
            acc.add(*grid_artifacts(inverted, nchan, EDGE_MAP))

        ssim_map = numerator / ssim_denominator(img1, img2, mu1, mu2)

        # full-resolution buffers are no longer needed at this scale
        img1 = downscale(img1, 0.5)
        img2 = downscale(img2, 0.5)

        if scale == 0:
            acc.add(*grid_artifacts(ssim_map, nchan, SSIM_MAP))
            result.ssim_map = ssim_map

        avg = score_average(ssim_map, nchan, scale, acc)
        worst = score_worst_block(ssim_map, nchan, scale, acc)
        result.levels += 1
        logging.info('Scale %d (%dx%d): mean SSIM %s, worst block %s, score %.6f / %.6f',
                     scale, width, height, np.round(avg[:nchan], 6),
                     np.round(worst[:nchan], 6), acc.score, acc.score_max)

    return result
