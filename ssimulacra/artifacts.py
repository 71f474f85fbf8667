# artifacts.py
"""
Penalties for compression artifacts that plain SSIM under-weights.

Both detectors return a (score_delta, weight_delta) pair for the caller to
add to its accumulator.
"""
import logging

import numpy as np

from .weights import EXTRA_EDGES_WEIGHT, GRID_PERCENTILE_DIVISOR, WORST_GRID_WEIGHT


def edge_difference(img1: np.ndarray, img2: np.ndarray,
                    mu1: np.ndarray, mu2: np.ndarray) -> np.ndarray:
    """
    Positive where the distorted image has an edge the original lacks.

    Asymmetric: introducing edges (blockiness, banding, ringing, mosquito noise)
    is penalized, smoothing edges away is not.
    """
    return np.maximum(np.abs(img2 - mu2) - np.abs(img1 - mu1), 0)


def edge_score(edge_map: np.ndarray, nchan: int) -> tuple:
    """Weighted per-channel average of an inverted edge-difference map (1 = no artifact)."""
    avg = edge_map.mean(axis=(0, 1))
    score = weight = 0.0
    for i in range(nchan):
        score += EXTRA_EDGES_WEIGHT[i] * avg[i]
        weight += EXTRA_EDGES_WEIGHT[i]
    logging.debug('Edge artifacts: averages %s', avg[:nchan])
    return score, weight


def _percentile_worst(means: np.ndarray) -> np.ndarray:
    # ascending order, index 0 is the worst line
    k = means.shape[0] // GRID_PERCENTILE_DIVISOR
    return np.partition(means, k, axis=0)[k]


def grid_artifacts(errormap: np.ndarray, nchan: int, variant: int) -> tuple:
    """
    Score the 2nd-percentile worst row and column of `errormap`.

    Block-based codecs leave artifacts along block borders, so even with 32x32
    blocks the 2nd percentile row is likely to be one of those borders, while
    a lone bad row does not dominate the way a plain minimum would.
    `variant` selects the WORST_GRID_WEIGHT row (SSIM_MAP or EDGE_MAP).
    """
    weights = WORST_GRID_WEIGHT[variant]
    worst_row = _percentile_worst(errormap.mean(axis=1))
    worst_col = _percentile_worst(errormap.mean(axis=0))

    score = weight = 0.0
    for worst in (worst_row, worst_col):
        for i in range(nchan):
            score += weights[i] * worst[i]
            weight += weights[i]
    logging.debug('Grid artifacts (variant %d): rows %s, columns %s',
                  variant, worst_row[:nchan], worst_col[:nchan])
    return score, weight
