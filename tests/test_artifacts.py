import numpy as np
import pytest

from ssimulacra.artifacts import edge_difference, edge_score, grid_artifacts
from ssimulacra.weights import EDGE_MAP, EXTRA_EDGES_WEIGHT, SSIM_MAP, WORST_GRID_WEIGHT


def test_edge_difference_only_counts_introduced_edges():
    img1 = np.zeros((1, 3, 1))
    mu1 = np.zeros((1, 3, 1))
    img2 = np.array([[[0.5], [0.1], [0.0]]])
    mu2 = np.full((1, 3, 1), 0.1)
    diff = edge_difference(img1, img2, mu1, mu2)
    assert diff[0, :, 0] == pytest.approx([0.4, 0.0, 0.1])

    # the reverse direction (smoothing) is free
    assert np.all(edge_difference(img2, img1, mu2, mu1) == 0)


def test_edge_score_weights_per_channel():
    edge_map = np.ones((8, 8, 3))
    edge_map[:, :, 0] = 0.5
    score, weight = edge_score(edge_map, 3)
    assert weight == pytest.approx(sum(EXTRA_EDGES_WEIGHT[:3]))
    assert score == pytest.approx(0.5 * 1.5 + 0.1 + 0.1)


def test_grid_uses_worst_line_for_small_maps():
    errormap = np.ones((20, 20, 1))
    errormap[3, :, 0] = 0.2
    errormap[:, 7, 0] = 0.6
    score, weight = grid_artifacts(errormap, 1, SSIM_MAP)
    worst_row = errormap[3].mean()
    worst_col = errormap[:, 7].mean()
    assert weight == pytest.approx(2 * WORST_GRID_WEIGHT[SSIM_MAP][0])
    assert score == pytest.approx(worst_row + worst_col)


def test_grid_skips_two_percent_of_worst_lines():
    # 100 rows: the third worst row is picked (index 100 // 50 == 2)
    values = np.linspace(0.0, 0.99, 100)
    errormap = np.tile(values[:, np.newaxis, np.newaxis], (1, 60, 1))
    score, weight = grid_artifacts(errormap, 1, EDGE_MAP)
    # columns are all identical, their mean is the overall mean
    expected = values[2] + values.mean()
    assert score == pytest.approx(expected)
    assert weight == pytest.approx(2.0)


def test_grid_ignores_single_outlier_row():
    errormap = np.ones((100, 100, 1))
    errormap[50, :, 0] = 0.0
    score, _ = grid_artifacts(errormap, 1, SSIM_MAP)
    # index 2 from the worst end lands on an untouched row
    row_part = score - np.sort(errormap.mean(axis=0)[:, 0])[2]
    assert row_part == pytest.approx(1.0)


def test_grid_only_scores_requested_channels():
    errormap = np.ones((16, 16, 4))
    score, weight = grid_artifacts(errormap, 3, SSIM_MAP)
    assert weight == pytest.approx(2 * sum(WORST_GRID_WEIGHT[SSIM_MAP][:3]))
    assert score == pytest.approx(weight)
