import numpy as np
import pytest


def flat(height, width, value=128, channels=3):
    shape = (height, width) if channels == 1 else (height, width, channels)
    return np.full(shape, value, dtype=np.uint8)


def gradient(height=64, width=64, channels=3, low=96, high=160):
    row = np.linspace(low, high, width).round().astype(np.uint8)
    img = np.tile(row, (height, 1))
    if channels == 1:
        return img
    return np.repeat(img[:, :, np.newaxis], channels, axis=2)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def textured(rng):
    """64x64 BGR image with some structure and noise."""
    yy, xx = np.mgrid[:64, :64]
    base = 128 + 40 * np.sin(xx / 5.0) * np.cos(yy / 7.0)
    img = np.stack([base, base * 0.9 + 10, base * 0.8 + 30], axis=2)
    img += rng.normal(0, 4, img.shape)
    return np.clip(img, 0, 255).round().astype(np.uint8)
