# errors.py
import numpy as np


class SsimulacraError(Exception):
    """Base class for every failure that aborts a comparison."""


class DimensionMismatch(SsimulacraError):
    def __init__(self, shape1, shape2):
        self.shape1 = tuple(shape1[:2])
        self.shape2 = tuple(shape2[:2])
        super().__init__(
            f"Image dimensions have to be identical: {self.shape1[1]}x{self.shape1[0]} "
            f"vs {self.shape2[1]}x{self.shape2[0]}"
        )


class ImageTooSmall(SsimulacraError):
    def __init__(self, shape):
        self.shape = tuple(shape[:2])
        super().__init__(
            f"Image is too small ({self.shape[1]}x{self.shape[0]}); "
            "need at least 8 rows and columns"
        )


class ChannelMismatch(SsimulacraError):
    def __init__(self, nchan1: int, nchan2: int):
        self.nchan1 = nchan1
        self.nchan2 = nchan2
        super().__init__(
            f"Images have {nchan1} and {nchan2} channels; can't compare"
        )


class UnsupportedChannelCount(SsimulacraError):
    def __init__(self, nchan: int):
        self.nchan = nchan
        super().__init__(
            f"Can only deal with Grayscale, RGB or RGBA input, got {nchan} channels"
        )


class DecodeFailure(SsimulacraError):
    def __init__(self, path: str, reason: str = None):
        self.path = path
        msg = f"Cannot decode image: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class UnsupportedSampleType(SsimulacraError):
    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        super().__init__(
            f"Expected 8-bit unsigned samples (uint8), got {self.dtype}"
        )
