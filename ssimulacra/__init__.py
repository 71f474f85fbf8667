# __init__.py
"""
ssimulacra

Structural SIMilarity Unveiling Local And Compression Related Artifacts.
Multi-scale SSIM in a Lab-like color space, with extra penalties for
introduced edges and block-grid artifacts, reduced to one score between
0 (identical) and 1 (very different).
"""
from .errors import (
    ChannelMismatch, DecodeFailure, DimensionMismatch, ImageTooSmall,
    SsimulacraError, UnsupportedChannelCount, UnsupportedSampleType
)
from .metric import Evaluation, compare, evaluate

__version__ = "0.1.0"
