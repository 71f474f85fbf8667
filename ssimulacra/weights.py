# weights.py
"""
Fixed constants of the metric.

All of these are more or less arbitrary; some calibration was done but they
are configuration, not behavior. Tables are indexed [channel][scale] with
channel 0 = luma, 1/2 = chroma, 3 = alpha.
"""

# SSIM stabilizers. The textbook C2 is 0.0009; a smaller value works slightly better.
C1 = 0.0001
C2 = 0.0004

NUM_SCALES = 6
MIN_SIZE = 8

# Gaussian window for local statistics
BLUR_KSIZE = (11, 11)
BLUR_SIGMA = 1.5

# Weight of the average SSIM at each scale. Zoomed-out scales weigh more;
# chroma is shifted towards the larger scales.
SCALE_WEIGHTS = (
    # 1:1    1:2     1:4     1:8     1:16    1:32
    (0.0448, 0.2856, 0.3001, 0.2363, 0.1333, 0.1),
    (0.015, 0.0448, 0.2856, 0.3001, 0.3363, 0.25),
    (0.015, 0.0448, 0.2856, 0.3001, 0.3363, 0.25),
    (0.0448, 0.2856, 0.3001, 0.2363, 0.1333, 0.1),
)

# Extra factor on SCALE_WEIGHTS for every channel but luma
CHROMA_WEIGHT = 0.2

# Weight of the worst 4x4 block at each scale
MSCALE_WEIGHTS = (
    # 1:4   1:8   1:16  1:32  1:64  1:128
    (0.2, 0.3, 0.25, 0.2, 0.12, 0.05),
    (0.01, 0.05, 0.2, 0.3, 0.35, 0.35),
    (0.01, 0.05, 0.2, 0.3, 0.35, 0.35),
    (0.2, 0.3, 0.25, 0.2, 0.12, 0.05),
)

MIN_WEIGHT = (0.1, 0.005, 0.005, 0.005)

# Edges introduced where the original is smooth
EXTRA_EDGES_WEIGHT = (1.5, 0.1, 0.1, 0.5)

SSIM_MAP = 0
EDGE_MAP = 1

# Blockiness, indexed [variant][channel]
WORST_GRID_WEIGHT = (
    (1.0, 0.1, 0.1, 0.5),  # on the SSIM map
    (1.0, 0.1, 0.1, 0.5),  # on the artifact-edge map
)

# Rows/columns skipped from the worst end: index rows // GRID_PERCENTILE_DIVISOR
GRID_PERCENTILE_DIVISOR = 50
