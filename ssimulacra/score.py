# score.py
from dataclasses import dataclass


@dataclass
class ScoreAccumulator:
    """
    Running weighted sum of similarity signals.

    Every signal adds weight * value to `score` and its weight to `score_max`,
    so a perfect match keeps the two equal whatever number of scales ran.
    """
    score: float = 0.0
    score_max: float = 0.0

    def add(self, score_delta: float, weight_delta: float):
        self.score += score_delta
        self.score_max += weight_delta

    def finalize(self) -> float:
        """
        Map the sums to a dissimilarity in [0, 1]: 0 for identical images,
        above ~0.1 likely annoying, below ~0.01 likely imperceptible.
        """
        if self.score <= 0:
            return 1.0
        result = self.score_max / self.score - 1
        if result < 0:  # should not happen
            return 0.0
        if result > 1:  # very different images
            return 1.0
        return result
