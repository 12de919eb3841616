import logging
import math
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def cosine_similarity(
    vec1: Optional[Sequence[float]],
    vec2: Optional[Sequence[float]]
) -> float:
    """
    Cosine similarity between two vectors.

    Returns 0.0 if either vector is missing or empty, if their
    dimensions differ, or if either has zero norm.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Raw cosine similarity in range [-1.0, 1.0]
    """
    if vec1 is None or vec2 is None:
        return 0.0
    if len(vec1) == 0 or len(vec2) == 0 or len(vec1) != len(vec2):
        return 0.0

    a = np.asarray(vec1, dtype=float)
    b = np.asarray(vec2, dtype=float)
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def to_percent(score: float) -> int:
    """Fraction in [0, 1] as a whole percentage, halves rounded up."""
    return int(math.floor(float(score) * 100 + 0.5))
