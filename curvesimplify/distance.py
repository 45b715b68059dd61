from __future__ import annotations
import numpy as np


def point_line_distance(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    """
    Perpendicular distance from p to the infinite line through a and b.
    p, a, b are (3,) or (2,) float.

    A zero-length chord (a == b) has no direction, so the distance to a is
    returned instead.
    """
    ab = b - a
    denom = float(np.dot(ab, ab))
    if denom == 0.0:
        return float(np.linalg.norm(p - a))
    t = float(np.dot(p - a, ab) / denom)
    proj = a + t * ab
    return float(np.linalg.norm(p - proj))
