from __future__ import annotations
import numpy as np

from curvesimplify.distance import point_line_distance


def reduce_range(
    points: np.ndarray,
    start: int,
    end: int,
    epsilon: float,
    mask: np.ndarray,
) -> None:
    """
    Ramer-Douglas-Peucker over the closed index range [start, end].

    points[start] and points[end] are the chord of the outer range and are
    never marked. Interior points of every sub-range whose farthest point lies
    within epsilon of its chord get mask[i] = True; the farthest point of a
    sub-range that exceeds epsilon splits it in two and stays unmarked.

    Uses an explicit stack of (start, end) ranges, so depth is bounded by
    memory rather than by the interpreter recursion limit.
    """
    stack = [(int(start), int(end))]
    while stack:
        i, j = stack.pop()
        if j <= i + 1:
            continue
        a, b = points[i], points[j]

        max_d = 0.0
        kmax = i
        for k in range(i + 1, j):
            d = point_line_distance(points[k], a, b)
            if d > max_d:
                max_d = d
                kmax = k

        if max_d > epsilon:
            stack.append((kmax, j))
            stack.append((i, kmax))
        else:
            mask[i + 1:j] = True
