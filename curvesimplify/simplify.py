from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from curvesimplify.config import DEFAULT_EPSILON, MIN_POINTS, SimplifyConfig, check_epsilon
from curvesimplify.polyline import as_points, check_mask, remove_marked
from curvesimplify.reduce import reduce_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimplifyStats:
    n_points: int
    closed: bool
    epsilon: float
    n_marked: int


StatsHook = Callable[[SimplifyStats], None]


def _simplify_cyclic(pts: np.ndarray, epsilon: float, mask: np.ndarray) -> None:
    # close the loop with a copy of the first point; its own flag is dropped
    n = pts.shape[0]
    ext = np.empty((n + 1, pts.shape[1]), dtype=float)
    ext[:n] = pts
    ext[n] = pts[0]

    ext_mask = np.zeros(n + 1, dtype=bool)
    reduce_range(ext, 0, n, epsilon, ext_mask)
    mask[:] = ext_mask[:n]


def curve_simplify(
    points,
    closed: bool,
    epsilon: float,
    mask: np.ndarray,
    *,
    on_stats: Optional[StatsHook] = None,
) -> None:
    """
    Mark the points of one curve that can be removed while the simplified
    curve stays within epsilon of the original.

    points:  (N,3) or (N,2)
    closed:  True if the last point connects back to the first
    epsilon: max allowed perpendicular deviation (>= 0)
    mask:    (N,) bool, caller-owned; overwritten in place,
             True = point may be removed
    on_stats: optional callback receiving a SimplifyStats after each call

    Open curves always keep their first and last point. Closed curves always
    keep point 0; point N-1 is an ordinary interior point of the loop.
    """
    pts = as_points(points)
    n = pts.shape[0]
    eps = check_epsilon(epsilon)
    check_mask(mask, n)

    mask[:] = False

    if n >= MIN_POINTS:
        if closed:
            _simplify_cyclic(pts, eps, mask)
        else:
            reduce_range(pts, 0, n - 1, eps, mask)

    n_marked = int(np.count_nonzero(mask))
    logger.debug("curve_simplify: %d points, closed=%s, epsilon=%g, marked %d",
                 n, bool(closed), eps, n_marked)
    if on_stats is not None:
        on_stats(SimplifyStats(n_points=n, closed=bool(closed), epsilon=eps, n_marked=n_marked))


def simplify_mask(points, closed: bool = False, epsilon: float = DEFAULT_EPSILON, **kwargs) -> np.ndarray:
    """
    Allocating variant of curve_simplify. Returns the (N,) bool mask.
    """
    pts = as_points(points)
    mask = np.zeros(pts.shape[0], dtype=bool)
    curve_simplify(pts, closed, epsilon, mask, **kwargs)
    return mask


def simplify_polyline(points, config: Optional[SimplifyConfig] = None) -> np.ndarray:
    """
    Simplify and compact in one step: returns only the kept points.
    """
    cfg = config if config is not None else SimplifyConfig()
    pts = as_points(points)
    mask = simplify_mask(pts, closed=cfg.closed, epsilon=cfg.epsilon)
    return remove_marked(pts, mask)
