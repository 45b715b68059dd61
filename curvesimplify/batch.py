from __future__ import annotations
import logging
from typing import Optional, Tuple

import numpy as np

from curvesimplify.config import DEFAULT_EPSILON, check_epsilon
from curvesimplify.polyline import as_points, check_mask
from curvesimplify.simplify import StatsHook, curve_simplify

logger = logging.getLogger(__name__)


def check_offsets(offsets, n_points: int) -> np.ndarray:
    """
    offsets: (C+1,) int, offsets[0] == 0, offsets[-1] == n_points, non-decreasing.
    Curve c owns points offsets[c]:offsets[c+1].
    """
    off = np.asarray(offsets)
    if off.ndim != 1 or off.shape[0] < 1:
        raise ValueError("offsets must have shape (C+1,)")
    if not np.issubdtype(off.dtype, np.integer):
        raise ValueError(f"offsets must be integers, got {off.dtype}")
    off = off.astype(np.int64)
    if off[0] != 0 or off[-1] != n_points:
        raise ValueError(f"offsets must start at 0 and end at {n_points}")
    if np.any(np.diff(off) < 0):
        raise ValueError("offsets must be non-decreasing")
    return off


def check_cyclic(cyclic, n_curves: int) -> np.ndarray:
    """
    cyclic: a single bool for every curve, or (C,) bool.
    """
    cyc = np.asarray(cyclic, dtype=bool)
    if cyc.ndim == 0:
        return np.full(n_curves, bool(cyc))
    if cyc.shape != (n_curves,):
        raise ValueError(f"cyclic must be a bool or have shape ({n_curves},)")
    return cyc


def simplify_curves(
    positions,
    offsets,
    cyclic=False,
    epsilon: float = DEFAULT_EPSILON,
    mask: Optional[np.ndarray] = None,
    *,
    on_stats: Optional[StatsHook] = None,
) -> np.ndarray:
    """
    Run curve_simplify once per curve of a packed curve set.

    positions: (P,3) all points of all curves back to back
    offsets:   (C+1,) curve boundaries into positions
    cyclic:    bool or (C,) bool
    mask:      optional (P,) bool output; allocated when omitted
    Returns the (P,) bool mask, True = point may be removed.
    """
    pts = as_points(positions)
    off = check_offsets(offsets, pts.shape[0])
    n_curves = off.shape[0] - 1
    cyc = check_cyclic(cyclic, n_curves)
    eps = check_epsilon(epsilon)

    if mask is None:
        mask = np.zeros(pts.shape[0], dtype=bool)
    check_mask(mask, pts.shape[0])

    for c in range(n_curves):
        a, b = int(off[c]), int(off[c + 1])
        # mask[a:b] is a view, so the per-curve call writes straight through
        curve_simplify(pts[a:b], bool(cyc[c]), eps, mask[a:b], on_stats=on_stats)

    logger.debug("simplify_curves: %d curves, %d points, marked %d",
                 n_curves, pts.shape[0], int(np.count_nonzero(mask)))
    return mask


def compact_curves(positions, offsets, mask: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Remove marked points from a packed curve set.
    Returns (positions, offsets) of the compacted set.
    """
    pts = as_points(positions)
    off = check_offsets(offsets, pts.shape[0])
    m = check_mask(np.asarray(mask), pts.shape[0])

    keep = ~m
    # number of kept points before each boundary
    kept_before = np.concatenate([[0], np.cumsum(keep)])
    new_off = kept_before[off].astype(np.int64)
    return pts[keep].copy(), new_off
