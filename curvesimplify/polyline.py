from __future__ import annotations
import numpy as np

from curvesimplify.config import POINT_DIMS


def as_points(points) -> np.ndarray:
    """
    points: (N,3) or (N,2), any numeric array-like. Returns a float array.
    An empty sequence becomes shape (0,3).
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 1 and pts.size == 0:
        return pts.reshape(0, 3)
    if pts.ndim != 2 or pts.shape[1] not in POINT_DIMS:
        raise ValueError("points must have shape (N,3) or (N,2)")
    return pts


def check_mask(mask: np.ndarray, n: int) -> np.ndarray:
    """
    The classification mask is written in place, so it has to be a writable
    bool ndarray of exactly n entries.
    """
    if not isinstance(mask, np.ndarray):
        raise ValueError("mask must be a numpy array")
    if mask.dtype != np.bool_:
        raise ValueError(f"mask must have dtype bool, got {mask.dtype}")
    if mask.shape != (n,):
        raise ValueError(f"mask must have shape ({n},) to match points, got {mask.shape}")
    return mask


def remove_marked(points, mask: np.ndarray) -> np.ndarray:
    """
    Drop every point whose mask entry is True. Returns a new array.
    """
    pts = as_points(points)
    check_mask(np.asarray(mask), pts.shape[0])
    return pts[~np.asarray(mask)].copy()
