from __future__ import annotations
import numpy as np
import cv2

from curvesimplify.config import MIN_POINTS, check_epsilon
from curvesimplify.simplify import simplify_mask
from curvesimplify.polyline import remove_marked


def contour_curves(mask: np.ndarray, *, min_points: int = MIN_POINTS, z: float = 0.0) -> list[np.ndarray]:
    """
    Trace the outer boundaries of a binary mask as closed 3D curves.

    mask: (H,W) any dtype, nonzero = inside
    Returns a list of (K,3) float arrays with x, y in pixels and a constant z.
    Every boundary pixel is kept (no chain approximation), so the result is
    a dense loop ready for simplification. Contours with fewer than
    min_points points are skipped.
    """
    m = np.asarray(mask)
    if m.ndim != 2:
        raise ValueError("mask must have shape (H,W)")
    m01 = (m > 0).astype(np.uint8)

    contours, _ = cv2.findContours(m01, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_NONE)

    curves = []
    for c in contours:
        xy = c.reshape(-1, 2).astype(float)
        if xy.shape[0] < min_points:
            continue
        pts = np.empty((xy.shape[0], 3), dtype=float)
        pts[:, :2] = xy
        pts[:, 2] = z
        curves.append(pts)
    return curves


def simplify_contours(mask: np.ndarray, epsilon: float, **kwargs) -> list[np.ndarray]:
    """
    Trace the mask boundaries and simplify each one as a closed curve.
    epsilon is in pixels. Returns the kept points of every contour.
    """
    eps = check_epsilon(epsilon)
    out = []
    for pts in contour_curves(mask, **kwargs):
        keep_mask = simplify_mask(pts, closed=True, epsilon=eps)
        out.append(remove_marked(pts, keep_mask))
    return out
