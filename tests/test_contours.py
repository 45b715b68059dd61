import numpy as np
import cv2

from curvesimplify.contours import contour_curves, simplify_contours


def _rect_mask():
    mask = np.zeros((100, 120), dtype=np.uint8)
    cv2.rectangle(mask, (20, 20), (80, 60), 255, -1)
    return mask


def test_contour_curves_are_dense_3d_loops():
    curves = contour_curves(_rect_mask(), z=2.5)
    assert len(curves) == 1
    pts = curves[0]
    assert pts.ndim == 2 and pts.shape[1] == 3
    # every boundary pixel of a 61x41 rectangle
    assert pts.shape[0] == 2 * (60 + 40)
    assert np.all(pts[:, 2] == 2.5)
    # consecutive points are 8-neighbours, including the seam
    step = np.abs(np.diff(np.vstack([pts, pts[:1]])[:, :2], axis=0)).max(axis=1)
    assert np.all(step == 1)


def test_rectangle_simplifies_to_its_corners():
    simplified = simplify_contours(_rect_mask(), epsilon=0.5)
    assert len(simplified) == 1
    corners = {(int(x), int(y)) for x, y, _ in simplified[0]}
    assert corners == {(20, 20), (80, 20), (80, 60), (20, 60)}


def test_tiny_blobs_are_skipped():
    mask = _rect_mask()
    mask[90, 5] = 255  # single pixel, one contour point
    curves = contour_curves(mask)
    assert len(curves) == 1


def test_empty_mask_has_no_contours():
    assert contour_curves(np.zeros((10, 10), dtype=np.uint8)) == []
