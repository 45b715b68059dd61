import numpy as np
from curvesimplify.distance import point_line_distance


def test_perpendicular_distance_to_axis():
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([2.0, 0.0, 0.0])
    p = np.array([1.0, 3.0, 4.0])
    assert abs(point_line_distance(p, a, b) - 5.0) < 1e-12


def test_line_is_infinite_not_a_segment():
    # p projects beyond b, distance is still measured to the line
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([1.0, 0.0, 0.0])
    p = np.array([10.0, 2.0, 0.0])
    assert abs(point_line_distance(p, a, b) - 2.0) < 1e-12


def test_point_on_line_has_zero_distance():
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([3.0, 3.0, 3.0])
    p = np.array([1.0, 1.0, 1.0])
    assert point_line_distance(p, a, b) < 1e-12


def test_zero_length_chord_falls_back_to_point_distance():
    a = np.array([1.0, 1.0, 1.0])
    p = np.array([4.0, 5.0, 1.0])
    d = point_line_distance(p, a, a.copy())
    assert not np.isnan(d)
    assert abs(d - 5.0) < 1e-12


def test_works_for_2d_points():
    a = np.array([0.0, 0.0])
    b = np.array([0.0, 10.0])
    p = np.array([-3.0, 7.0])
    assert abs(point_line_distance(p, a, b) - 3.0) < 1e-12
