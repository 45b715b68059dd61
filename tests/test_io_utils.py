import os
import tempfile

import numpy as np
import pytest

from curvesimplify.io_utils import load_curves_npz, load_mask_npz, save_curves_npz, save_mask_npz


def test_curves_npz_roundtrip_and_types():
    positions = np.arange(30, dtype=float).reshape(10, 3)
    offsets = np.array([0, 4, 10], dtype=np.int32)
    cyclic = np.array([True, False])

    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, "curves.npz")
        save_curves_npz(p, positions, offsets, cyclic)
        pos2, off2, cyc2 = load_curves_npz(p)

    assert np.array_equal(pos2, positions)
    assert off2.dtype == np.int64
    assert off2.tolist() == [0, 4, 10]
    assert cyc2.dtype == np.bool_
    assert cyc2.tolist() == [True, False]


def test_positions_only_file_is_one_open_curve():
    positions = np.zeros((6, 3))
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, "single.npz")
        np.savez_compressed(p, positions=positions)
        _, off, cyc = load_curves_npz(p)
    assert off.tolist() == [0, 6]
    assert cyc.tolist() == [False]


def test_missing_positions_raises_keyerror():
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, "bad.npz")
        np.savez_compressed(p, offsets=np.array([0, 1]))
        with pytest.raises(KeyError):
            load_curves_npz(p)


def test_mask_npz_roundtrip():
    mask = np.array([False, True, True, False])
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, "mask.npz")
        save_mask_npz(p, mask)
        assert load_mask_npz(p).tolist() == mask.tolist()


def test_save_rejects_mismatched_mask():
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, "curves.npz")
        with pytest.raises(ValueError):
            save_curves_npz(p, np.zeros((4, 3)), [0, 4], False, mask=np.zeros(3, dtype=bool))
