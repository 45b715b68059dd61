from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from curvesimplify.batch import check_cyclic, check_offsets
from curvesimplify.polyline import as_points, check_mask


def load_curves_npz(path: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Load a packed curve set saved by save_curves_npz(...).
    Returns (positions (P,3), offsets (C+1,), cyclic (C,)).
    A file without offsets/cyclic holds a single open curve.
    """
    with np.load(path, allow_pickle=False) as data:
        if "positions" not in data:
            raise KeyError(f"Missing key 'positions' in npz: {path}")

        positions = as_points(data["positions"])
        n = positions.shape[0]

        if "offsets" in data:
            offsets = check_offsets(data["offsets"], n)
        else:
            offsets = np.array([0, n], dtype=np.int64)

        cyclic = data["cyclic"] if "cyclic" in data else False
        cyclic = check_cyclic(cyclic, offsets.shape[0] - 1)

    return positions, offsets, cyclic


def save_curves_npz(
    path: str,
    positions: np.ndarray,
    offsets: np.ndarray,
    cyclic,
    mask: Optional[np.ndarray] = None,
) -> None:
    pts = as_points(positions)
    off = check_offsets(offsets, pts.shape[0])
    payload = {
        "positions": pts,
        "offsets": off,
        "cyclic": check_cyclic(cyclic, off.shape[0] - 1),
    }
    if mask is not None:
        payload["mask"] = check_mask(np.asarray(mask), pts.shape[0])
    np.savez_compressed(path, **payload)


def save_mask_npz(path: str, mask: np.ndarray) -> None:
    m = np.asarray(mask)
    if m.ndim != 1 or m.dtype != np.bool_:
        raise ValueError("mask must be a (P,) bool array")
    np.savez_compressed(path, mask=m)


def load_mask_npz(path: str) -> np.ndarray:
    with np.load(path, allow_pickle=False) as data:
        if "mask" not in data:
            raise KeyError(f"Missing key 'mask' in npz: {path}")
        return np.asarray(data["mask"], dtype=bool)
