from __future__ import annotations
import argparse
import logging
import os
import zipfile

import numpy as np

from curvesimplify.batch import compact_curves, simplify_curves
from curvesimplify.config import DEFAULT_EPSILON, SimplifyConfig
from curvesimplify.io_utils import load_curves_npz, save_curves_npz, save_mask_npz
from curvesimplify.logging_config import setup_logging


def main():
    ap = argparse.ArgumentParser(description="Simplify packed curves stored in an .npz file.")
    ap.add_argument("--in", dest="inp", type=str, required=True)
    ap.add_argument("--out", type=str, default="runs/simplified.npz")
    ap.add_argument("--eps", type=float, default=DEFAULT_EPSILON)
    ap.add_argument("--closed", action="store_true",
                    help="treat every curve as closed, overriding the file's cyclic flags")
    ap.add_argument("--mask-only", action="store_true",
                    help="write only the removal mask instead of the compacted curves")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    log = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = SimplifyConfig.from_args(args)
    except ValueError as e:
        raise SystemExit(str(e))

    if not os.path.isfile(args.inp):
        raise SystemExit(f"Could not read curves: {args.inp}")
    try:
        positions, offsets, cyclic = load_curves_npz(args.inp)
    except (OSError, ValueError, KeyError, zipfile.BadZipFile) as e:
        raise SystemExit(f"Could not read curves: {args.inp}: {e}")
    if cfg.closed:
        cyclic = np.ones_like(cyclic)

    mask = simplify_curves(positions, offsets, cyclic, cfg.epsilon)
    log.info("%d curves, %d points, %d removable (epsilon=%g)",
             offsets.shape[0] - 1, positions.shape[0], int(mask.sum()), cfg.epsilon)

    # np.savez_compressed appends .npz itself when it is missing
    out = args.out if args.out.endswith(".npz") else args.out + ".npz"
    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    if args.mask_only:
        save_mask_npz(out, mask)
    else:
        new_pos, new_off = compact_curves(positions, offsets, mask)
        save_curves_npz(out, new_pos, new_off, cyclic)
    log.info("wrote %s", out)


if __name__ == "__main__":
    main()
