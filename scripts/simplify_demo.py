from __future__ import annotations
import argparse
import logging
import os

import cv2
import numpy as np
import matplotlib.pyplot as plt

from curvesimplify.config import SimplifyConfig
from curvesimplify.contours import contour_curves
from curvesimplify.logging_config import setup_logging
from curvesimplify.polyline import remove_marked
from curvesimplify.simplify import simplify_mask


def synthetic_curve(n=400, noise=0.02, closed=False, seed=0) -> np.ndarray:
    """
    Noisy 3D test curve: a helix turn when open, a wobbly ring when closed.
    Returns (n,3) float.
    """
    rng = np.random.default_rng(seed)
    if closed:
        t = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
        r = 1.0 + 0.25 * np.sin(5.0 * t)
        pts = np.stack([r * np.cos(t), r * np.sin(t), 0.1 * np.sin(3.0 * t)], axis=1)
    else:
        t = np.linspace(0.0, 2.0 * np.pi, n)
        pts = np.stack([np.cos(t), np.sin(t), 0.2 * t], axis=1)
    return pts + rng.normal(scale=noise, size=pts.shape)


def synthetic_mask(w=400, h=300) -> np.ndarray:
    """
    Binary blob with straight and curved edges. Returns uint8 {0,255}.
    """
    m = np.zeros((h, w), dtype=np.uint8)
    cv2.rectangle(m, (40, 60), (220, 240), 255, -1)
    cv2.circle(m, (260, 150), 90, 255, -1)
    return m


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--in", dest="inp", type=str, default=None,
                    help="optional image; its mask contours are simplified as closed curves")
    ap.add_argument("--synthetic-mask", action="store_true",
                    help="simplify the contours of a built-in test mask")
    ap.add_argument("--out", type=str, default="runs/simplify_demo.png")
    ap.add_argument("--eps", type=float, default=None)
    ap.add_argument("--closed", action="store_true")
    ap.add_argument("--n", type=int, default=400)
    ap.add_argument("--noise", type=float, default=0.02)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    log = setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    from_image = args.inp is not None or args.synthetic_mask
    if from_image:
        if args.inp is not None:
            gray = cv2.imread(args.inp, cv2.IMREAD_GRAYSCALE)
            if gray is None:
                raise SystemExit(f"Could not read image: {args.inp}")
            _, m = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY | cv2.THRESH_OTSU)
        else:
            m = synthetic_mask()
        curves = contour_curves(m)
        closed = True
        eps = 2.0 if args.eps is None else args.eps
    else:
        curves = [synthetic_curve(args.n, args.noise, closed=args.closed)]
        closed = args.closed
        eps = 0.05 if args.eps is None else args.eps

    cfg = SimplifyConfig(epsilon=eps, closed=closed)

    plt.figure(figsize=(8, 6))
    for pts in curves:
        mask = simplify_mask(pts, closed=cfg.closed, epsilon=cfg.epsilon)
        kept = remove_marked(pts, mask)
        log.info("curve: %d points -> %d kept", pts.shape[0], kept.shape[0])

        if cfg.closed:
            pts = np.vstack([pts, pts[:1]])
            kept = np.vstack([kept, kept[:1]])
        plt.plot(pts[:, 0], pts[:, 1], linewidth=1, alpha=0.4, label="original")
        plt.plot(kept[:, 0], kept[:, 1], linewidth=1.5, marker="o", markersize=3, label="simplified")

    if from_image:
        plt.gca().invert_yaxis()
    plt.title(f"RDP simplification (epsilon={cfg.epsilon:g}, closed={cfg.closed})")
    plt.axis("equal")
    handles, labels = plt.gca().get_legend_handles_labels()
    plt.legend(handles[:2], labels[:2], loc="lower left")
    plt.tight_layout()
    plt.savefig(args.out, dpi=150)
    log.info("wrote %s", args.out)


if __name__ == "__main__":
    main()
