"""
Defaults and the validated parameter bundle for curve simplification.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any

DEFAULT_EPSILON = 0.01
"""Default deviation tolerance, in the units of the point coordinates."""

MIN_POINTS = 3
"""Curves shorter than this have no interior point to remove."""

POINT_DIMS = (2, 3)
"""Accepted coordinate counts per point."""


def check_epsilon(epsilon: float) -> float:
    eps = float(epsilon)
    if not math.isfinite(eps) or eps < 0.0:
        raise ValueError(f"epsilon must be a finite number >= 0, got {epsilon!r}")
    return eps


@dataclass(frozen=True)
class SimplifyConfig:
    epsilon: float = DEFAULT_EPSILON
    closed: bool = False

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "epsilon", check_epsilon(self.epsilon))
        object.__setattr__(self, "closed", bool(self.closed))

    @classmethod
    def from_args(cls, args: Any) -> "SimplifyConfig":
        """
        Build from an argparse namespace with `eps` and `closed` attributes.
        Missing attributes fall back to the defaults.
        """
        return cls(
            epsilon=getattr(args, "eps", DEFAULT_EPSILON),
            closed=getattr(args, "closed", False),
        )
