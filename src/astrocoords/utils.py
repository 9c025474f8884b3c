"""
astrocoords.utils — Foundational Utilities
============================================

Constants, tolerances, the degenerate-input error and the vector
normalization helper shared by every other module.  All pure NumPy.
"""

import numpy as np
from numpy.typing import NDArray

# ── Angular Constants ───────────────────────────────────────────────────────
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
RADIANS_PER_DEGREE = np.pi / 180.0
DEGREES_PER_RADIAN = 180.0 / np.pi
ARCSECS_PER_RADIAN = 3600.0 * DEGREES_PER_RADIAN
RADIANS_PER_ARCSEC = 1.0 / ARCSECS_PER_RADIAN

# ── Physical Constants ──────────────────────────────────────────────────────
EARTH_OBLIQUITY = 23.4392911 * RADIANS_PER_DEGREE   # J2000 mean obliquity [rad]
GRAVITATIONAL_CONSTANT = 6.67430e-11                # [m³/(kg·s²)]

# ── Tolerances ──────────────────────────────────────────────────────────────
NORMALIZATION_THRESHOLD = 1e-15            # physical vectors [m]
DIRECTION_NORMALIZATION_THRESHOLD = 1e-5   # dimensionless direction components
SERIALIZATION_ACCURACY = 1e-3              # Direction component rounding
SEAM_SNAP_ULPS = 4                         # wrap_two_pi snapping at 0 / 2π


class DegenerateInputError(ValueError):
    """Raised when a geometric quantity is undefined for the given input.

    Typical causes: normalizing a zero-length vector, or taking the cross
    product of two parallel directions.
    """


# ── Vector Helpers ──────────────────────────────────────────────────────────

def normalize(v: NDArray, threshold: float = NORMALIZATION_THRESHOLD) -> NDArray:
    """Return unit vector.  Works on single vectors or (N,3) arrays.

    Raises
    ------
    DegenerateInputError
        If any vector is shorter than ``threshold``.
    """
    v = np.asarray(v, dtype=np.float64)
    if v.ndim == 1:
        mag = np.linalg.norm(v)
        if mag < threshold:
            raise DegenerateInputError("Cannot normalize a near-zero vector.")
        return v / mag
    elif v.ndim == 2:
        mag = np.linalg.norm(v, axis=1, keepdims=True)
        if np.any(mag < threshold):
            raise DegenerateInputError("Cannot normalize a near-zero vector.")
        return v / mag
    else:
        raise ValueError(f"Expected 1-D or 2-D array, got {v.ndim}-D.")


def wrap_two_pi(radians: float) -> float:
    """Fold ``radians`` into [0, 2π) with a single modulo.

    Results within ``SEAM_SNAP_ULPS`` units in the last place (of the input's
    magnitude) of 0 or 2π are snapped to exactly 0, so ``2πk`` folds to 0.0
    for any integer ``k`` rather than to a rounding residue.
    """
    wrapped = float(np.mod(radians, TWO_PI))
    snap = SEAM_SNAP_ULPS * np.spacing(max(abs(radians), TWO_PI))
    # np.mod can round a tiny negative input up to exactly 2π
    if wrapped < snap or wrapped > TWO_PI - snap:
        wrapped = 0.0
    return wrapped
