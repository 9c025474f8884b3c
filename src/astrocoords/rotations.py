"""
astrocoords.rotations — Rodrigues Rotation Engine
===================================================

Arbitrary-axis rigid rotation.  Every higher-level transform in the
package (frame alignment, orbit placement, the relative-direction
transform) is built from repeated calls into this module.

For a unit axis u = (uₓ, u_y, u_z) and angle θ, with c = cos θ and
s = sin θ::

        | c + uₓ²(1−c)         uₓu_y(1−c) − u_z s   uₓu_z(1−c) + u_y s |
    R = | u_yuₓ(1−c) + u_z s   c + u_y²(1−c)        u_yu_z(1−c) − uₓ s |
        | u_zuₓ(1−c) − u_y s   u_zu_y(1−c) + uₓ s   c + u_z²(1−c)      |

This is R = c·I + (1−c)·u uᵀ + s·[u]ₓ, a right-handed *active* rotation:
rotating x̂ by +90° about ẑ gives ŷ.

.. warning::

   The axis is **not** normalized here.  A non-unit axis silently yields a
   scaled / skewed, non-rigid transform.  Pass a ``Direction`` (which is
   unit length by construction) or normalize the axis yourself.
"""

import numpy as np
from numpy.typing import NDArray

from .angle import Angle


def _radians(angle) -> float:
    return angle.radians if isinstance(angle, Angle) else float(angle)


def _axis_components(axis) -> NDArray:
    # Direction and CartesianCoordinates iterate as (x, y, z)
    return np.asarray(tuple(axis), dtype=np.float64)


def rotation_matrix_axis_angle(axis, angle) -> NDArray:
    """Rotation matrix via Rodrigues' formula (right-hand, active rotation).

    Parameters
    ----------
    axis : Direction or (3,) array — rotation axis, **must be unit length**
    angle : Angle or float — rotation angle [rad]

    Returns
    -------
    R : (3,3) ndarray — rotation matrix
    """
    k = _axis_components(axis)
    theta = _radians(angle)
    c, s = np.cos(theta), np.sin(theta)
    K = np.array([
        [0, -k[2], k[1]],
        [k[2], 0, -k[0]],
        [-k[1], k[0], 0],
    ])
    return np.eye(3) * c + (1.0 - c) * np.outer(k, k) + s * K


def _apply_dcm(R: NDArray, vec: NDArray) -> NDArray:
    """Apply 3×3 matrix to a single (3,) or batch (N,3) of vectors."""
    vec = np.asarray(vec, dtype=np.float64)
    if vec.ndim == 1:
        return R @ vec
    return (R @ vec.T).T


def rotate_vectors(vec: NDArray, angle, axis) -> NDArray:
    """Rotate vector(s) by ``angle`` about the unit ``axis``.

    Parameters
    ----------
    vec : (3,) or (N,3) array
    angle : Angle or float [rad]
    axis : Direction or (3,) array — must be unit length

    Returns
    -------
    rotated : same shape as ``vec``
    """
    return _apply_dcm(rotation_matrix_axis_angle(axis, angle), vec)


def rotated_tuple(values, angle, axis) -> tuple:
    """Rotate a 3-tuple of same-unit scalar quantities.

    Only ``quantity * float`` and ``quantity + quantity`` are required of
    the elements, so unit-carrying scalars from an external units layer pass
    through with their units intact.  Plain floats come back as floats.
    """
    x, y, z = values
    R = rotation_matrix_axis_angle(axis, angle).tolist()
    return (
        x * R[0][0] + y * R[0][1] + z * R[0][2],
        x * R[1][0] + y * R[1][1] + z * R[1][2],
        x * R[2][0] + y * R[2][1] + z * R[2][2],
    )
