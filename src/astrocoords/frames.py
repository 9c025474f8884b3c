"""
astrocoords.frames — Observer-Local Frames
============================================

Re-expresses sky directions in the local frame of an observer standing on
a (possibly rotating) body.

Frame Definition
----------------

**Observer frame**
  - Z: Observer's surface normal ("up")
  - X: Projection of a rotation reference direction onto the horizon plane
    (azimuth zero)
  - Y: Completes right-hand system

Transform Chain
---------------
::

    ecliptic direction
        │  passive rotation, surface normal → ẑ
        ▼
    normal-up frame   (direction_relative_to_surface_normal)
        │  rotation about ẑ, reference azimuth → x̂
        ▼
    observer frame    (direction_relative_to_normal)

If the rotation reference is parallel to the normal there is no azimuth
zero; the normal-up frame result is returned instead of raising.
"""

import logging

import numpy as np

from .angle import Angle
from .spherical import (
    SphericalCoordinates, EclipticCoordinates, EquatorialCoordinates,
)
from .utils import DegenerateInputError, TWO_PI
from .vectors import Direction

logger = logging.getLogger(__name__)

NON_ROTATING_DAY_THRESHOLD = 1.0   # |sidereal day| at or below this is "no spin" [s]


# ════════════════════════════════════════════════════════════════════════════
#  Relative Direction
# ════════════════════════════════════════════════════════════════════════════

def direction_relative_to_surface_normal(object_direction: Direction,
                                         observer_normal: Direction
                                         ) -> Direction:
    """Express ``object_direction`` in a frame where ``observer_normal`` is ẑ.

    The azimuth of the resulting frame is fixed only by the two-step
    polar/tilt alignment, not by any physical reference.
    """
    return object_direction.passive_rotation_to_new_z_axis(observer_normal)


def direction_relative_to_normal(object_direction: Direction,
                                 observer_normal: Direction,
                                 rotation_reference: Direction) -> Direction:
    """Express ``object_direction`` in the observer frame.

    Parameters
    ----------
    object_direction : Direction — target, in the global frame
    observer_normal : Direction — becomes the new ẑ
    rotation_reference : Direction — its horizon projection becomes the new x̂

    Returns
    -------
    Direction — target in the observer frame.  When ``rotation_reference``
    is parallel to ``observer_normal`` only the ẑ alignment is applied.
    """
    obj = direction_relative_to_surface_normal(object_direction, observer_normal)
    ref = direction_relative_to_surface_normal(rotation_reference,
                                               observer_normal)
    try:
        new_x = Direction(ref.x, ref.y, 0.0)
    except DegenerateInputError:
        logger.debug("Rotation reference %s is parallel to normal %s; "
                     "skipping azimuth alignment.",
                     rotation_reference, observer_normal)
        return obj

    angle = new_x.angle_to(Direction.X)
    if new_x.y > 0.0:
        angle = -angle
    return obj.rotated(angle, Direction.Z)


def apparent_celestial_position(ecliptic: EclipticCoordinates,
                                observer_normal: Direction
                                ) -> SphericalCoordinates:
    """Sky position of ``ecliptic`` as seen with ``observer_normal`` overhead."""
    local = direction_relative_to_surface_normal(ecliptic.to_direction(),
                                                 observer_normal)
    return SphericalCoordinates.from_direction(local)


# ════════════════════════════════════════════════════════════════════════════
#  Surface Normal of a Rotating Body
# ════════════════════════════════════════════════════════════════════════════

def surface_normal_at_time(observer: EquatorialCoordinates,
                           angle_at_epoch: Angle,
                           time_since_epoch: float,
                           sidereal_day: float) -> Direction:
    """Ecliptic-frame surface normal of an observer on a spinning body.

    Parameters
    ----------
    observer : EquatorialCoordinates — observer position on the body at
        zero rotation; ``observer.axis`` is the body's spin axis
    angle_at_epoch : Angle — body rotation at the epoch
    time_since_epoch : float [s]
    sidereal_day : float — rotation period [s]; negative for retrograde
        spin, |day| ≤ 1 s for a non-rotating body (no rotation applied,
        ``angle_at_epoch`` included)

    Returns
    -------
    Direction
    """
    if abs(sidereal_day) > NON_ROTATING_DAY_THRESHOLD:
        fraction = np.fmod(time_since_epoch, sidereal_day) / sidereal_day
        rotation = angle_at_epoch + Angle(fraction * TWO_PI)
        observer = observer.add_longitude(rotation)
    return observer.to_direction()
