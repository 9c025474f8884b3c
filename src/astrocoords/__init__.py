"""
astrocoords — Directional Geometry for Astronomical Calculations
=================================================================

A pure-NumPy kernel for representing positions, sky directions and orbital
orientations, and for transforming between them.  Catalogs, unit types and
rendering live outside; this package consumes plain SI / radian scalars.

Reference Frames
----------------

**Ecliptic**
  - X: Vernal equinox
  - Z: Ecliptic north pole
  - Y: Completes right-hand system.  Global frame for every ``Direction``.

**Equatorial**
  - Z: Rotation axis of a body (Earth: ecliptic pole tilted by ε ≈ 23.44°)
  - Longitude measured along the body's equator.

**Observer**
  - Z: Surface normal at the observer
  - X: Horizon projection of a chosen rotation reference

Transform Graph
---------------
::

    Spherical ←→ Direction ←→ Cartesian
                    │
        Ecliptic ←──┼──→ Equatorial   (explicit obliquity rotation)
                    │
                    ▼
                 Observer             (direction_relative_to_normal)

All rotations go through one Rodrigues engine (:mod:`astrocoords.rotations`).
"""

from .angle import (
    Angle,
    ANGLE_ZERO, QUARTER_CIRC, HALF_CIRC, FULL_CIRC,
)

from .rotations import (
    rotation_matrix_axis_angle,
    rotate_vectors,
    rotated_tuple,
)

from .vectors import (
    Direction,
    CartesianCoordinates,
    ORIGIN,
    get_rotation_parameters,
)

from .spherical import (
    SphericalCoordinates,
    EclipticCoordinates,
    EquatorialCoordinates,
    ecliptic_to_equatorial, equatorial_to_ecliptic,
    rotation_axis_for_obliquity,
    EARTH_ROTATION_AXIS,
    X_DIRECTION, Y_DIRECTION, Z_DIRECTION,
)

from .frames import (
    direction_relative_to_normal,
    direction_relative_to_surface_normal,
    apparent_celestial_position,
    surface_normal_at_time,
)

from .orbits import (
    OrbitOrientation,
    OrbitParameters,
    orbital_period,
    mean_anomaly,
    eccentric_anomaly,
    true_anomaly,
    distance_from_focus,
    position_relative_to_central_body,
)

from .utils import (
    DegenerateInputError,
    normalize,
    TWO_PI,
    HALF_PI,
    RADIANS_PER_DEGREE,
    DEGREES_PER_RADIAN,
    ARCSECS_PER_RADIAN,
    RADIANS_PER_ARCSEC,
    EARTH_OBLIQUITY,
    GRAVITATIONAL_CONSTANT,
    NORMALIZATION_THRESHOLD,
    DIRECTION_NORMALIZATION_THRESHOLD,
    SERIALIZATION_ACCURACY,
)

__version__ = "0.1.0"
__all__ = [
    # ── Constants ──
    "TWO_PI", "HALF_PI", "RADIANS_PER_DEGREE", "DEGREES_PER_RADIAN",
    "ARCSECS_PER_RADIAN", "RADIANS_PER_ARCSEC",
    "EARTH_OBLIQUITY", "GRAVITATIONAL_CONSTANT",
    "NORMALIZATION_THRESHOLD", "DIRECTION_NORMALIZATION_THRESHOLD",
    "SERIALIZATION_ACCURACY",
    # ── Errors ──
    "DegenerateInputError",
    # ── Angles ──
    "Angle", "ANGLE_ZERO", "QUARTER_CIRC", "HALF_CIRC", "FULL_CIRC",
    # ── Rotation engine ──
    "rotation_matrix_axis_angle", "rotate_vectors", "rotated_tuple",
    # ── Vectors ──
    "Direction", "CartesianCoordinates", "ORIGIN", "get_rotation_parameters",
    # ── Spherical / ecliptic / equatorial ──
    "SphericalCoordinates", "EclipticCoordinates", "EquatorialCoordinates",
    "ecliptic_to_equatorial", "equatorial_to_ecliptic",
    "rotation_axis_for_obliquity", "EARTH_ROTATION_AXIS",
    "X_DIRECTION", "Y_DIRECTION", "Z_DIRECTION",
    # ── Observer frames ──
    "direction_relative_to_normal", "direction_relative_to_surface_normal",
    "apparent_celestial_position", "surface_normal_at_time",
    # ── Orbits ──
    "OrbitOrientation", "OrbitParameters",
    "orbital_period", "mean_anomaly", "eccentric_anomaly", "true_anomaly",
    "distance_from_focus", "position_relative_to_central_body",
    # ── Utilities ──
    "normalize",
]
