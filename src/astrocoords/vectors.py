"""
astrocoords.vectors — Directions and Cartesian Positions
==========================================================

Two immutable 3-vector value types:

**Direction**
  - Unit-length (x, y, z), dimensionless.  "Which way", independent of
    distance.  Only ever built by a normalizing constructor or by rotation.

**CartesianCoordinates**
  - Point / displacement with a length on each axis [m].  No unit-length
    invariant.

Both rotate with the same Rodrigues engine (:mod:`astrocoords.rotations`).
``Direction`` additionally carries the two-step frame alignments used by the
relative-direction transform::

    passive_rotation_to_new_z_axis(n)   n  →  ẑ   (re-express in n-up frame)
    active_rotation_to_new_z_axis(n)    ẑ  →  n   (inverse of the above)

Each is a rotation about ẑ by the polar angle of n's XY projection followed
by a tilt about x̂ by the angle between n and ẑ.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from .angle import Angle, ANGLE_ZERO, HALF_CIRC
from .rotations import rotated_tuple
from .utils import (
    DegenerateInputError, normalize,
    NORMALIZATION_THRESHOLD, DIRECTION_NORMALIZATION_THRESHOLD,
    SERIALIZATION_ACCURACY, EARTH_OBLIQUITY,
)

logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════════════════
#  Direction
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Direction:
    """Unit vector.  Components are normalized on construction.

    Raises
    ------
    DegenerateInputError
        If the raw components are shorter than
        ``DIRECTION_NORMALIZATION_THRESHOLD``.
    """

    x: float
    y: float
    z: float

    X: ClassVar["Direction"]
    Y: ClassVar["Direction"]
    Z: ClassVar["Direction"]

    def __post_init__(self):
        u = normalize([self.x, self.y, self.z],
                      threshold=DIRECTION_NORMALIZATION_THRESHOLD)
        object.__setattr__(self, "x", float(u[0]))
        object.__setattr__(self, "y", float(u[1]))
        object.__setattr__(self, "z", float(u[2]))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    # ── Constructors ──

    @classmethod
    def from_array(cls, v: NDArray) -> "Direction":
        x, y, z = np.asarray(v, dtype=np.float64)
        return cls(x, y, z)

    @classmethod
    def from_cartesian(cls, c: "CartesianCoordinates") -> "Direction":
        """Unit vector along ``c``.

        Accepts any non-zero length; only a magnitude below
        ``NORMALIZATION_THRESHOLD`` is rejected.
        """
        return cls.from_array(normalize(c.to_array(),
                                        threshold=NORMALIZATION_THRESHOLD))

    @classmethod
    def from_spherical(cls, longitude: Angle, latitude: Angle) -> "Direction":
        cos_lat = latitude.cos()
        return cls(longitude.cos() * cos_lat,
                   longitude.sin() * cos_lat,
                   latitude.sin())

    # ── Conversions ──

    def to_array(self) -> NDArray:
        return np.array([self.x, self.y, self.z])

    def to_cartesian(self, length: float) -> "CartesianCoordinates":
        """Scale the unit vector by a signed length [m]."""
        return CartesianCoordinates(self.x * length,
                                    self.y * length,
                                    self.z * length)

    def to_spherical(self):
        from .spherical import SphericalCoordinates
        return SphericalCoordinates.from_direction(self)

    def to_ecliptic(self):
        from .spherical import EclipticCoordinates
        return EclipticCoordinates.from_direction(self)

    def to_equatorial(self, obliquity: Angle = Angle(EARTH_OBLIQUITY)):
        """Equatorial coordinates for a body whose pole is tilted by
        ``obliquity`` from the ecliptic pole."""
        from .spherical import (EquatorialCoordinates,
                                rotation_axis_for_obliquity)
        return EquatorialCoordinates.from_direction(
            self, rotation_axis_for_obliquity(obliquity))

    # ── Vector algebra ──

    def dot(self, other: "Direction") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Direction") -> "Direction":
        """Normalized cross product.

        Raises
        ------
        DegenerateInputError
            If the two directions are (anti)parallel.
        """
        try:
            return Direction(self.y * other.z - self.z * other.y,
                             self.z * other.x - self.x * other.z,
                             self.x * other.y - self.y * other.x)
        except DegenerateInputError:
            raise DegenerateInputError(
                f"Cross product of parallel directions {self} and {other} "
                "is undefined."
            ) from None

    def angle_to(self, other: "Direction") -> Angle:
        """Unsigned angle in [0, π]."""
        cos_angle = self.dot(other)
        # round-off can push the dot product of unit vectors past ±1
        if cos_angle > 1.0:
            return ANGLE_ZERO
        if cos_angle < -1.0:
            return HALF_CIRC
        return Angle(np.arccos(cos_angle))

    def some_orthogonal_vector(self) -> "Direction":
        """Any direction perpendicular to this one (deterministic)."""
        if abs(self.x) > NORMALIZATION_THRESHOLD:
            other = Direction.Y
        elif abs(self.y) > NORMALIZATION_THRESHOLD:
            other = Direction.Z
        else:
            other = Direction.X
        try:
            return self.cross(other)
        except DegenerateInputError:
            return Direction.Z

    def negated(self) -> "Direction":
        return Direction(-self.x, -self.y, -self.z)

    def __neg__(self):
        return self.negated()

    # ── Rotation ──

    def rotated(self, angle: Angle, axis: "Direction") -> "Direction":
        """Rotate by ``angle`` about ``axis`` (Rodrigues, right-handed).

        ``axis`` must be unit length; any ``Direction`` is.
        """
        return Direction(*rotated_tuple(self, angle, axis))

    def _polar_rotation_angle(self, new_z: "Direction") -> Angle:
        try:
            projected = Direction(new_z.x, new_z.y, 0.0)
        except DegenerateInputError:
            return ANGLE_ZERO
        polar = projected.angle_to(Direction.Y)
        return -polar if projected.x < 0.0 else polar

    def active_rotation_to_new_z_axis(self, new_z: "Direction") -> "Direction":
        """Rotate so that ẑ would land on ``new_z``."""
        angle_to_old_z = new_z.angle_to(Direction.Z)
        polar = self._polar_rotation_angle(new_z)
        return (self.rotated(-angle_to_old_z, Direction.X)
                    .rotated(-polar, Direction.Z))

    def passive_rotation_to_new_z_axis(self, new_z: "Direction") -> "Direction":
        """Re-express this direction in a frame whose z-axis is ``new_z``."""
        angle_to_old_z = new_z.angle_to(Direction.Z)
        polar = self._polar_rotation_angle(new_z)
        return (self.rotated(polar, Direction.Z)
                    .rotated(angle_to_old_z, Direction.X))

    # ── Comparison / Serialization ──

    def eq_within(self, other: "Direction", accuracy: float) -> bool:
        return (abs(self.x - other.x) <= accuracy
                and abs(self.y - other.y) <= accuracy
                and abs(self.z - other.z) <= accuracy)

    def to_dict(self) -> dict:
        """Components rounded to ``SERIALIZATION_ACCURACY``."""
        return {k: _round_to_accuracy(v) for k, v in zip("xyz", self)}

    @classmethod
    def from_dict(cls, data: dict) -> "Direction":
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"


def _round_to_accuracy(value: float) -> float:
    return round(value / SERIALIZATION_ACCURACY) * SERIALIZATION_ACCURACY


Direction.X = Direction(1.0, 0.0, 0.0)
Direction.Y = Direction(0.0, 1.0, 0.0)
Direction.Z = Direction(0.0, 0.0, 1.0)


def get_rotation_parameters(start: Direction, end: Direction):
    """Angle and axis of the shortest rotation taking ``start`` to ``end``.

    For (anti)parallel inputs the axis is any vector orthogonal to
    ``start``.

    Returns
    -------
    angle : Angle
    axis : Direction
    """
    angle = start.angle_to(end)
    try:
        axis = start.cross(end)
    except DegenerateInputError:
        logger.debug("Parallel start/end %s, %s; using an orthogonal axis.",
                     start, end)
        axis = start.some_orthogonal_vector()
    return angle, axis


# ════════════════════════════════════════════════════════════════════════════
#  Cartesian Coordinates
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CartesianCoordinates:
    """Position / displacement with components in meters."""

    x: float
    y: float
    z: float

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    @classmethod
    def from_array(cls, v: NDArray) -> "CartesianCoordinates":
        x, y, z = np.asarray(v, dtype=np.float64)
        return cls(float(x), float(y), float(z))

    def to_array(self) -> NDArray:
        return np.array([self.x, self.y, self.z])

    # ── Arithmetic ──

    def add(self, other: "CartesianCoordinates") -> "CartesianCoordinates":
        return CartesianCoordinates(self.x + other.x,
                                    self.y + other.y,
                                    self.z + other.z)

    def sub(self, other: "CartesianCoordinates") -> "CartesianCoordinates":
        return CartesianCoordinates(self.x - other.x,
                                    self.y - other.y,
                                    self.z - other.z)

    def scale(self, factor: float) -> "CartesianCoordinates":
        return CartesianCoordinates(self.x * factor,
                                    self.y * factor,
                                    self.z * factor)

    def negated(self) -> "CartesianCoordinates":
        return self.scale(-1.0)

    def __add__(self, other):
        if not isinstance(other, CartesianCoordinates):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, CartesianCoordinates):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor):
        if isinstance(factor, CartesianCoordinates):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negated()

    # ── Geometry ──

    def magnitude(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def distance(self, other: "CartesianCoordinates") -> float:
        return self.sub(other).magnitude()

    def direction(self) -> Direction:
        """Unit vector toward this point.

        Raises
        ------
        DegenerateInputError
            For the origin.
        """
        return Direction.from_cartesian(self)

    def rotated(self, angle: Angle, axis: Direction) -> "CartesianCoordinates":
        """Rotate by ``angle`` about the unit ``axis`` (Rodrigues)."""
        return CartesianCoordinates(*rotated_tuple(self, angle, axis))

    # ── Comparison / Serialization ──

    def eq_within(self, other: "CartesianCoordinates", accuracy: float) -> bool:
        return (abs(self.x - other.x) <= accuracy
                and abs(self.y - other.y) <= accuracy
                and abs(self.z - other.z) <= accuracy)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict) -> "CartesianCoordinates":
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))

    def __str__(self) -> str:
        return f"({self.x:.2f} m, {self.y:.2f} m, {self.z:.2f} m)"


ORIGIN = CartesianCoordinates(0.0, 0.0, 0.0)
