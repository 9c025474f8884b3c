"""
astrocoords.spherical — Sky Coordinates on a Reference Plane
==============================================================

(longitude, latitude) pairs locating a direction on the celestial sphere.

**SphericalCoordinates**
  - Shared base representation.  Longitude ∈ [0, 2π), latitude ∈ [−π/2, π/2].
  - Latitude is a signed float [rad]; longitude is an ``Angle``.

**EclipticCoordinates**
  - Reference plane: the ecliptic.  X toward the vernal equinox, Z toward
    the ecliptic north pole.

**EquatorialCoordinates**
  - Reference plane: a body's equator.  Carries the body's rotation ``axis``
    as an ecliptic-frame ``Direction`` (Earth's pole by default).

Ecliptic and equatorial coordinates never convert implicitly::

    ecliptic_to_equatorial(ecl, ε)   rotate by +ε about x̂
    equatorial_to_ecliptic(eq)       active rotation ẑ → eq.axis
"""

from dataclasses import dataclass, replace

import numpy as np

from .angle import Angle, HALF_CIRC
from .utils import HALF_PI, EARTH_OBLIQUITY, RADIANS_PER_DEGREE
from .vectors import Direction, CartesianCoordinates


def rotation_axis_for_obliquity(obliquity: Angle) -> Direction:
    """Ecliptic-frame pole of an equator tilted by ``obliquity`` about x̂."""
    return Direction.Z.rotated(-obliquity, Direction.X)


EARTH_ROTATION_AXIS = rotation_axis_for_obliquity(Angle(EARTH_OBLIQUITY))


# ════════════════════════════════════════════════════════════════════════════
#  Spherical Coordinates
# ════════════════════════════════════════════════════════════════════════════

@dataclass
class SphericalCoordinates:
    """Longitude / latitude pair.

    ``longitude`` is an ``Angle`` in [0, 2π).  ``latitude`` is a signed float
    [rad]; an ``Angle`` passed in is read through its signed view.

    Mutable only through :meth:`normalize`, which re-canonicalizes the pair
    in place after arithmetic pushed latitude past a pole.
    """

    longitude: Angle
    latitude: float

    def __post_init__(self):
        lat = self.latitude
        if isinstance(lat, Angle):
            lat = lat.signed_radians()
        elif not -np.pi <= lat < np.pi:
            lat = Angle(lat).signed_radians()
        self.latitude = float(lat)

    @classmethod
    def from_radians(cls, longitude: float,
                     latitude: float) -> "SphericalCoordinates":
        return cls(Angle(longitude), latitude)

    @classmethod
    def from_degrees(cls, longitude: float,
                     latitude: float) -> "SphericalCoordinates":
        return cls(Angle.from_degrees(longitude), latitude * RADIANS_PER_DEGREE)

    @classmethod
    def from_direction(cls, direction: Direction) -> "SphericalCoordinates":
        x, y, z = direction
        return cls(Angle(np.arctan2(y, x)), np.arctan2(z, np.hypot(x, y)))

    @classmethod
    def from_cartesian(cls, c: CartesianCoordinates) -> "SphericalCoordinates":
        return cls.from_direction(c.direction())

    def latitude_radians(self) -> float:
        """Latitude in [−π/2, π/2] once normalized."""
        return self.latitude

    def normalize(self) -> None:
        """Fold a latitude beyond a pole back over it, in place."""
        lat = self.latitude
        if lat > HALF_PI:
            self.latitude = np.pi - lat
            self.longitude = self.longitude + HALF_CIRC
        elif lat < -HALF_PI:
            self.latitude = -np.pi - lat
            self.longitude = self.longitude + HALF_CIRC

    def normalized(self) -> "SphericalCoordinates":
        """Normalized copy; ``self`` is left untouched."""
        copy = replace(self)
        copy.normalize()
        return copy

    def negated(self) -> "SphericalCoordinates":
        """Antipodal point."""
        return SphericalCoordinates(self.longitude + HALF_CIRC, -self.latitude)

    def add_longitude(self, angle: Angle) -> "SphericalCoordinates":
        return SphericalCoordinates(self.longitude + angle, self.latitude)

    def to_direction(self) -> Direction:
        return Direction.from_spherical(self.longitude, Angle(self.latitude))

    def eq_within(self, other: "SphericalCoordinates", accuracy: float) -> bool:
        """Absolute comparison [rad] of the normalized pairs.

        Longitude differences wrap around 2π and are ignored when both
        points sit on the same pole.
        """
        a, b = self.normalized(), other.normalized()
        if abs(a.latitude - b.latitude) > accuracy:
            return False
        if abs(abs(a.latitude) - HALF_PI) <= accuracy:
            return True
        d_lon = (a.longitude - b.longitude).signed_radians()
        return abs(d_lon) <= accuracy

    def to_dict(self) -> dict:
        return {"longitude": self.longitude.radians,
                "latitude": self.latitude}

    @classmethod
    def from_dict(cls, data: dict) -> "SphericalCoordinates":
        return cls.from_radians(float(data["longitude"]), float(data["latitude"]))

    def __str__(self) -> str:
        return (f"({self.longitude.radians:.2f} rad long, "
                f"{self.latitude:.2f} rad lat)")


X_DIRECTION = SphericalCoordinates(Angle(0.0), 0.0)
Y_DIRECTION = SphericalCoordinates(Angle(HALF_PI), 0.0)
Z_DIRECTION = SphericalCoordinates(Angle(0.0), HALF_PI)


# ════════════════════════════════════════════════════════════════════════════
#  Ecliptic Coordinates
# ════════════════════════════════════════════════════════════════════════════

@dataclass
class EclipticCoordinates:
    spherical: SphericalCoordinates

    @classmethod
    def from_direction(cls, direction: Direction) -> "EclipticCoordinates":
        return cls(SphericalCoordinates.from_direction(direction))

    @property
    def longitude(self) -> Angle:
        return self.spherical.longitude

    @property
    def latitude(self) -> float:
        return self.spherical.latitude

    def normalize(self) -> None:
        self.spherical.normalize()

    def negated(self) -> "EclipticCoordinates":
        return EclipticCoordinates(self.spherical.negated())

    def to_direction(self) -> Direction:
        return self.spherical.to_direction()

    def angle_to(self, other: "EclipticCoordinates") -> Angle:
        return self.to_direction().angle_to(other.to_direction())

    def eq_within(self, other: "EclipticCoordinates", accuracy: float) -> bool:
        return self.spherical.eq_within(other.spherical, accuracy)

    def to_dict(self) -> dict:
        return {"spherical": self.spherical.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "EclipticCoordinates":
        return cls(SphericalCoordinates.from_dict(data["spherical"]))

    def __str__(self) -> str:
        return f"{self.spherical} to ecliptic plane"


# ════════════════════════════════════════════════════════════════════════════
#  Equatorial Coordinates
# ════════════════════════════════════════════════════════════════════════════

@dataclass
class EquatorialCoordinates:
    """Coordinates relative to the equator of a body spinning about ``axis``.

    Parameters
    ----------
    spherical : SphericalCoordinates — longitude along / latitude above the
        equator
    axis : Direction — the body's rotation axis in ecliptic coordinates
    """

    spherical: SphericalCoordinates
    axis: Direction = EARTH_ROTATION_AXIS

    @classmethod
    def from_direction(cls, direction: Direction,
                       axis: Direction = EARTH_ROTATION_AXIS
                       ) -> "EquatorialCoordinates":
        local = direction.passive_rotation_to_new_z_axis(axis)
        return cls(SphericalCoordinates.from_direction(local), axis)

    @property
    def longitude(self) -> Angle:
        return self.spherical.longitude

    @property
    def latitude(self) -> float:
        return self.spherical.latitude

    def normalize(self) -> None:
        self.spherical.normalize()

    def negated(self) -> "EquatorialCoordinates":
        return EquatorialCoordinates(self.spherical.negated(), self.axis)

    def add_longitude(self, angle: Angle) -> "EquatorialCoordinates":
        """Spin about the body's own rotation axis."""
        return EquatorialCoordinates(self.spherical.add_longitude(angle),
                                     self.axis)

    def to_direction(self) -> Direction:
        """Direction in the ecliptic frame."""
        return self.spherical.to_direction().active_rotation_to_new_z_axis(
            self.axis)

    def eq_within(self, other: "EquatorialCoordinates", accuracy: float) -> bool:
        return (self.spherical.eq_within(other.spherical, accuracy)
                and self.axis.eq_within(other.axis, accuracy))

    def to_dict(self) -> dict:
        return {"spherical": self.spherical.to_dict(),
                "axis": self.axis.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "EquatorialCoordinates":
        return cls(SphericalCoordinates.from_dict(data["spherical"]),
                   Direction.from_dict(data["axis"]))

    def __str__(self) -> str:
        return f"{self.spherical} to equatorial plane"


# ════════════════════════════════════════════════════════════════════════════
#  Obliquity Conversions
# ════════════════════════════════════════════════════════════════════════════

def ecliptic_to_equatorial(ecliptic: EclipticCoordinates,
                           obliquity: Angle = Angle(EARTH_OBLIQUITY)
                           ) -> EquatorialCoordinates:
    """Rotate by +ε about the vernal-equinox direction (x̂)."""
    return EquatorialCoordinates.from_direction(
        ecliptic.to_direction(), rotation_axis_for_obliquity(obliquity))


def equatorial_to_ecliptic(equatorial: EquatorialCoordinates
                           ) -> EclipticCoordinates:
    return EclipticCoordinates.from_direction(equatorial.to_direction())
