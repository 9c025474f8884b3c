"""
astrocoords.orbits — Orbit Orientation and Kepler Orbits
==========================================================

Places an in-plane orbital position into the ecliptic frame and computes
two-body Keplerian positions over time.  Masses, lengths and times are SI
floats.

Orientation is applied as three successive rotations, each acting on the
output of the previous one::

    1. inclination  i   about x̂      (ascending node along x̂)
    2. node         Ω   about ẑ
    3. periapsis    ω   about the orbit normal  n = R_z(Ω) R_x(i) ẑ

Step 3 uses the twice-rotated normal, not ẑ.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .angle import Angle, ANGLE_ZERO
from .utils import TWO_PI, GRAVITATIONAL_CONSTANT
from .vectors import Direction, CartesianCoordinates

logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════════════════
#  Orbit Orientation
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OrbitOrientation:
    """Orientation of an orbital plane and its periapsis.

    Parameters
    ----------
    inclination : Angle — i, tilt of the orbit against the ecliptic
    longitude_of_ascending_node : Angle — Ω
    argument_of_periapsis : Angle — ω, measured in the orbital plane
    """

    inclination: Angle = ANGLE_ZERO
    longitude_of_ascending_node: Angle = ANGLE_ZERO
    argument_of_periapsis: Angle = ANGLE_ZERO

    def normal(self) -> Direction:
        """Orbit normal in the ecliptic frame."""
        return (Direction.Z.rotated(self.inclination, Direction.X)
                           .rotated(self.longitude_of_ascending_node, Direction.Z))

    def apply_to(self, position_in_plane):
        """Rotate an in-plane ``CartesianCoordinates`` or ``Direction``
        (periapsis along x̂) into the ecliptic frame."""
        position = position_in_plane.rotated(self.inclination, Direction.X)
        position = position.rotated(self.longitude_of_ascending_node,
                                    Direction.Z)
        return position.rotated(self.argument_of_periapsis, self.normal())

    def to_dict(self) -> dict:
        return {
            "inclination": self.inclination.radians,
            "longitude_of_ascending_node": self.longitude_of_ascending_node.radians,
            "argument_of_periapsis": self.argument_of_periapsis.radians,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OrbitOrientation":
        return cls(Angle(float(data["inclination"])),
                   Angle(float(data["longitude_of_ascending_node"])),
                   Angle(float(data["argument_of_periapsis"])))


# ════════════════════════════════════════════════════════════════════════════
#  Kepler Equation
# ════════════════════════════════════════════════════════════════════════════

def orbital_period(semi_major_axis: float, mass1: float, mass2: float) -> float:
    """Two-body orbital period  P = 2π √(a³ / G(m₁ + m₂))  [s]."""
    return TWO_PI * np.sqrt(semi_major_axis ** 3
                            / (GRAVITATIONAL_CONSTANT * (mass1 + mass2)))


def mean_anomaly(period: float, time: float) -> Angle:
    """Mean anomaly after ``time`` seconds past periapsis.

    Time is reduced modulo the period first, so very long spans keep their
    precision.
    """
    return Angle(TWO_PI / period * np.mod(time, period))


def eccentric_anomaly(M: Angle, e: float, tol: float = 1e-12,
                      max_iter: int = 50) -> Angle:
    """Solve Kepler's equation  M = E − e sin(E)  via Newton–Raphson.

    Parameters
    ----------
    M : Angle — mean anomaly
    e : float — eccentricity, 0 ≤ e < 1
    tol : float — convergence tolerance [rad]

    Returns
    -------
    E : Angle — eccentric anomaly.  If ``max_iter`` is reached the last
        iterate is returned and a warning is logged.
    """
    if not 0.0 <= e < 1.0:
        raise ValueError(f"Elliptic orbit requires 0 ≤ e < 1, got e={e}.")
    M_rad = M.radians
    # Smart initial guess (Markley-style)
    E = M_rad + 0.85 * e * np.sign(np.sin(M_rad)) if e < 0.8 else np.pi
    dE = np.inf
    for _ in range(max_iter):
        f = E - e * np.sin(E) - M_rad
        fp = 1.0 - e * np.cos(E)
        dE = -f / fp
        E += dE
        if abs(dE) < tol:
            break
    else:
        logger.warning("Kepler solver did not converge: M=%.6f rad, e=%.6f, "
                       "last step %.3e rad.", M_rad, e, abs(dE))
    return Angle(E)


def true_anomaly(E: Angle, e: float) -> Angle:
    """True anomaly from eccentric anomaly."""
    half = E.radians / 2.0
    return Angle(2.0 * np.arctan2(np.sqrt(1.0 + e) * np.sin(half),
                                  np.sqrt(1.0 - e) * np.cos(half)))


def distance_from_focus(semi_major_axis: float, nu: Angle, e: float) -> float:
    """r = a(1 − e²) / (1 + e cos ν)  [m]."""
    return semi_major_axis * (1.0 - e ** 2) / (1.0 + e * nu.cos())


def position_relative_to_central_body(semi_major_axis: float, e: float,
                                      nu: Angle,
                                      orientation: OrbitOrientation
                                      ) -> CartesianCoordinates:
    """Ecliptic-frame position of the orbiting body [m]."""
    r = distance_from_focus(semi_major_axis, nu, e)
    in_plane = Direction.from_spherical(nu, ANGLE_ZERO).to_cartesian(r)
    return orientation.apply_to(in_plane)


# ════════════════════════════════════════════════════════════════════════════
#  Orbit Parameters
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OrbitParameters:
    """Keplerian elements of an elliptic orbit.

    Parameters
    ----------
    semi_major_axis : float [m]
    eccentricity : float
    orientation : OrbitOrientation
    """

    semi_major_axis: float
    eccentricity: float
    orientation: OrbitOrientation = OrbitOrientation()

    def normal(self) -> Direction:
        return self.orientation.normal()

    def position_at(self, body_mass: float, central_body_mass: float,
                    time: float) -> CartesianCoordinates:
        """Position relative to the central body ``time`` seconds after
        periapsis passage.

        Parameters
        ----------
        body_mass, central_body_mass : float [kg]
        time : float [s]
        """
        period = orbital_period(self.semi_major_axis, body_mass,
                                central_body_mass)
        M = mean_anomaly(period, time)
        E = eccentric_anomaly(M, self.eccentricity)
        nu = true_anomaly(E, self.eccentricity)
        return position_relative_to_central_body(
            self.semi_major_axis, self.eccentricity, nu, self.orientation)

    def to_dict(self) -> dict:
        return {"semi_major_axis": self.semi_major_axis,
                "eccentricity": self.eccentricity,
                "orientation": self.orientation.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "OrbitParameters":
        return cls(float(data["semi_major_axis"]),
                   float(data["eccentricity"]),
                   OrbitOrientation.from_dict(data["orientation"]))
