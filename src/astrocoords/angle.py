"""
astrocoords.angle — Canonical Rotation Amounts
================================================

``Angle`` is a scalar rotation amount held in radians and always folded
into the canonical range [0, 2π).  Every constructor and every arithmetic
result is renormalized, so two angles describing the same rotation share
one representation (up to floating-point error).

Because trigonometric round trips accumulate error, angles are compared
with the relative-tolerance predicate :meth:`Angle.eq_within` rather than
with ``==``.

Latitudes and other quantities that live naturally in a signed range are
read back through :meth:`Angle.signed_radians`, which maps the canonical
value into [−π, π).
"""

from dataclasses import dataclass

import numpy as np

from .utils import (
    TWO_PI, RADIANS_PER_DEGREE, DEGREES_PER_RADIAN,
    ARCSECS_PER_RADIAN, RADIANS_PER_ARCSEC,
    wrap_two_pi,
)


@dataclass(frozen=True)
class Angle:
    """Rotation amount in radians, canonical range [0, 2π)."""

    radians: float = 0.0

    def __post_init__(self):
        if not np.isfinite(self.radians):
            raise ValueError(f"Angle must be finite, got {self.radians!r}.")
        object.__setattr__(self, "radians", wrap_two_pi(self.radians))

    # ── Constructors ──

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees * RADIANS_PER_DEGREE)

    @classmethod
    def from_arcsecs(cls, arcsecs: float) -> "Angle":
        return cls(arcsecs * RADIANS_PER_ARCSEC)

    @classmethod
    def from_hms(cls, hours: float, minutes: float = 0.0,
                 seconds: float = 0.0) -> "Angle":
        """Right ascension given in hours, minutes and seconds of time.

        One hour of right ascension is 15°.  A negative sign on any
        component (including ``-0.0`` hours) negates the whole value.
        """
        sign = _sign_of(hours, minutes, seconds)
        total_hours = abs(hours) + abs(minutes) / 60.0 + abs(seconds) / 3600.0
        return cls.from_degrees(sign * 15.0 * total_hours)

    @classmethod
    def from_dms(cls, degrees: float, arcmins: float = 0.0,
                 arcsecs: float = 0.0) -> "Angle":
        """Declination given in degrees, arcminutes and arcseconds.

        A negative sign on any component (including ``-0.0`` degrees)
        negates the whole value, so ``from_dms(-0.0, 30)`` is −30′.
        """
        sign = _sign_of(degrees, arcmins, arcsecs)
        total = abs(degrees) + abs(arcmins) / 60.0 + abs(arcsecs) / 3600.0
        return cls.from_degrees(sign * total)

    # ── Accessors ──

    def as_radians(self) -> float:
        return self.radians

    def as_degrees(self) -> float:
        return self.radians * DEGREES_PER_RADIAN

    def as_arcsecs(self) -> float:
        return self.radians * ARCSECS_PER_RADIAN

    def signed_radians(self) -> float:
        """Equivalent value in [−π, π)."""
        return self.radians - TWO_PI if self.radians >= np.pi else self.radians

    def sin(self) -> float:
        return float(np.sin(self.radians))

    def cos(self) -> float:
        return float(np.cos(self.radians))

    def tan(self) -> float:
        return float(np.tan(self.radians))

    # ── Arithmetic (every result renormalized) ──

    def add(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def sub(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def scale(self, factor: float) -> "Angle":
        return Angle(self.radians * factor)

    def divide(self, divisor: float) -> "Angle":
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide an angle by zero.")
        return Angle(self.radians / divisor)

    def negated(self) -> "Angle":
        return Angle(-self.radians)

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor):
        if isinstance(factor, Angle):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Angle):
            return NotImplemented
        return self.divide(divisor)

    def __neg__(self):
        return self.negated()

    # ── Comparison ──

    def eq_within(self, other: "Angle", relative_tolerance: float) -> bool:
        """True iff |a − b| ≤ relative_tolerance · max(|a|, |b|).

        The bound is relative, so against ``ANGLE_ZERO`` only an exact 0.0
        compares equal.  Construction snaps rounding residues at the 0 / 2π
        seam to 0.0 (see ``utils.wrap_two_pi``), so ``Angle(2πk)`` still
        matches ``ANGLE_ZERO``; angles computed by subtraction near the seam
        are better compared through ``signed_radians``.
        """
        a, b = self.radians, other.radians
        return abs(a - b) <= relative_tolerance * max(abs(a), abs(b))

    # ── Serialization ──

    def to_dict(self) -> dict:
        return {"radians": self.radians}

    @classmethod
    def from_dict(cls, data: dict) -> "Angle":
        return cls(float(data["radians"]))

    def __str__(self) -> str:
        return f"{self.radians:.2f} rad"


def _sign_of(*components: float) -> float:
    return -1.0 if any(np.signbit(c) for c in components) else 1.0


ANGLE_ZERO = Angle(0.0)
QUARTER_CIRC = Angle(0.5 * np.pi)
HALF_CIRC = Angle(np.pi)
FULL_CIRC = Angle(TWO_PI)      # folds to zero
