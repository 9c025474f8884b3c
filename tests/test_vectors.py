"""
test_vectors.py — Direction and CartesianCoordinates
"""

import numpy as np
import numpy.testing as npt
import pytest

from astrocoords import (
    Angle, Direction, CartesianCoordinates, ORIGIN, DegenerateInputError,
    get_rotation_parameters, HALF_CIRC,
)

# ═══════════════════════════════════════════════════════════════════════════
#  Shared Fixtures
# ═══════════════════════════════════════════════════════════════════════════

ACC = 1e-5

rng = np.random.default_rng(2024)
RANDOM_VECTORS = [tuple(v) for v in rng.normal(scale=50.0, size=(8, 3))]
RANDOM_DIRECTIONS = [Direction(*v) for v in RANDOM_VECTORS]
AXES = [Direction.X, Direction.Y, Direction.Z, Direction(1, 1, 1),
        Direction(-0.3, 0.2, 0.9)]
ANGLES = [Angle(0.3), Angle(1.0), Angle(np.pi), Angle(5.5)]

DIAG = Direction(1, 1, 1)


def _norm(d):
    return np.linalg.norm(d.to_array())


# ═══════════════════════════════════════════════════════════════════════════
#  Direction Construction
# ═══════════════════════════════════════════════════════════════════════════

def test_constructor_normalizes():
    d = Direction(3.0, 4.0, 0.0)
    npt.assert_allclose(d.to_array(), [0.6, 0.8, 0.0], atol=1e-15)


def test_constructor_degenerate_raises():
    with pytest.raises(DegenerateInputError):
        Direction(0.0, 0.0, 0.0)
    with pytest.raises(DegenerateInputError):
        Direction(1e-6, 0.0, 0.0)


def test_degenerate_input_is_value_error():
    with pytest.raises(ValueError):
        Direction(0.0, 0.0, 0.0)


@pytest.mark.parametrize("v", RANDOM_VECTORS)
def test_from_cartesian_unit_length(v):
    d = Direction.from_cartesian(CartesianCoordinates(*v))
    npt.assert_allclose(_norm(d), 1.0, atol=1e-12)


def test_from_cartesian_accepts_tiny_vectors():
    d = Direction.from_cartesian(CartesianCoordinates(0.0, 3e-9, 4e-9))
    npt.assert_allclose(d.to_array(), [0.0, 0.6, 0.8], atol=1e-12)


def test_from_cartesian_zero_raises():
    with pytest.raises(DegenerateInputError):
        Direction.from_cartesian(ORIGIN)


def test_from_spherical():
    d = Direction.from_spherical(Angle(np.pi / 2), Angle(0.0))
    assert d.eq_within(Direction.Y, ACC)
    d = Direction.from_spherical(Angle(0.3), Angle(np.pi / 2))
    assert d.eq_within(Direction.Z, ACC)
    d = Direction.from_spherical(Angle(np.pi), Angle(-np.pi / 4))
    npt.assert_allclose(d.to_array(), [-np.sqrt(0.5), 0.0, -np.sqrt(0.5)],
                        atol=1e-12)


def test_from_array_round_trip():
    d = Direction.from_array([0.0, -2.0, 0.0])
    npt.assert_allclose(d.to_array(), [0.0, -1.0, 0.0])


def test_to_cartesian_signed_length():
    c = Direction.X.to_cartesian(-5.0)
    assert c.eq_within(CartesianCoordinates(-5.0, 0.0, 0.0), 1e-12)


# ═══════════════════════════════════════════════════════════════════════════
#  Direction Algebra
# ═══════════════════════════════════════════════════════════════════════════

def test_cross_right_handed():
    assert Direction.X.cross(Direction.Y).eq_within(Direction.Z, ACC)
    assert Direction.Y.cross(Direction.Z).eq_within(Direction.X, ACC)
    assert Direction.Z.cross(Direction.X).eq_within(Direction.Y, ACC)


def test_cross_parallel_raises():
    with pytest.raises(DegenerateInputError):
        Direction.X.cross(Direction.X)
    with pytest.raises(DegenerateInputError):
        Direction.X.cross(-Direction.X)


def test_angle_to():
    npt.assert_allclose(Direction.X.angle_to(Direction.Y).radians, np.pi / 2)
    npt.assert_allclose(Direction.X.angle_to(-Direction.X).radians, np.pi)
    assert Direction.Z.angle_to(Direction.Z).radians == pytest.approx(0.0, abs=1e-7)
    npt.assert_allclose(Direction.X.angle_to(DIAG).radians,
                        np.arccos(1 / np.sqrt(3)))


def test_angle_to_clamps_round_off():
    # dot product of these rounds slightly past 1
    d = Direction(0.1, 0.2, 0.3)
    assert d.angle_to(d).radians < 1e-7


@pytest.mark.parametrize("d", RANDOM_DIRECTIONS + AXES + [-Direction.X])
def test_some_orthogonal_vector(d):
    o = d.some_orthogonal_vector()
    npt.assert_allclose(o.dot(d), 0.0, atol=1e-12)
    npt.assert_allclose(_norm(o), 1.0, atol=1e-12)


def test_negation():
    assert (-Direction.Y).eq_within(Direction(0, -1, 0), ACC)
    assert Direction.Y.negated() == -Direction.Y


# ═══════════════════════════════════════════════════════════════════════════
#  Direction Rotation
# ═══════════════════════════════════════════════════════════════════════════

def test_x_rotated_quarter_about_z_is_y():
    assert Direction.X.rotated(Angle.from_radians(np.pi / 2),
                               Direction.Z).eq_within(Direction.Y, ACC)


@pytest.mark.parametrize("axis", AXES)
@pytest.mark.parametrize("angle", ANGLES)
def test_rotation_preserves_unit_length(axis, angle):
    for d in RANDOM_DIRECTIONS:
        npt.assert_allclose(_norm(d.rotated(angle, axis)), 1.0, atol=1e-12)


@pytest.mark.parametrize("axis", AXES)
def test_identity_rotation(axis):
    for d in RANDOM_DIRECTIONS:
        assert d.rotated(Angle(0.0), axis).eq_within(d, ACC)


@pytest.mark.parametrize("axis", AXES)
@pytest.mark.parametrize("angle", ANGLES)
def test_inverse_rotation(axis, angle):
    back = Angle(2 * np.pi - angle.radians)
    for d in RANDOM_DIRECTIONS:
        assert d.rotated(angle, axis).rotated(back, axis).eq_within(d, ACC)


def test_rotation_about_own_axis_is_identity():
    assert DIAG.rotated(Angle(2.0), DIAG).eq_within(DIAG, ACC)


def test_rotation_parameters():
    angle, axis = get_rotation_parameters(Direction.X, Direction.Y)
    npt.assert_allclose(angle.radians, np.pi / 2)
    assert axis.eq_within(Direction.Z, ACC)
    for start, end in zip(RANDOM_DIRECTIONS, RANDOM_DIRECTIONS[1:]):
        angle, axis = get_rotation_parameters(start, end)
        assert start.rotated(angle, axis).eq_within(end, ACC)


def test_rotation_parameters_antiparallel():
    angle, axis = get_rotation_parameters(Direction.Z, -Direction.Z)
    assert angle == HALF_CIRC
    assert Direction.Z.rotated(angle, axis).eq_within(-Direction.Z, ACC)


# ═══════════════════════════════════════════════════════════════════════════
#  Z-Axis Frame Alignment
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("new_z", RANDOM_DIRECTIONS + AXES + [-Direction.Z])
def test_passive_rotation_maps_new_z_to_z(new_z):
    assert new_z.passive_rotation_to_new_z_axis(new_z).eq_within(Direction.Z, ACC)


@pytest.mark.parametrize("new_z", RANDOM_DIRECTIONS + AXES + [-Direction.Z])
def test_active_rotation_maps_z_to_new_z(new_z):
    assert Direction.Z.active_rotation_to_new_z_axis(new_z).eq_within(new_z, ACC)


@pytest.mark.parametrize("new_z", RANDOM_DIRECTIONS + AXES)
def test_active_and_passive_are_inverse(new_z):
    for d in RANDOM_DIRECTIONS:
        there = d.passive_rotation_to_new_z_axis(new_z)
        assert there.active_rotation_to_new_z_axis(new_z).eq_within(d, ACC)


def test_passive_rotation_to_y():
    assert Direction.Y.passive_rotation_to_new_z_axis(Direction.Y).eq_within(
        Direction.Z, ACC)
    assert Direction.Z.passive_rotation_to_new_z_axis(Direction.Y).eq_within(
        -Direction.Y, ACC)
    assert Direction.X.passive_rotation_to_new_z_axis(Direction.Y).eq_within(
        Direction.X, ACC)


# ═══════════════════════════════════════════════════════════════════════════
#  Direction Conversion / Serialization
# ═══════════════════════════════════════════════════════════════════════════

def test_to_spherical():
    s = Direction.Y.to_spherical()
    npt.assert_allclose(s.longitude.radians, np.pi / 2)
    npt.assert_allclose(s.latitude_radians(), 0.0, atol=1e-12)
    s = (-Direction.Z).to_spherical()
    npt.assert_allclose(s.latitude_radians(), -np.pi / 2)


def test_to_ecliptic_round_trip():
    for d in RANDOM_DIRECTIONS:
        assert d.to_ecliptic().to_direction().eq_within(d, ACC)


def test_to_equatorial_round_trip():
    for d in RANDOM_DIRECTIONS:
        assert d.to_equatorial().to_direction().eq_within(d, ACC)


def test_to_equatorial_zero_obliquity_is_ecliptic():
    for d in RANDOM_DIRECTIONS:
        eq = d.to_equatorial(Angle(0.0))
        assert eq.spherical.eq_within(d.to_spherical(), ACC)


def test_serialization_rounds_components():
    d = Direction(1.23, -0.01, 1e-8)
    data = d.to_dict()
    assert data["x"] == pytest.approx(1.0)
    assert data["y"] == pytest.approx(-0.008)
    assert data["z"] == 0.0


def test_deserialization_renormalizes():
    d = Direction.from_dict({"x": 0.0, "y": 0.0, "z": 3.0})
    assert d == Direction.Z


def test_str():
    assert str(Direction.Y) == "(0.00, 1.00, 0.00)"


# ═══════════════════════════════════════════════════════════════════════════
#  Cartesian Coordinates
# ═══════════════════════════════════════════════════════════════════════════

A = CartesianCoordinates(1.0, 2.0, 3.0)
B = CartesianCoordinates(-4.0, 0.5, 2.0)


def test_cartesian_arithmetic():
    assert A + B == CartesianCoordinates(-3.0, 2.5, 5.0)
    assert A - B == CartesianCoordinates(5.0, 1.5, 1.0)
    assert A * 2 == CartesianCoordinates(2.0, 4.0, 6.0)
    assert 2 * A == A.scale(2)
    assert -A == CartesianCoordinates(-1.0, -2.0, -3.0)
    assert A.add(B) == A + B and A.sub(B) == A - B
    assert A + ORIGIN == A


def test_cartesian_magnitude_and_distance():
    npt.assert_allclose(CartesianCoordinates(3.0, 4.0, 12.0).magnitude(), 13.0)
    npt.assert_allclose(A.distance(B), np.sqrt(25 + 2.25 + 1))
    assert ORIGIN.magnitude() == 0.0


def test_cartesian_direction():
    d = CartesianCoordinates(0.0, -7.0, 0.0).direction()
    assert d.eq_within(-Direction.Y, ACC)
    with pytest.raises(DegenerateInputError):
        ORIGIN.direction()


def test_cartesian_rotated():
    r = CartesianCoordinates(2.0, 0.0, 0.0).rotated(Angle(np.pi / 2), Direction.Z)
    assert r.eq_within(CartesianCoordinates(0.0, 2.0, 0.0), 1e-12)
    npt.assert_allclose(A.rotated(Angle(1.1), DIAG).magnitude(), A.magnitude())


def test_cartesian_rotation_matches_direction_rotation():
    rotated = A.rotated(Angle(0.7), DIAG)
    assert rotated.direction().eq_within(A.direction().rotated(Angle(0.7), DIAG), ACC)


def test_cartesian_dict_round_trip():
    assert CartesianCoordinates.from_dict(A.to_dict()) == A


def test_cartesian_str():
    assert str(A) == "(1.00 m, 2.00 m, 3.00 m)"
