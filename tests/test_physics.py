import math

import pytest

from goldilocks.models import HabitableZone
from goldilocks.physics import (
    classify_orbit,
    habitable_zone,
    orbit_points,
    position_at_phase,
    radius_at_phase,
)


def test_habitable_zone_unknown_luminosity_uses_sun_defaults():
    assert habitable_zone(None) == HabitableZone(inner_au=0.75, outer_au=1.77)
    assert habitable_zone(float("nan")) == HabitableZone(inner_au=0.75, outer_au=1.77)
    assert habitable_zone(float("inf")) == HabitableZone(inner_au=0.75, outer_au=1.77)


def test_habitable_zone_solar_luminosity_matches_defaults():
    zone = habitable_zone(0.0)
    assert zone.inner_au == pytest.approx(0.75)
    assert zone.outer_au == pytest.approx(1.77)


def test_habitable_zone_scales_with_sqrt_luminosity():
    # 100 L_sun -> distances x10
    zone = habitable_zone(2.0)
    assert zone.inner_au == pytest.approx(7.5)
    assert zone.outer_au == pytest.approx(17.7)


@pytest.mark.parametrize("log_lum", [-5.0, -2.3, -0.5, 0.0, 0.7, 3.0, 6.0])
def test_habitable_zone_inner_is_below_outer(log_lum):
    zone = habitable_zone(log_lum)
    assert 0 < zone.inner_au < zone.outer_au


def test_habitable_zone_overflow_falls_back_to_defaults():
    assert habitable_zone(1e6) == HabitableZone(inner_au=0.75, outer_au=1.77)


def test_classify_orbit_boundaries_are_inside():
    zone = HabitableZone(inner_au=0.75, outer_au=1.77)
    assert classify_orbit(0.75, zone) == "in"
    assert classify_orbit(1.77, zone) == "in"


@pytest.mark.parametrize(
    "a, expected",
    [(0.1, "too-close"), (0.7499, "too-close"), (1.0, "in"), (1.7701, "too-far"), (30.0, "too-far")],
)
def test_classify_orbit(a, expected):
    assert classify_orbit(a, HabitableZone(inner_au=0.75, outer_au=1.77)) == expected


def test_circular_orbit_radius_constant():
    for t in [0.0, 0.5, 1.0, math.pi, 4.0, 100.0]:
        assert radius_at_phase(2.0, 0.0, t) == pytest.approx(2.0)


def test_periapsis_and_apoapsis():
    a, e = 1.0, 0.5
    assert radius_at_phase(a, e, 0.0) == pytest.approx(a * (1 - e))
    assert radius_at_phase(a, e, math.pi) == pytest.approx(a * (1 + e))


@pytest.mark.parametrize("e", [0.0, 0.2, 0.5, 0.9, 0.99])
def test_orbit_is_planar_and_never_touches_the_star(e):
    for i in range(200):
        t = i * 0.37 - 20.0
        p = position_at_phase(1.3, e, t)
        assert p.y == 0.0
        assert math.hypot(p.x, p.z) > 0


def test_position_at_zero_phase_is_on_positive_x_axis():
    p = position_at_phase(1.5, 0.0, 0.0)
    assert p.x == pytest.approx(1.5)
    assert p.y == 0.0
    assert p.z == pytest.approx(0.0)


def test_position_is_periodic_in_phase():
    p1 = position_at_phase(1.0, 0.3, 1.2)
    p2 = position_at_phase(1.0, 0.3, 1.2 + 6 * math.pi)
    assert p2.x == pytest.approx(p1.x)
    assert p2.z == pytest.approx(p1.z)


def test_orbit_points_closed_path_of_65():
    points = orbit_points(1.0, 0.4)
    assert len(points) == 65
    assert points[0].x == pytest.approx(points[-1].x)
    assert points[0].z == pytest.approx(points[-1].z, abs=1e-12)
    assert points[16] == position_at_phase(1.0, 0.4, (16 / 64) * 2 * math.pi)
