import math

import pytest

from orrery.objects.body import CelestialBody
from orrery.physics.orbit import OrbitalElements, compute_position


@pytest.fixture
def elements():
    return OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.0167, period_days=365.256)


def test_bodies_with_identical_elements_are_distinct(elements):
    a = CelestialBody(name="Twin", orbit=elements)
    b = CelestialBody(name="Twin", orbit=elements)
    assert a != b
    assert a == a
    assert a.orbit == b.orbit


def test_position_at_caches_last_state(elements):
    body = CelestialBody(name="Earth", orbit=elements)
    r = body.position_at(10.0)
    assert r == compute_position(elements, 10.0)
    assert body.last_t_days == 10.0
    assert body.last_position == r


def test_spin_angle(elements):
    body = CelestialBody(name="Earth", orbit=elements, revolution_period_days=2.0)
    assert body.spin_angle_at(0.0) == 0.0
    assert math.isclose(body.spin_angle_at(0.5), math.pi / 2)
    assert math.isclose(body.spin_angle_at(2.5), math.pi / 2)


def test_retrograde_spin_wraps_positive(elements):
    body = CelestialBody(name="Venus", orbit=elements, revolution_period_days=-4.0)
    assert math.isclose(body.spin_angle_at(1.0), 1.5 * math.pi)


def test_spin_without_period_is_zero(elements):
    body = CelestialBody(name="Rock", orbit=elements)
    assert body.spin_angle_at(3.0) == 0.0


def test_iter_system_is_preorder(elements):
    phobos = CelestialBody(name="Phobos", orbit=elements)
    deimos = CelestialBody(name="Deimos", orbit=elements)
    mars = CelestialBody(name="Mars", orbit=elements, moons=[phobos, deimos])
    assert [b.name for b in mars.iter_system()] == ["Mars", "Phobos", "Deimos"]
