import math

import pytest

from orrery.core.constants import ORBIT_SCALE
from orrery.core.errors import DomainError
from orrery.core.frames import norm
from orrery.physics.orbit import (
    OrbitalElements,
    compute_position,
    propagate,
    truncated_mean_anomaly,
)


def deg(x):
    return x * math.pi / 180.0


def circular(period=100.0, **kwargs):
    return OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.0, period_days=period, **kwargs)


def test_circular_orbit_radius_constant():
    # Circular orbit: |r| should stay a * ORBIT_SCALE for all times
    elements = OrbitalElements(
        semi_major_axis_au=1.5,
        eccentricity=0.0,
        inclination_rad=deg(20.0),
        ascending_node_rad=deg(30.0),
        periapsis_arg_rad=deg(40.0),
        period_days=250.0,
    )
    for frac in [0.0, 0.25, 0.5, 0.75, 1.0]:
        r = compute_position(elements, frac * 250.0)
        assert math.isclose(norm(r), 1.5 * ORBIT_SCALE, rel_tol=1e-9)


def test_position_at_epoch():
    assert compute_position(circular(), 0.0) == (1000.0, 0.0, 0.0)


def test_quarter_period_moves_along_z():
    r = compute_position(circular(period=100.0), 25.0)
    assert math.isclose(r[0], 0.0, abs_tol=1e-2)
    assert r[1] == 0.0
    assert math.isclose(r[2], 1000.0, abs_tol=1e-2)


def test_polar_orbit_rises_along_y():
    r = compute_position(circular(period=100.0, inclination_rad=math.pi / 2), 25.0)
    assert math.isclose(r[1], 1000.0, abs_tol=1e-2)
    assert math.isclose(r[2], 0.0, abs_tol=1e-2)


def test_ascending_node_rotates_in_reference_plane():
    r = compute_position(circular(ascending_node_rad=math.pi / 2), 0.0)
    assert math.isclose(r[0], 0.0, abs_tol=1e-9)
    assert math.isclose(r[2], 1000.0, rel_tol=1e-12)


@pytest.mark.parametrize("e", [0.0167, 0.2, 0.6])
def test_position_is_periodic(e):
    elements = OrbitalElements(
        semi_major_axis_au=1.0,
        eccentricity=e,
        inclination_rad=deg(7.0),
        ascending_node_rad=deg(48.3),
        periapsis_arg_rad=deg(29.1),
        mean_anomaly_at_epoch_rad=deg(174.8),
        period_days=365.25,
    )
    for t in [0.0, 12.3, 100.7, 300.0]:
        r1 = compute_position(elements, t)
        r2 = compute_position(elements, t + 365.25)
        for a, b in zip(r1, r2):
            assert math.isclose(a, b, abs_tol=0.05)


def test_mean_anomaly_truncated_to_six_decimals():
    elements = OrbitalElements(
        semi_major_axis_au=1.0,
        eccentricity=0.1,
        mean_anomaly_at_epoch_rad=0.1234567891,
        period_days=10.0,
    )
    assert truncated_mean_anomaly(elements, 0.0) == 0.123456


def test_mean_anomaly_floors_negative_values():
    elements = OrbitalElements(
        semi_major_axis_au=1.0,
        eccentricity=0.1,
        mean_anomaly_at_epoch_rad=-0.1234561,
        period_days=10.0,
    )
    assert truncated_mean_anomaly(elements, 0.0) == -0.123457


def test_unresolved_period_rejected():
    elements = OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1)
    with pytest.raises(DomainError, match="period must be resolved"):
        compute_position(elements, 1.0)


def test_propagate_returns_time_tagged_positions():
    out = propagate(circular(), [0.0, 10.0, 20.0])
    assert [t for (t, _r) in out] == [0.0, 10.0, 20.0]
    assert out[0][1] == compute_position(circular(), 0.0)


class TestOrbitalElementsValidation:
    def test_semi_major_axis_positive(self):
        with pytest.raises(ValueError, match="Semi-major axis must be positive"):
            OrbitalElements(semi_major_axis_au=0.0, eccentricity=0.1)

    def test_eccentricity_elliptic(self):
        with pytest.raises(ValueError, match="elliptic"):
            OrbitalElements(semi_major_axis_au=1.0, eccentricity=1.0)
        with pytest.raises(ValueError, match="elliptic"):
            OrbitalElements(semi_major_axis_au=1.0, eccentricity=-0.1)

    def test_inclination_range(self):
        with pytest.raises(ValueError, match="Inclination"):
            OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1, inclination_rad=-0.1)

    def test_angles_finite(self):
        with pytest.raises(ValueError, match="Ascending node"):
            OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1, ascending_node_rad=math.inf)
        with pytest.raises(ValueError, match="Mean anomaly"):
            OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1, mean_anomaly_at_epoch_rad=math.nan)

    def test_with_period_returns_copy(self):
        elements = OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1)
        resolved = elements.with_period(42.0)
        assert not elements.is_resolved
        assert resolved.is_resolved
        assert resolved.period_days == 42.0
        assert resolved.semi_major_axis_au == elements.semi_major_axis_au

    def test_zero_period_is_unresolved(self):
        elements = OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.1, period_days=0.0)
        assert not elements.is_resolved
