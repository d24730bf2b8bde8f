# Tests for the eccentric anomaly solver
import math
import pytest

from orrery.core.errors import DomainError
from orrery.physics.kepler import (
    distance_and_true_anomaly,
    first_order_eccentric_anomaly,
    solve_eccentric_anomaly,
)
from orrery.physics.orbit import OrbitalElements


MEAN_ANOMALIES = [-2.0, 0.0, 0.3, 1.0, 2.5, math.pi, 5.0, 9.0]


def newton_step(E, e, M):
    return E - (E - e * math.sin(E) - M) / (1.0 - e * math.cos(E))


def test_kepler_zero_eccentricity():
    # If e=0, E=M exactly
    for M in MEAN_ANOMALIES:
        assert solve_eccentric_anomaly(0.0, M) == M


def test_near_circular_uses_first_order_approximation():
    for e in [0.0, 0.01, 0.0167, 0.049]:
        for M in MEAN_ANOMALIES:
            expected = M + e * math.sin(M) * (1.0 + e * math.cos(M))
            assert solve_eccentric_anomaly(e, M) == expected
            assert first_order_eccentric_anomaly(e, M) == expected


def test_converged_result_is_newton_fixed_point():
    for e in [0.05, 0.2, 0.5, 0.8, 0.97]:
        for M in MEAN_ANOMALIES:
            E = solve_eccentric_anomaly(e, M)
            assert abs(newton_step(E, e, M) - E) <= 0.001


def test_kepler_converges_typical():
    E = solve_eccentric_anomaly(0.4, 1.0)
    # Verify equation residual
    res = E - 0.4 * math.sin(E) - 1.0
    assert abs(res) < 0.002


def test_high_eccentricity_rejected():
    with pytest.raises(DomainError, match="eccentricity out of solvable range"):
        solve_eccentric_anomaly(0.99, 1.0)
    with pytest.raises(DomainError, match="eccentricity out of solvable range"):
        solve_eccentric_anomaly(0.98, 1.0)


def test_non_convergence_raises():
    with pytest.raises(DomainError, match="solver did not converge"):
        solve_eccentric_anomaly(0.9, 0.1, max_iter=1)


def test_non_finite_mean_anomaly_rejected():
    with pytest.raises(DomainError):
        solve_eccentric_anomaly(0.5, float("nan"))


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        solve_eccentric_anomaly(0.99, 0.0)


class TestDistanceAndTrueAnomaly:
    def test_circular_orbit_constant_distance(self):
        orbit = OrbitalElements(semi_major_axis_au=2.5, eccentricity=0.0, period_days=100.0)
        for M in MEAN_ANOMALIES:
            _nu, r = distance_and_true_anomaly(orbit, M)
            assert math.isclose(r, 2.5, rel_tol=1e-12)

    def test_circular_true_anomaly_follows_mean_anomaly(self):
        orbit = OrbitalElements(semi_major_axis_au=1.0, eccentricity=0.0, period_days=100.0)
        nu, _r = distance_and_true_anomaly(orbit, 1.0)
        assert math.isclose(nu, 1.0, abs_tol=1e-12)

    def test_periapsis_distance(self):
        orbit = OrbitalElements(semi_major_axis_au=2.0, eccentricity=0.5, period_days=100.0)
        nu, r = distance_and_true_anomaly(orbit, 0.0)
        assert nu == 0.0
        assert math.isclose(r, 1.0, rel_tol=1e-12)

    def test_apoapsis_distance(self):
        orbit = OrbitalElements(semi_major_axis_au=2.0, eccentricity=0.5, period_days=100.0)
        nu, r = distance_and_true_anomaly(orbit, math.pi)
        assert math.isclose(abs(nu), math.pi, abs_tol=1e-3)
        assert math.isclose(r, 3.0, rel_tol=1e-3)

    def test_deterministic(self):
        orbit = OrbitalElements(semi_major_axis_au=1.3, eccentricity=0.3, period_days=100.0)
        assert distance_and_true_anomaly(orbit, 2.0) == distance_and_true_anomaly(orbit, 2.0)
