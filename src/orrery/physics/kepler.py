# Kepler's equation for elliptic orbits

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from orrery.core.constants import (
    CIRCULAR_ECCENTRICITY,
    KEPLER_MAX_ITER,
    KEPLER_TOLERANCE_RAD,
    MAX_SOLVABLE_ECCENTRICITY,
)
from orrery.core.errors import DomainError

if TYPE_CHECKING:
    from orrery.physics.orbit import OrbitalElements


def first_order_eccentric_anomaly(e: float, M_rad: float) -> float:
    """E ~ M + e sin(M) (1 + e cos(M))."""
    return M_rad + e * math.sin(M_rad) * (1.0 + e * math.cos(M_rad))


def solve_eccentric_anomaly(
    e: float,
    M_rad: float,
    tol: float = KEPLER_TOLERANCE_RAD,
    max_iter: int = KEPLER_MAX_ITER,
) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)

    Near-circular orbits (e < 0.05) use the first-order approximation
    directly. Otherwise Newton-Raphson is seeded with that approximation
    and stops once two successive estimates are within tol.

    Args:
        e: eccentricity (0 <= e < 0.98)
        M_rad: mean anomaly (rad)
        tol: convergence tolerance between successive estimates (rad)
        max_iter: iteration cap

    Returns:
        E_rad: eccentric anomaly (rad)

    Raises:
        DomainError: e >= 0.98, non-finite M, or no convergence within max_iter.
    """
    if e >= MAX_SOLVABLE_ECCENTRICITY:
        raise DomainError("eccentricity out of solvable range")
    if not math.isfinite(M_rad):
        raise DomainError(f"Mean anomaly must be finite. Got: {M_rad}")

    E1 = first_order_eccentric_anomaly(e, M_rad)
    if e < CIRCULAR_ECCENTRICITY:
        return E1

    for _ in range(max_iter):
        E0 = E1
        E1 = E0 - (E0 - e * math.sin(E0) - M_rad) / (1.0 - e * math.cos(E0))
        if abs(E0 - E1) <= tol:
            return E0

    raise DomainError("solver did not converge")


def distance_and_true_anomaly(orbit: "OrbitalElements", M_rad: float) -> Tuple[float, float]:
    """
    Returns (true anomaly in rad, distance in AU) for the given mean anomaly.
    """
    a = orbit.semi_major_axis_au
    e = orbit.eccentricity
    E = solve_eccentric_anomaly(e, M_rad)

    # Position in the orbital plane, periapsis along +x
    xv = a * (math.cos(E) - e)
    yv = a * (math.sqrt(1.0 - e * e) * math.sin(E))

    nu = math.atan2(yv, xv)
    r = math.sqrt(xv * xv + yv * yv)
    return nu, r
