# src/orrery/physics/orbit.py

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from orrery.core.constants import MEAN_ANOMALY_DECIMALS, ORBIT_SCALE
from orrery.core.errors import DomainError
from orrery.core.frames import Vector3, orbital_to_reference, scale
from orrery.physics.kepler import distance_and_true_anomaly


@dataclass(frozen=True)
class OrbitalElements:
    """
    Keplerian elements of one body around the body it orbits.

    Units:
        semi_major_axis_au: semi-major axis in AU
        eccentricity: 0 <= e < 1
        inclination_rad: inclination in radians
        ascending_node_rad: longitude of the ascending node in radians
        periapsis_arg_rad: argument of periapsis in radians
        mean_anomaly_at_epoch_rad: mean anomaly at t=0 in radians
        period_days: one revolution in days; None or 0 until resolved
        orbiting_body: name of the orbited body; None means the central star
        soi_radius: sphere of influence radius, reserved (always 0)
    """
    semi_major_axis_au: float
    eccentricity: float
    inclination_rad: float = 0.0
    ascending_node_rad: float = 0.0
    periapsis_arg_rad: float = 0.0
    mean_anomaly_at_epoch_rad: float = 0.0
    period_days: Optional[float] = None
    orbiting_body: Optional[str] = None
    soi_radius: float = 0.0

    def __post_init__(self):
        if not self.semi_major_axis_au > 0:
            raise ValueError("Semi-major axis must be positive.")
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(f"Only elliptic orbits are supported (0 <= e < 1). Got: {self.eccentricity}")
        if not (0.0 <= self.inclination_rad <= math.pi):
            raise ValueError(f"Inclination must be in range [0, π] radians. Got: {self.inclination_rad}")
        if not math.isfinite(self.ascending_node_rad):
            raise ValueError(f"Ascending node must be finite. Got: {self.ascending_node_rad}")
        if not math.isfinite(self.periapsis_arg_rad):
            raise ValueError(f"Argument of periapsis must be finite. Got: {self.periapsis_arg_rad}")
        if not math.isfinite(self.mean_anomaly_at_epoch_rad):
            raise ValueError(f"Mean anomaly must be finite. Got: {self.mean_anomaly_at_epoch_rad}")
        if self.period_days is not None and not math.isfinite(self.period_days):
            raise ValueError(f"Period must be finite. Got: {self.period_days}")

    @property
    def is_resolved(self) -> bool:
        return bool(self.period_days)

    def with_period(self, period_days: float) -> "OrbitalElements":
        return replace(self, period_days=period_days)


def truncated_mean_anomaly(elements: OrbitalElements, t_days: float) -> float:
    """
    Mean anomaly at t, floored to 6 decimal places so the solver sees the
    same input for frames that differ only by float jitter.
    """
    if not elements.is_resolved:
        raise DomainError("period must be resolved before computing positions")
    M = elements.mean_anomaly_at_epoch_rad + 2.0 * math.pi * t_days / elements.period_days
    factor = 10 ** MEAN_ANOMALY_DECIMALS
    return math.floor(factor * M) / factor


def compute_position(elements: OrbitalElements, t_days: float) -> Vector3:
    """
    Position of the body relative to the body it orbits, in display units,
    at t days since epoch.
    """
    M = truncated_mean_anomaly(elements, t_days)
    nu, r = distance_and_true_anomaly(elements, M)

    r_ref = orbital_to_reference(
        r,
        nu,
        elements.ascending_node_rad,
        elements.inclination_rad,
        elements.periapsis_arg_rad,
    )
    return scale(r_ref, ORBIT_SCALE)


def propagate(elements: OrbitalElements, times_days: List[float]) -> List[Tuple[float, Vector3]]:
    """
    Positions across a list of time stamps (days since epoch).
    Returns list of (t, r).
    """
    out: List[Tuple[float, Vector3]] = []
    for t in times_days:
        out.append((t, compute_position(elements, t)))
    return out
