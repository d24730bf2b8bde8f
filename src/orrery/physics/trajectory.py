from __future__ import annotations

from typing import List

from orrery.core.constants import ORBIT_SAMPLES
from orrery.core.errors import DomainError, InvalidArgumentError
from orrery.core.frames import Vector3
from orrery.physics.orbit import OrbitalElements, compute_position


def sample_orbit(elements: OrbitalElements, sample_count: int = ORBIT_SAMPLES) -> List[Vector3]:
    """
    Closed polyline over one full revolution.

    Returns sample_count + 1 points taken at t = i * period / sample_count,
    so the last point lands one period after the first. Points are the
    geometric positions from compute_position (display units, relative to
    the orbited body).
    """
    if sample_count <= 0:
        raise InvalidArgumentError("sample_count must be positive")
    if not elements.is_resolved:
        raise DomainError("period must be resolved before sampling an orbit")

    dt = elements.period_days / sample_count
    return [compute_position(elements, dt * i) for i in range(sample_count + 1)]
