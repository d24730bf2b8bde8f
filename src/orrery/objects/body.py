from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from orrery.core.frames import Vector3
from orrery.physics.orbit import OrbitalElements, compute_position


@dataclass(eq=False)
class CelestialBody:
    """
    A body of the simulated system (planet, moon, dwarf planet).
    Purely kinematic: position comes from its orbital elements, relative to
    the body named in orbit.orbiting_body.

    Bodies compare by identity, so two bodies sharing identical elements
    are still distinct.
    """
    name: str
    orbit: OrbitalElements
    mass_kg: float = 0.0
    radius_km: float = 0.0
    axial_tilt_rad: float = 0.0
    # Sidereal rotation in days; None or 0 until resolved
    revolution_period_days: Optional[float] = None
    moons: List["CelestialBody"] = field(default_factory=list)
    texture: str = ""

    # Cached state (handy for stepping / debugging)
    last_t_days: Optional[float] = None
    last_position: Optional[Vector3] = None

    def position_at(self, t_days: float) -> Vector3:
        """
        Position relative to the orbited body at t (days since epoch), display units.
        """
        r = compute_position(self.orbit, t_days)

        self.last_t_days = t_days
        self.last_position = r

        return r

    def spin_angle_at(self, t_days: float) -> float:
        """Rotation about the body's own axis at t, in [0, 2π)."""
        if not self.revolution_period_days:
            return 0.0
        return (2.0 * math.pi * t_days / self.revolution_period_days) % (2.0 * math.pi)

    def iter_system(self) -> Iterator["CelestialBody"]:
        """Pre-order walk over this body and all of its moons."""
        yield self
        for moon in self.moons:
            yield from moon.iter_system()
