"""
Display-space sizing for the rendering side.

The orbital core returns true geometric positions. Moons sit far too close to
their planet to be seen at system scale, so renderers push each moon out to a
fixed display radius around its planet, keeping only its direction.
"""

from __future__ import annotations

from typing import List, Optional

from orrery.core.constants import EARTH_RADIUS_DISPLAY_KM, MIN_DISPLAY_RADIUS, ORBIT_SAMPLES, ORBIT_SCALE
from orrery.core.frames import Vector3, normalize, scale
from orrery.objects.body import CelestialBody
from orrery.physics.trajectory import sample_orbit


def display_radius(body: CelestialBody) -> float:
    """Sphere radius of the body in display units."""
    return max(MIN_DISPLAY_RADIUS, body.radius_km / EARTH_RADIUS_DISPLAY_KM)


def moon_orbit_display_radius(body: CelestialBody, parent: CelestialBody) -> float:
    return display_radius(parent) * 1.5 + 10 * body.orbit.semi_major_axis_au * ORBIT_SCALE


def rescale_to_display(point: Vector3, radius: float) -> Vector3:
    return scale(normalize(point), radius)


def display_position(body: CelestialBody, parent: Optional[CelestialBody], t_days: float) -> Vector3:
    """Position relative to the orbited body, moons pushed out to their display radius."""
    r = body.position_at(t_days)
    if parent is None:
        return r
    return rescale_to_display(r, moon_orbit_display_radius(body, parent))


def display_orbit_path(
    body: CelestialBody,
    parent: Optional[CelestialBody],
    sample_count: int = ORBIT_SAMPLES,
) -> List[Vector3]:
    points = sample_orbit(body.orbit, sample_count)
    if parent is None:
        return points
    radius = moon_orbit_display_radius(body, parent)
    return [rescale_to_display(p, radius) for p in points]
