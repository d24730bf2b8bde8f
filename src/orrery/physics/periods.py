"""
Fill in orbital and spin periods missing from the source data.

Orbital periods come from Kepler's third law around the orbited body's mass.
Resolution is a pure transform: it returns new bodies and leaves the input
tree untouched, so it can run once at load time before any reader sees the
bodies.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Dict, Iterable, List

from orrery.core.constants import (
    AU_TO_KM,
    DEFAULT_SPIN_PERIOD_DAYS,
    G,
    KM_TO_M,
    SECOND_TO_DAY,
    SUN_MASS,
)
from orrery.core.errors import DomainError
from orrery.objects.body import CelestialBody
from orrery.physics.orbit import OrbitalElements

logger = logging.getLogger(__name__)

BodyIndex = Dict[str, CelestialBody]


def kepler_period_days(semi_major_axis_au: float, parent_mass_kg: float) -> float:
    """T = 2π sqrt(a^3 / (G M)), converted to days."""
    if not parent_mass_kg > 0:
        raise DomainError(f"Orbited body mass must be positive. Got: {parent_mass_kg}")
    a_m = semi_major_axis_au * AU_TO_KM * KM_TO_M
    return 2.0 * math.pi * math.sqrt(a_m ** 3 / (G * parent_mass_kg)) * SECOND_TO_DAY


def build_body_index(bodies: Iterable[CelestialBody]) -> BodyIndex:
    """
    Name -> body lookup over the whole tree, moons included.
    The index does not own the bodies; it is rebuilt whenever the tree changes.
    """
    index: BodyIndex = {}
    for root in bodies:
        for body in root.iter_system():
            index.setdefault(body.name, body)
    return index


def parent_mass(orbit: OrbitalElements, index: BodyIndex) -> float:
    """Mass of the orbited body, or the central star's when it is not in the index."""
    if orbit.orbiting_body:
        parent = index.get(orbit.orbiting_body)
        if parent is not None:
            return parent.mass_kg
    return SUN_MASS


def resolve(body: CelestialBody, index: BodyIndex) -> CelestialBody:
    """
    Return body with its orbital period, spin period and moons resolved.

    A period already present (non-zero) is kept as is. A body with nothing to
    fill in is returned unchanged, which makes a second pass a no-op.
    """
    orbit = body.orbit
    if not orbit.period_days:
        period = kepler_period_days(orbit.semi_major_axis_au, parent_mass(orbit, index))
        logger.debug("Derived period of %s: %.4f days", body.name, period)
        orbit = orbit.with_period(period)

    spin = body.revolution_period_days
    if not spin:
        spin = DEFAULT_SPIN_PERIOD_DAYS

    moons = [resolve(moon, index) for moon in body.moons]

    unchanged = (
        orbit is body.orbit
        and spin == body.revolution_period_days
        and all(new is old for new, old in zip(moons, body.moons))
    )
    if unchanged:
        return body
    return replace(
        body,
        orbit=orbit,
        revolution_period_days=spin,
        moons=moons,
        last_t_days=None,
        last_position=None,
    )


def resolve_all(bodies: Iterable[CelestialBody]) -> List[CelestialBody]:
    """Resolve every root body against one index built from the full tree."""
    roots = list(bodies)
    index = build_body_index(roots)
    resolved = [resolve(body, index) for body in roots]
    logger.info("Resolved periods for %d bodies", len(build_body_index(resolved)))
    return resolved
