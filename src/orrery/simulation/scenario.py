from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from orrery.core.frames import Vector3, add
from orrery.objects.body import CelestialBody
from orrery.physics.periods import BodyIndex, build_body_index, resolve_all

logger = logging.getLogger(__name__)


@dataclass
class SolarSystem:
    """
    Container for all bodies in a simulation run.
    Keep this pure: just data + lookup, no stepping logic.

    Bodies are kept as a tree of root bodies (orbiting the central star)
    with their moons; the name index covers the whole tree.
    """
    name: str
    roots: List[CelestialBody] = field(default_factory=list)
    index: BodyIndex = field(default_factory=dict)
    resolved: bool = False

    def add_body(self, body: CelestialBody) -> None:
        seen = set(self.index)
        for b in body.iter_system():
            if b.name in seen:
                raise ValueError(f"Duplicate body name: {b.name}")
            seen.add(b.name)
        self.roots.append(body)
        self.index = build_body_index(self.roots)
        self.resolved = False

    def resolve(self) -> None:
        """
        Fill in missing periods for the whole tree. Must run before positions
        are queried for bodies loaded without a period.
        """
        self.roots = resolve_all(self.roots)
        self.index = build_body_index(self.roots)
        self.resolved = True

    def get(self, name: str) -> CelestialBody:
        try:
            return self.index[name]
        except KeyError:
            raise KeyError(f"Unknown body: {name}") from None

    def body_list(self) -> List[CelestialBody]:
        """Every body, parents before their moons."""
        return [b for root in self.roots for b in root.iter_system()]

    def parent_of(self, body: CelestialBody) -> Optional[CelestialBody]:
        """The orbited body, or None when it is the central star."""
        if not body.orbit.orbiting_body:
            return None
        return self.index.get(body.orbit.orbiting_body)

    def world_position(self, name: str, t_days: float) -> Vector3:
        """
        Position relative to the central star: own orbital position plus the
        world position of the orbited body.
        """
        body = self.get(name)
        r = body.position_at(t_days)
        parent = self.parent_of(body)
        if parent is None:
            return r
        return add(r, self.world_position(parent.name, t_days))

    def positions_at(self, t_days: float) -> Dict[str, Vector3]:
        return {b.name: self.world_position(b.name, t_days) for b in self.body_list()}

    @classmethod
    def from_bodies(cls, name: str, bodies: List[CelestialBody], resolve: bool = True) -> "SolarSystem":
        system = cls(name=name)
        for body in bodies:
            system.add_body(body)
        if resolve:
            system.resolve()
        logger.info("Built system %r with %d bodies", name, len(system.index))
        return system
