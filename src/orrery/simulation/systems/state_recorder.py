from __future__ import annotations

from dataclasses import dataclass

from orrery.simulation.scenario import SolarSystem
from orrery.simulation.engine import SimulationLog


@dataclass
class StateRecorderSystem:
    """Records the world position of every body on each tick."""
    name: str = "state_recorder"

    def on_step(self, t_days: float, scenario: SolarSystem, log: SimulationLog) -> None:
        for name, r in scenario.positions_at(t_days).items():
            log.record_position(name, t_days, r)
