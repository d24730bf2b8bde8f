from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from orrery.core.frames import Vector3
from orrery.simulation.clock import SimulationClock
from orrery.simulation.scenario import SolarSystem

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs per tick and can write to the log.
    """
    name: str

    def on_step(self, t_days: float, scenario: SolarSystem, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a simulation run.
    Keep it simple and serializable.
    """
    # Positions: body name -> list of (t, r) in display units
    body_positions: Dict[str, List[Tuple[float, Vector3]]] = field(default_factory=dict)

    # Free-form events
    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_position(self, name: str, t_days: float, r: Vector3) -> None:
        self.body_positions.setdefault(name, []).append((t_days, r))

    def record_event(self, t_days: float, kind: str, **details: Any) -> None:
        self.events.append({"t": t_days, "type": kind, **details})


@dataclass
class Engine:
    """
    Fixed-step simulation engine.
    Deterministic replay: given same scenario + dt + start/end => same output.
    """
    dt_days: float
    systems: List[System] = field(default_factory=list)

    def _check_ready(self, scenario: SolarSystem) -> None:
        if not scenario.resolved:
            raise ValueError("Scenario periods must be resolved before running.")

    def run(self, scenario: SolarSystem, t_start_days: float, t_end_days: float) -> SimulationLog:
        if self.dt_days <= 0:
            raise ValueError("dt_days must be positive.")
        if t_end_days < t_start_days:
            raise ValueError("t_end_days must be >= t_start_days.")
        self._check_ready(scenario)

        log = SimulationLog()
        t = t_start_days
        ticks = 0

        # Tick loop
        # Note: inclusive end if it lands exactly; otherwise last tick < end
        while t <= t_end_days + 1e-9:
            for sys in self.systems:
                sys.on_step(t, scenario, log)
            ticks += 1
            t = t_start_days + ticks * self.dt_days

        logger.info("Ran %d ticks over [%.3f, %.3f] days", ticks, t_start_days, t_end_days)
        return log

    def run_clock(
        self,
        scenario: SolarSystem,
        clock: SimulationClock,
        wall_dt_s: float,
        n_frames: int,
    ) -> SimulationLog:
        """
        Frame-driven run: each frame advances the clock by the wall-clock
        delta, then every system sees the new simulation time. Paused frames
        still tick, at a frozen time.
        """
        if n_frames < 0:
            raise ValueError("n_frames must be non-negative.")
        self._check_ready(scenario)

        log = SimulationLog()
        for _ in range(n_frames):
            clock.advance(wall_dt_s)
            for sys in self.systems:
                sys.on_step(clock.simulation_time, scenario, log)

        logger.debug("Ran %d frames, clock at %.3f days", n_frames, clock.simulation_time)
        return log
