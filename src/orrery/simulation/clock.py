from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from orrery.core.config import DEFAULT_CFG, SimulationCfg


@dataclass
class SimulationClock:
    """
    Simulation time in days, advanced once per frame by the caller.
    One wall-clock second at speed 1.0 is one simulated day.
    """
    cfg: SimulationCfg = DEFAULT_CFG
    simulation_time: float = 0.0
    speed: Optional[float] = None
    paused: bool = False
    last_delta: float = 0.0

    def __post_init__(self):
        if self.speed is None:
            self.speed = self.cfg.initial_speed

    def advance(self, wall_dt_s: float) -> float:
        """
        Move time forward by wall_dt_s * speed unless paused.
        Returns the simulated delta in days (0 while paused).
        """
        if wall_dt_s < 0:
            raise ValueError("wall_dt_s must be non-negative.")
        if self.paused:
            self.last_delta = 0.0
        else:
            self.last_delta = wall_dt_s * self.speed
            self.simulation_time += self.last_delta
        return self.last_delta

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def _step(self, coarse: bool, fine: bool) -> float:
        if coarse:
            return self.cfg.speed_step_coarse
        if fine:
            return self.cfg.speed_step_fine
        return self.cfg.speed_step

    def increase_speed(self, coarse: bool = False, fine: bool = False) -> float:
        self.speed += self._step(coarse, fine)
        return self.speed

    def decrease_speed(self, coarse: bool = False, fine: bool = False) -> float:
        """Slow down, stopping at 0 so time never runs backwards."""
        self.speed = max(0.0, self.speed - self._step(coarse, fine))
        return self.speed

    @property
    def current_datetime(self) -> datetime:
        return self.cfg.start_datetime + timedelta(days=self.simulation_time)
