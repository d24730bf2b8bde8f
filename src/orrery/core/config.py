"""Configuration dataclasses for the solar system simulation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orrery.core.constants import ORBIT_SAMPLES, ORBIT_SAMPLES_HIGH_RES


@dataclass(frozen=True)
class SimulationCfg:
    start_datetime: datetime = datetime(2097, 1, 1)
    initial_speed: float = 0.25
    speed_step: float = 0.05
    speed_step_coarse: float = 1.0
    speed_step_fine: float = 0.01
    orbit_samples: int = ORBIT_SAMPLES
    orbit_samples_high_res: int = ORBIT_SAMPLES_HIGH_RES


DEFAULT_CFG = SimulationCfg()
