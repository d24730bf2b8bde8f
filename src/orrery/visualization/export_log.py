from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from orrery.core.constants import ORBIT_SAMPLES
from orrery.simulation.engine import SimulationLog
from orrery.simulation.scenario import SolarSystem
from orrery.visualization.display import display_orbit_path, display_radius


def export_log_to_json(log: SimulationLog, out_path: str = "out/simlog.json") -> str:
    """
    Export minimal playback data:
      {
        "body_positions": {
          "Earth": [{"t":0.0,"r":[x,y,z]}, ...],
          ...
        }
      }
    """
    data: Dict[str, Any] = {"body_positions": {}}

    for name, samples in log.body_positions.items():
        data["body_positions"][name] = [{"t": t, "r": [r[0], r[1], r[2]]} for (t, r) in samples]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_playback_bundle(
    system: SolarSystem,
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
    sample_count: int = ORBIT_SAMPLES,
) -> str:
    """
    Export a bundle for a 3D viewer:
      - times_days: global time vector
      - body_positions: world positions over time
      - bodies: metadata (parent, display radius, spin period, axial tilt)
      - orbit_paths: closed orbit polylines relative to the parent, display units

    JSON shape:
    {
      "times_days": [0,1,2,...],
      "body_positions": { "Earth": [[x,y,z], ...], ... },
      "bodies": { "Moon": {"parent": "Earth", "display_radius": ..., ...}, ...},
      "orbit_paths": { "Earth": [[x,y,z], ...], ... }
    }
    """
    names = sorted(log.body_positions.keys())
    if not names:
        raise ValueError("No body positions found in log.")

    # Reference times (all bodies are recorded on the same ticks)
    ref_samples = log.body_positions[names[0]]
    times: List[float] = [t for (t, _r) in ref_samples]

    data: Dict[str, Any] = {
        "times_days": times,
        "body_positions": {},
        "bodies": {},
        "orbit_paths": {},
    }

    for name in names:
        samples = log.body_positions[name]
        if len(samples) != len(times):
            raise ValueError(f"{name} samples length mismatch.")
        data["body_positions"][name] = [[r[0], r[1], r[2]] for (_t, r) in samples]

    for body in system.body_list():
        parent = system.parent_of(body)
        data["bodies"][body.name] = {
            "parent": parent.name if parent is not None else None,
            "display_radius": display_radius(body),
            "revolution_period_days": body.revolution_period_days,
            "axial_tilt_rad": body.axial_tilt_rad,
            "period_days": body.orbit.period_days,
        }
        path = display_orbit_path(body, parent, sample_count)
        data["orbit_paths"][body.name] = [[p[0], p[1], p[2]] for p in path]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
