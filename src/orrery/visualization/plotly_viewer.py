from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import plotly.graph_objects as go

from orrery.core.constants import ORBIT_SAMPLES
from orrery.core.frames import Vector3, add
from orrery.objects.body import CelestialBody
from orrery.simulation.engine import SimulationLog
from orrery.simulation.scenario import SolarSystem
from orrery.visualization.display import display_orbit_path, display_position


def _display_world_positions(system: SolarSystem, t_days: float) -> Dict[str, Vector3]:
    world: Dict[str, Vector3] = {}

    def place(body: CelestialBody) -> Vector3:
        if body.name not in world:
            parent = system.parent_of(body)
            r = display_position(body, parent, t_days)
            world[body.name] = add(r, place(parent)) if parent is not None else r
        return world[body.name]

    for body in system.body_list():
        place(body)
    return world


def _xyz(points: List[Vector3]):
    return [p[0] for p in points], [p[1] for p in points], [p[2] for p in points]


def build_orbit_figure(
    system: SolarSystem,
    t_days: float = 0.0,
    sample_count: int = ORBIT_SAMPLES,
) -> go.Figure:
    """
    Static 3D scene:
      - central star at the origin
      - sampled orbit path for each body (moons around their planet)
      - position marker for each body at t
    """
    fig = go.Figure()

    fig.add_trace(go.Scatter3d(
        x=[0.0], y=[0.0], z=[0.0],
        mode="markers",
        name="Sun",
        marker=dict(size=8, color="gold"),
    ))

    world = _display_world_positions(system, t_days)

    for body in system.body_list():
        parent = system.parent_of(body)
        path = display_orbit_path(body, parent, sample_count)
        if parent is not None:
            origin = world[parent.name]
            path = [add(p, origin) for p in path]

        xs, ys, zs = _xyz(path)
        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            name=f"{body.name} orbit",
        ))

        r = world[body.name]
        fig.add_trace(go.Scatter3d(
            x=[r[0]], y=[r[1]], z=[r[2]],
            mode="markers",
            name=body.name,
            marker=dict(size=4),
        ))

    fig.update_layout(
        title=f"{system.name} at t = {t_days:.1f} days",
        scene=dict(
            xaxis_title="X",
            yaxis_title="Y (up)",
            zaxis_title="Z",
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )
    return fig


def render_orbits(
    system: SolarSystem,
    t_days: float = 0.0,
    out_html: str = "out/orbits.html",
    sample_count: int = ORBIT_SAMPLES,
) -> str:
    fig = build_orbit_figure(system, t_days, sample_count)

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html


def render_tracks(log: SimulationLog, out_html: str = "out/tracks.html") -> str:
    """
    Recorded world tracks from a simulation log, with a marker at the last sample.
    """
    fig = go.Figure()

    for name, samples in log.body_positions.items():
        xs, ys, zs = _xyz([r for (_t, r) in samples])

        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            name=f"{name} track",
        ))
        fig.add_trace(go.Scatter3d(
            x=[xs[-1]], y=[ys[-1]], z=[zs[-1]],
            mode="markers",
            name=f"{name} now",
            marker=dict(size=5),
        ))

    fig.update_layout(
        title="Recorded tracks",
        scene=dict(xaxis_title="X", yaxis_title="Y (up)", zaxis_title="Z", aspectmode="data"),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
