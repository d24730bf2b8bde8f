import logging

from orrery.core.ephemeris import bodies_from_data
from orrery.data.solar_system import solar_system_data
from orrery.simulation.clock import SimulationClock
from orrery.simulation.engine import Engine
from orrery.simulation.scenario import SolarSystem
from orrery.simulation.systems.state_recorder import StateRecorderSystem
from orrery.visualization.export_log import export_playback_bundle
from orrery.visualization.plotly_viewer import render_orbits, render_tracks

logging.basicConfig(level=logging.INFO)

system = SolarSystem.from_bodies("Solar System", bodies_from_data(solar_system_data()))

# Two simulated years, one tick per day
engine = Engine(dt_days=1.0, systems=[StateRecorderSystem()])
log = engine.run(system, t_start_days=0.0, t_end_days=730.0)

# One minute of frames at 60 fps and speed 1.0: one simulated day per second
clock = SimulationClock(speed=1.0)
frames = engine.run_clock(system, clock, wall_dt_s=1 / 60, n_frames=3600)
print("Clock date after playback:", clock.current_datetime.isoformat())

print("Wrote", render_orbits(system, t_days=clock.simulation_time))
print("Wrote", render_tracks(log))
print("Wrote", export_playback_bundle(system, log))
print("Recorded positions:", {k: len(v) for k, v in frames.body_positions.items()})
