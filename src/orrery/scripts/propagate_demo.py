import logging

from orrery.core.ephemeris import bodies_from_data
from orrery.data.solar_system import solar_system_data
from orrery.simulation.scenario import SolarSystem

logging.basicConfig(level=logging.INFO)

system = SolarSystem.from_bodies("Solar System", bodies_from_data(solar_system_data()))

print("Moon period (days):", round(system.get("Moon").orbit.period_days, 3))

for t in [0, 30, 90, 180, 365]:
    r = system.world_position("Earth", float(t))
    print(t, tuple(round(c, 3) for c in r))
