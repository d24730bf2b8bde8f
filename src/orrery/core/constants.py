from __future__ import annotations

# Astronomical unit in km
AU_TO_KM: float = 149597900
KM_TO_AU: float = 1 / 149597900
KM_TO_M: float = 1000.0

# Gravitational constant in m^3 / (kg s^2)
G: float = 6.6743e-11

# Central star mass in kg
SUN_MASS: float = 1.9885e30

# Placeholder mass for bodies whose source data has none (kg)
DEFAULT_BODY_MASS_KG: float = 1e13
CENTRAL_BODY_NAME: str = "Sun"

SECOND_TO_DAY: float = 0.00001157407
DEG_TO_RAD: float = 0.01745329

# Display units per AU
ORBIT_SCALE: float = 1000

# Spin period used when the source data has none (days)
DEFAULT_SPIN_PERIOD_DAYS: float = 0.5

# Kepler solver limits
MAX_SOLVABLE_ECCENTRICITY: float = 0.98
CIRCULAR_ECCENTRICITY: float = 0.05
KEPLER_TOLERANCE_RAD: float = 0.001
KEPLER_MAX_ITER: int = 100
MEAN_ANOMALY_DECIMALS: int = 6

# Display sizing
EARTH_RADIUS_DISPLAY_KM: float = 6300
MIN_DISPLAY_RADIUS: float = 0.02

ORBIT_SAMPLES: int = 128
ORBIT_SAMPLES_HIGH_RES: int = 2048
