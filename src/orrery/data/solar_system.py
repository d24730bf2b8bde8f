"""
Built-in solar system: the eight planets and the Moon, as body records.

Physical data follows the public solar system OpenData API; node, periapsis
and mean anomaly angles come from J2000 planetary elements. Angles are in
degrees, semi-major axes in AU (converted from km), spin periods in days
(negative for retrograde rotation). The Moon has no orbital period so that it
is derived from Earth's mass at load time.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from orrery.core.constants import CENTRAL_BODY_NAME, KM_TO_AU


def _record(
    name: str,
    mass: float,
    radius: float,
    axial_tilt: float,
    rotation_hours: float,
    semi_major_axis_km: float,
    eccentricity: float,
    inclination: float,
    ascending_node: float = 0.0,
    periapsis_arg: float = 0.0,
    mean_anomaly: float = 0.0,
    period: Optional[float] = None,
    orbiting_body: str = CENTRAL_BODY_NAME,
    moons: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    return {
        "name": name,
        "mass": mass,
        "radius": radius,
        "axialTilt": axial_tilt,
        "revolutionPeriod": rotation_hours / 24,
        "texture": "",
        "moons": moons or [],
        "orbit": {
            "eccentricity": eccentricity,
            "semiMajorAxis": semi_major_axis_km * KM_TO_AU,
            "inclination": inclination,
            "ascendingNode": ascending_node,
            "periapsisArg": periapsis_arg,
            "meanAnomalyAtEpoch": mean_anomaly,
            "period": period,
            "orbitingBody": orbiting_body,
            "soiRadius": 0,
        },
    }


MOON = _record(
    "Moon", 7.346e22, 1738.1, 6.68, 655.728,
    384400, 0.0549, 5.145,
    orbiting_body="Earth",
)

SOLAR_SYSTEM: Dict[str, Any] = {
    "bodies": [
        _record("Mercury", 3.30114e23, 2439.4, 0.034, 1407.6,
                57909227, 0.2056, 7.0, 48.331, 29.124, 174.796, 87.969),
        _record("Venus", 4.86747e24, 6051.8, 177.36, -5832.5,
                108209475, 0.0068, 3.39, 76.68, 54.884, 50.115, 224.701),
        _record("Earth", 5.97237e24, 6371.0084, 23.4393, 23.9345,
                149598262, 0.0167, 0.0, -11.26064, 114.20783, 358.617, 365.256,
                moons=[MOON]),
        _record("Mars", 6.41712e23, 3389.5, 25.19, 24.6229,
                227943824, 0.0934, 1.85, 49.558, 286.502, 19.412, 686.98),
        _record("Jupiter", 1.89819e27, 69911, 3.13, 9.925,
                778340821, 0.0484, 1.304, 100.464, 273.867, 20.02, 4332.589),
        _record("Saturn", 5.68336e26, 58232, 26.73, 10.656,
                1426666422, 0.0539, 2.485, 113.665, 339.392, 317.02, 10759.22),
        _record("Uranus", 8.68127e25, 25362, 97.77, -17.24,
                2870658186, 0.0473, 0.772, 74.006, 96.998857, 142.2386, 30685.4),
        _record("Neptune", 1.02413e26, 24622, 28.32, 16.11,
                4498396441, 0.0086, 1.769, 131.784, 276.336, 256.228, 60189.0),
    ]
}


def solar_system_data() -> Dict[str, Any]:
    """A fresh copy of the built-in records, safe for callers to modify."""
    return copy.deepcopy(SOLAR_SYSTEM)
