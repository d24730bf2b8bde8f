"""
Body-tree records and conversion to simulator bodies.

Records are the JSON shape produced by the ephemeris data generator:

    {
      "name": "Earth", "mass": 5.97e24, "radius": 6371.0,
      "axialTilt": 23.44, "revolutionPeriod": 0.997, "texture": "",
      "moons": [ ...records... ],
      "orbit": {
        "eccentricity": 0.0167, "semiMajorAxis": 1.0,
        "inclination": 0.0, "ascendingNode": -11.26,
        "periapsisArg": 114.2, "meanAnomalyAtEpoch": 358.6,
        "period": 365.256, "orbitingBody": "Sun", "soiRadius": 0
      }
    }

Angles arrive in degrees and leave this module in radians. Semi-major axes
are in AU, periods in days, masses in kg, radii in km.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from orrery.core.constants import DEFAULT_BODY_MASS_KG, DEG_TO_RAD
from orrery.core.errors import InvalidArgumentError
from orrery.objects.body import CelestialBody
from orrery.physics.orbit import OrbitalElements

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def orbit_from_record(orbit: Record) -> OrbitalElements:
    """
    Convert an orbit record (degrees) to OrbitalElements (radians).
    """
    try:
        fields = dict(
            semi_major_axis_au=float(orbit["semiMajorAxis"]),
            eccentricity=float(orbit.get("eccentricity", 0.0)),
            inclination_rad=DEG_TO_RAD * float(orbit.get("inclination", 0.0)),
            ascending_node_rad=DEG_TO_RAD * float(orbit.get("ascendingNode", 0.0)),
            periapsis_arg_rad=DEG_TO_RAD * float(orbit.get("periapsisArg", 0.0)),
            mean_anomaly_at_epoch_rad=DEG_TO_RAD * float(orbit.get("meanAnomalyAtEpoch", 0.0)),
            period_days=_optional_float(orbit.get("period")),
            orbiting_body=orbit.get("orbitingBody") or None,
            soi_radius=float(orbit.get("soiRadius", 0.0)),
        )
    except KeyError as e:
        raise InvalidArgumentError(f"Orbit record is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Malformed orbit record: {e}") from e

    return OrbitalElements(**fields)


def body_from_record(record: Record) -> CelestialBody:
    """
    Build a body and its moons from a record. A missing mass gets the
    small placeholder mass used by the data generator.
    """
    if "name" not in record:
        raise InvalidArgumentError("Body record is missing field 'name'")
    if "orbit" not in record:
        raise InvalidArgumentError(f"Body record {record['name']!r} has no orbit")

    name = str(record["name"])
    try:
        mass_kg = float(record.get("mass") or DEFAULT_BODY_MASS_KG)
        radius_km = float(record.get("radius", 0.0))
        axial_tilt_rad = DEG_TO_RAD * float(record.get("axialTilt", 0.0))
        revolution_period_days = _optional_float(record.get("revolutionPeriod"))
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Malformed body record {name!r}: {e}") from e

    return CelestialBody(
        name=name,
        orbit=orbit_from_record(record["orbit"]),
        mass_kg=mass_kg,
        radius_km=radius_km,
        axial_tilt_rad=axial_tilt_rad,
        revolution_period_days=revolution_period_days,
        moons=[body_from_record(m) for m in record.get("moons") or []],
        texture=record.get("texture") or "",
    )


def bodies_from_data(data: Record) -> List[CelestialBody]:
    """
    Convert a {"bodies": [...]} document to a list of root bodies.
    """
    records = data.get("bodies")
    if records is None:
        raise InvalidArgumentError("Document has no 'bodies' list")
    bodies = [body_from_record(r) for r in records]
    logger.info("Loaded %d root bodies", len(bodies))
    return bodies


def load_bodies(filepath: str) -> List[CelestialBody]:
    """
    Load a body tree from a JSON file.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.debug("Read body data from %s", filepath)
    return bodies_from_data(data)


def orbit_to_record(orbit: OrbitalElements) -> Record:
    return {
        "eccentricity": orbit.eccentricity,
        "semiMajorAxis": orbit.semi_major_axis_au,
        "inclination": orbit.inclination_rad / DEG_TO_RAD,
        "ascendingNode": orbit.ascending_node_rad / DEG_TO_RAD,
        "periapsisArg": orbit.periapsis_arg_rad / DEG_TO_RAD,
        "meanAnomalyAtEpoch": orbit.mean_anomaly_at_epoch_rad / DEG_TO_RAD,
        "period": orbit.period_days,
        "orbitingBody": orbit.orbiting_body,
        "soiRadius": orbit.soi_radius,
    }


def body_to_record(body: CelestialBody) -> Record:
    """
    Inverse of body_from_record (angles back in degrees).
    """
    return {
        "name": body.name,
        "mass": body.mass_kg,
        "radius": body.radius_km,
        "axialTilt": body.axial_tilt_rad / DEG_TO_RAD,
        "revolutionPeriod": body.revolution_period_days,
        "texture": body.texture,
        "moons": [body_to_record(m) for m in body.moons],
        "orbit": orbit_to_record(body.orbit),
    }


def save_bodies(bodies: List[CelestialBody], out_path: str = "out/bodies.json") -> str:
    """
    Write bodies as a {"bodies": [...]} JSON document.
    """
    data = {"bodies": [body_to_record(b) for b in bodies]}

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent="\t")

    return out_path
