from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def orbital_to_reference(
    distance: float,
    true_anomaly_rad: float,
    raan_rad: float,
    inc_rad: float,
    argp_rad: float,
) -> Vector3:
    """
    Rotate a point of the orbital plane into the reference frame.

    The point is given in polar form (distance, true anomaly) measured from
    periapsis. Rotations applied: argument of periapsis, inclination,
    ascending node. The reference plane is x/z with y pointing up, so the
    inclined part of the orbit lifts along +y.
    """
    u = true_anomaly_rad + argp_rad
    cos_u = math.cos(u)
    sin_u = math.sin(u)
    cos_raan = math.cos(raan_rad)
    sin_raan = math.sin(raan_rad)
    cos_inc = math.cos(inc_rad)

    x = distance * (cos_raan * cos_u - sin_raan * sin_u * cos_inc)
    z = distance * (sin_raan * cos_u + cos_raan * sin_u * cos_inc)
    y = distance * (sin_u * math.sin(inc_rad))
    return (x, y, z)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def scale(a: Vector3, k: float) -> Vector3:
    return (a[0]*k, a[1]*k, a[2]*k)


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def normalize(a: Vector3) -> Vector3:
    """
    Unit vector along a. The zero vector is returned unchanged.
    """
    n = norm(a)
    if n == 0:
        return a
    return scale(a, 1.0 / n)
