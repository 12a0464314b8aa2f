"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def rotate(v: Vec, angle: float) -> Vec:
    """Rotate by `angle` radians. Positive angles turn clockwise on a y-down screen."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (v[0] * c - v[1] * s, v[0] * s + v[1] * c)


def clamp_components(v: Vec, limit: float) -> Vec:
    return (max(-limit, min(v[0], limit)), max(-limit, min(v[1], limit)))


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def zero() -> Vec:
    return (0.0, 0.0)
