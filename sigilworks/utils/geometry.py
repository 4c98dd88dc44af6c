"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def polar(center: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``center`` along ``angle`` (radians, y down)."""
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def harmonic_weight(h: float) -> float:
    """Map an unbounded non-negative harmonic into [0, 1)."""
    if h <= 0:
        return 0.0
    return h / (1.0 + h)


def ring(
    center: Point,
    radii: NDArray[np.float64] | float,
    count: int,
    rotation: float = 0.0,
) -> list[Point]:
    """``count`` points evenly spaced around ``center``.

    ``radii`` is a scalar or one radius per point.
    """
    if count <= 0:
        return []
    angles = rotation + np.arange(count) * (2 * np.pi / count)
    r = np.broadcast_to(np.asarray(radii, dtype=np.float64), angles.shape)
    xs = center.x + r * np.cos(angles)
    ys = center.y + r * np.sin(angles)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def archimedean_spiral(
    center: Point,
    radius: float,
    turns: float,
    count: int,
    rotation: float = 0.0,
) -> list[Point]:
    """Sample an Archimedean spiral r = radius * t, theta = rotation + 2π·turns·t, t ∈ [0, 1]."""
    if count <= 0:
        return []
    t = np.linspace(0.0, 1.0, count)
    theta = rotation + 2 * np.pi * turns * t
    r = radius * t
    xs = center.x + r * np.cos(theta)
    ys = center.y + r * np.sin(theta)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def triangle(center: Point, radius: float, rotation: float = 0.0) -> list[Point]:
    """Equilateral triangle vertices, first vertex pointing up before rotation."""
    return ring(center, radius, 3, rotation - math.pi / 2)
