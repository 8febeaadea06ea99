from __future__ import annotations

"""Monotone cubic interpolation for line paths.

Tangents follow Steffen (1990): each interior tangent is limited by the
neighbouring secants so the curve never overshoots between samples, and the
curve passes through every sample point.
"""


from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

MOVETO = "M"
LINETO = "L"
CURVETO = "C"


def _coord(value: float) -> str:
    number = round(float(value), 3)
    if number.is_integer():
        return str(int(number))
    return repr(number)


@dataclass(frozen=True)
class PathCommand:
    op: str
    points: Tuple[Point, ...]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass(frozen=True)
class LinePath:
    """Pixel-space path made of move, line and cubic Bézier commands."""

    commands: Tuple[PathCommand, ...]

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def anchors(self) -> Tuple[Point, ...]:
        """On-curve points, one per input sample."""
        return tuple(command.end for command in self.commands)

    def to_svg(self) -> str:
        parts = []
        for command in self.commands:
            coords = "".join(
                ("," if index else "") + f"{_coord(x)},{_coord(y)}" for index, (x, y) in enumerate(command.points)
            )
            parts.append(command.op + coords)
        return "".join(parts)


def monotone_tangents(xs: Sequence[float], ys: Sequence[float]) -> np.ndarray:
    """Return the curve slope at each sample for monotone-in-x interpolation."""
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    count = len(x)
    tangents = np.zeros(count)
    if count < 2:
        return tangents

    h = np.diff(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        secants = np.where(h != 0, np.diff(y) / h, 0.0)
    if count == 2:
        tangents[:] = secants[0]
        return tangents

    s0, s1 = secants[:-1], secants[1:]
    h0, h1 = h[:-1], h[1:]
    with np.errstate(divide="ignore", invalid="ignore"):
        p = np.where(h0 + h1 != 0, (s0 * h1 + s1 * h0) / (h0 + h1), 0.0)
    sign0 = np.where(s0 < 0, -1.0, 1.0)
    sign1 = np.where(s1 < 0, -1.0, 1.0)
    tangents[1:-1] = (sign0 + sign1) * np.minimum(np.minimum(np.abs(s0), np.abs(s1)), 0.5 * np.abs(p))

    tangents[0] = (3 * secants[0] - tangents[1]) / 2 if h[0] != 0 else tangents[1]
    tangents[-1] = (3 * secants[-1] - tangents[-2]) / 2 if h[-1] != 0 else tangents[-2]
    return tangents


def build_monotone_path(xs: Sequence[float], ys: Sequence[float]) -> LinePath:
    """Interpolate pixel points with cubic segments; fewer than three points stay straight."""
    if len(xs) != len(ys):
        raise ValueError(f"x and y lengths differ ({len(xs)} != {len(ys)})")
    points: List[Point] = [(float(x), float(y)) for x, y in zip(xs, ys)]
    if not points:
        return LinePath(commands=())

    commands = [PathCommand(MOVETO, (points[0],))]
    if len(points) < 3:
        commands.extend(PathCommand(LINETO, (point,)) for point in points[1:])
        return LinePath(commands=tuple(commands))

    tangents = monotone_tangents(xs, ys)
    for index in range(len(points) - 1):
        (x0, y0), (x1, y1) = points[index], points[index + 1]
        t0, t1 = tangents[index], tangents[index + 1]
        dx = (x1 - x0) / 3
        commands.append(
            PathCommand(
                CURVETO,
                ((x0 + dx, y0 + dx * t0), (x1 - dx, y1 - dx * t1), (x1, y1)),
            )
        )
    return LinePath(commands=tuple(commands))


__all__ = ["CURVETO", "LINETO", "LinePath", "MOVETO", "PathCommand", "build_monotone_path", "monotone_tangents"]
