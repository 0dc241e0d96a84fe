"""Pad, thumb and arrow layout for a rectangular drawing surface.

Everything here is a pure function of the surface size and a
:class:`~qt_thumbstick.config.StickConfig`. Screen space is used throughout:
origin top-left, X grows right, Y grows down.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from .config import StickConfig
from .errors import InvalidGeometryError


logger = logging.getLogger(__name__)

Point = Tuple[int, int]

_SQRT3 = math.sqrt(3.0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class ArrowDirection(Enum):
    """Cardinal arrow directions with their screen-space rotation."""
    UP = -math.pi / 2
    DOWN = math.pi / 2
    LEFT = math.pi
    RIGHT = 0.0

    @property
    def angle(self) -> float:
        return self.value

    @property
    def unit(self) -> Point:
        """Screen-space unit step along this direction."""
        return _UNIT_STEPS[self]


_UNIT_STEPS = {
    ArrowDirection.UP: (0, -1),
    ArrowDirection.DOWN: (0, 1),
    ArrowDirection.LEFT: (-1, 0),
    ArrowDirection.RIGHT: (1, 0),
}

ARROW_ORDER = (
    ArrowDirection.UP,
    ArrowDirection.DOWN,
    ArrowDirection.LEFT,
    ArrowDirection.RIGHT,
)


def rotate_point(point: Point, origin: Point, theta: float) -> Point:
    """Rotate *point* about *origin* by *theta* radians, rounding the result."""
    px, py = point
    ox, oy = origin
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x = cos_t * (px - ox) - sin_t * (py - oy) + ox
    y = sin_t * (px - ox) + cos_t * (py - oy) + oy
    return (round_half_away(x), round_half_away(y))


def rotate_points(xs: Sequence[int], ys: Sequence[int], origin: Point, theta: float) -> List[Point]:
    if len(xs) != len(ys):
        raise InvalidGeometryError(
            f"Coordinate sequences must be the same length ({len(xs)} != {len(ys)})"
        )
    return [rotate_point((x, y), origin, theta) for x, y in zip(xs, ys)]


def equilateral_triangle(center: Point, radius: int, theta: float) -> Tuple[Point, Point, Point]:
    """
    Vertices of an equilateral triangle around *center* pointing along *theta*.

    Unrotated, the tip lies on +X at ``radius*sqrt(3)/3`` and the base sits
    ``radius*sqrt(3)/6`` behind the centre, ``radius`` wide.
    """
    cx, cy = center
    forward = round_half_away(radius * _SQRT3 / 3)
    back = round_half_away(radius * _SQRT3 / 6)
    half = radius // 2
    xs = (cx + forward, cx - back, cx - back)
    ys = (cy, cy - half, cy + half)
    return tuple(rotate_points(xs, ys, center, theta))


@dataclass(frozen=True)
class ArrowTriangle:
    direction: ArrowDirection
    center: Point
    vertices: Tuple[Point, Point, Point]


@dataclass(frozen=True)
class PadLayout:
    """Immutable render/hit-test geometry for one surface size."""
    width: int
    height: int
    pad_center: Point
    pad_diameter: int
    pad_radius: int
    stick_diameter: int
    stick_radius: int
    arrow_radius: int
    arrow_inset: int
    pad_origin: Point
    arrow_triangles: Tuple[ArrowTriangle, ...]

    @property
    def is_empty(self) -> bool:
        return self.pad_diameter <= 0

    def arrow(self, direction: ArrowDirection) -> ArrowTriangle:
        for triangle in self.arrow_triangles:
            if triangle.direction is direction:
                return triangle
        raise KeyError(direction)

    def thumb_center(self, displacement: Point) -> Point:
        """Screen position of the thumb for a stick displacement (Y up)."""
        dx, dy = displacement
        return (self.pad_center[0] + dx, self.pad_center[1] - dy)

    def thumb_origin(self, displacement: Point) -> Point:
        """Top-left corner of the thumb's bounding square."""
        cx, cy = self.thumb_center(displacement)
        return (cx - self.stick_radius, cy - self.stick_radius)


def _empty_layout(width: int, height: int) -> PadLayout:
    center = (max(width, 0) // 2, max(height, 0) // 2)
    triangles = tuple(
        ArrowTriangle(direction, center, (center, center, center))
        for direction in ARROW_ORDER
    )
    return PadLayout(
        width=width,
        height=height,
        pad_center=center,
        pad_diameter=0,
        pad_radius=0,
        stick_diameter=0,
        stick_radius=0,
        arrow_radius=0,
        arrow_inset=0,
        pad_origin=center,
        arrow_triangles=triangles,
    )


def layout(width: int, height: int, config: StickConfig) -> PadLayout:
    """Compute the pad layout for a ``width`` x ``height`` surface.

    A surface with a zero or negative dimension yields a zero-size layout
    rather than an error; resizing to nothing is a transient UI state.
    """
    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        logger.debug("Degenerate surface %dx%d, using empty layout", width, height)
        return _empty_layout(width, height)

    stick_size = config.stick_size_ratio
    working_area = min(width, height)

    pad_diameter = round_half_away(working_area / (1 + stick_size))
    pad_radius = pad_diameter // 2
    stick_diameter = round_half_away(working_area * stick_size / (1 + stick_size))
    stick_radius = stick_diameter // 2
    arrow_radius = round_half_away(pad_diameter * config.arrow_size_ratio)

    center_x = width // 2
    center_y = height // 2
    arrow_inset = (stick_radius + pad_radius) // 2

    triangles = []
    for direction in ARROW_ORDER:
        step_x, step_y = direction.unit
        center = (center_x + step_x * arrow_inset, center_y + step_y * arrow_inset)
        vertices = equilateral_triangle(center, arrow_radius, direction.angle)
        triangles.append(ArrowTriangle(direction, center, vertices))

    return PadLayout(
        width=width,
        height=height,
        pad_center=(center_x, center_y),
        pad_diameter=pad_diameter,
        pad_radius=pad_radius,
        stick_diameter=stick_diameter,
        stick_radius=stick_radius,
        arrow_radius=arrow_radius,
        arrow_inset=arrow_inset,
        pad_origin=(center_x - pad_radius, center_y - pad_radius),
        arrow_triangles=tuple(triangles),
    )


class PadGeometry:
    """Layout calculator bound to a live configuration."""

    def __init__(self, config_provider: Callable[[], StickConfig]) -> None:
        self._config_provider = config_provider

    def layout(self, width: int, height: int) -> PadLayout:
        return layout(width, height, self._config_provider())
