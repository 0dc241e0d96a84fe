from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from .config import StickConfig
from .geometry import Point, round_half_away


class StickEvent(Enum):
    """Notification produced when an interaction ends."""
    MOVED = auto()
    CLICKED = auto()


@dataclass(frozen=True)
class StickSnapshot:
    """Immutable view of the stick for painting/UI."""
    raw_x: int
    raw_y: int
    x: float            # normalized, after dead zone/inversion
    y: float
    magnitude: float
    angle_radians: float
    in_dead_zone: bool
    dragging: bool


def hit_test_stick(pointer_x: float, pointer_y: float, stick_center: Point, stick_radius: float) -> bool:
    """True when the pointer lies on or inside the thumb circle."""
    return math.hypot(pointer_x - stick_center[0], pointer_y - stick_center[1]) <= stick_radius


def clamp_to_radius(dx: int, dy: int, radius: int) -> Tuple[int, int]:
    """Scale (dx, dy) back onto the circle of *radius* when it lies outside."""
    radius = max(radius, 0)
    magnitude = math.hypot(dx, dy)
    if magnitude <= radius:
        return (dx, dy)
    scale = radius / magnitude
    return (round_half_away(dx * scale), round_half_away(dy * scale))


class StickState:
    """
    Thumb displacement and drag bookkeeping.

    The displacement is an integer pixel offset from the pad centre with Y
    growing upward. Normalized values are taken against ``pad_radius``, the
    radius of the last geometry snapshot the state was driven with.
    """

    def __init__(self, config: Optional[StickConfig] = None) -> None:
        self.config = config or StickConfig()
        self.pad_radius = 0
        self._dx = 0
        self._dy = 0
        self._press_origin: Optional[Tuple[float, float]] = None
        self._has_moved = False

    # ---- drag lifecycle ----
    @property
    def press_origin(self) -> Optional[Tuple[float, float]]:
        return self._press_origin

    @property
    def drag_active(self) -> bool:
        return self._press_origin is not None

    @property
    def has_moved(self) -> bool:
        return self._has_moved

    def begin_drag(self, pointer_x: float, pointer_y: float) -> None:
        self._press_origin = (pointer_x, pointer_y)
        self._has_moved = False

    def update_displacement(self, pointer_x: float, pointer_y: float, pad_radius: int) -> Point:
        """Move the thumb relative to the press point, clamped to the pad."""
        if self._press_origin is None:
            return self.displacement
        origin_x, origin_y = self._press_origin
        dx = round_half_away(pointer_x - origin_x)
        dy = -round_half_away(pointer_y - origin_y)
        self.pad_radius = pad_radius
        self._dx, self._dy = clamp_to_radius(dx, dy, pad_radius)
        self._has_moved = True
        return self.displacement

    def end_drag(self) -> Optional[StickEvent]:
        """Finish the interaction, returning which notification applies."""
        if self._press_origin is None:
            return None
        moved = self._has_moved
        self._press_origin = None
        self._has_moved = False
        if moved:
            self.recenter()
            return StickEvent.MOVED
        return StickEvent.CLICKED

    def recenter(self) -> None:
        self._dx = 0
        self._dy = 0

    # ---- outputs ----
    @property
    def displacement(self) -> Point:
        return (self._dx, self._dy)

    @property
    def magnitude(self) -> float:
        return math.hypot(self._dx, self._dy)

    @property
    def in_dead_zone(self) -> bool:
        if self.pad_radius <= 0:
            return True
        return self.magnitude < self.config.dead_zone * self.pad_radius

    @property
    def x(self) -> float:
        if self.in_dead_zone:
            return 0.0
        return self._dx / self.pad_radius

    @property
    def y(self) -> float:
        if self.in_dead_zone:
            return 0.0
        y = self._dy / self.pad_radius
        return -y if self.config.invert_y else y

    @property
    def angle_radians(self) -> float:
        if self._dx == 0 and self._dy == 0:
            return 0.0
        return math.atan2(self._dy, self._dx)

    @property
    def angle_degrees(self) -> float:
        return self.angle_radians * 180.0 / math.pi

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_magnitude(self) -> float:
        return self.magnitude

    def get_angle_radians(self) -> float:
        return self.angle_radians

    def get_angle_degrees(self) -> float:
        return self.angle_degrees

    def snapshot(self) -> StickSnapshot:
        return StickSnapshot(
            raw_x=self._dx,
            raw_y=self._dy,
            x=self.x,
            y=self.y,
            magnitude=self.magnitude,
            angle_radians=self.angle_radians,
            in_dead_zone=self.in_dead_zone,
            dragging=self.drag_active,
        )
