"""Framework independent virtual joystick engine.

A host GUI layer composes :class:`VirtualStick`, forwards pointer events to it
and draws whatever :meth:`VirtualStick.layout` returns.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple

from .config import StickConfig, check_unit_range
from .geometry import PadGeometry, PadLayout, Point
from .observers import ObserverRegistry
from .stick_state import StickEvent, StickSnapshot, StickState, hit_test_stick


logger = logging.getLogger(__name__)

SurfaceSizeProvider = Callable[[], Tuple[int, int]]


class VirtualStick:
    """
    Pointer-driven stick with dead zone and Y inversion.

    - ``surface_size`` returns the host drawing area as ``(width, height)``.
    - Every pointer handler takes one layout snapshot and uses it for both
      hit-testing and clamping.
    - Listeners are called with this instance, outside the state lock.
    """

    def __init__(
        self,
        config: Optional[StickConfig] = None,
        surface_size: Optional[SurfaceSizeProvider] = None,
    ) -> None:
        self._config = config or StickConfig()
        self._state = StickState(self._config)
        self._geometry = PadGeometry(self.get_config)
        self._surface_size = surface_size or (lambda: (0, 0))
        self._lock = threading.RLock()
        self._moved = ObserverRegistry()
        self._clicked = ObserverRegistry()

    # ---- host surface ----
    def set_surface_size_provider(self, provider: SurfaceSizeProvider) -> None:
        self._surface_size = provider

    def layout(self, width: Optional[int] = None, height: Optional[int] = None) -> PadLayout:
        """Render geometry for the given size, or the current surface size."""
        if width is None or height is None:
            current_w, current_h = self._surface_size()
            width = current_w if width is None else width
            height = current_h if height is None else height
        with self._lock:
            return self._geometry.layout(width, height)

    def thumb_center(self, layout: Optional[PadLayout] = None) -> Point:
        with self._lock:
            layout = layout or self.layout()
            return layout.thumb_center(self._state.displacement)

    # ---- pointer events ----
    def on_pointer_down(self, x: float, y: float) -> bool:
        """Start a drag if the press lands on the thumb. Returns True when it does."""
        with self._lock:
            if self._state.drag_active:
                logger.debug("Ignoring press at (%s, %s) during an active drag", x, y)
                return False
            snapshot = self.layout()
            self._state.pad_radius = snapshot.pad_radius
            if snapshot.is_empty:
                return False
            center = snapshot.thumb_center(self._state.displacement)
            if not hit_test_stick(x, y, center, snapshot.stick_radius):
                return False
            self._state.begin_drag(x, y)
            logger.debug("Drag started at (%s, %s)", x, y)
            return True

    def on_pointer_move(self, x: float, y: float) -> bool:
        with self._lock:
            if not self._state.drag_active:
                logger.debug("Ignoring move to (%s, %s) without an active drag", x, y)
                return False
            snapshot = self.layout()
            self._state.update_displacement(x, y, snapshot.pad_radius)
        self._moved.notify(self)
        return True

    def on_pointer_up(self, x: float, y: float) -> Optional[StickEvent]:
        with self._lock:
            if not self._state.drag_active:
                logger.debug("Ignoring release at (%s, %s) without an active drag", x, y)
                return None
            event = self._state.end_drag()
            logger.debug("Drag ended at (%s, %s): %s", x, y, event.name)
        if event is StickEvent.MOVED:
            self._moved.notify(self)
        else:
            self._clicked.notify(self)
        return event

    # ---- outputs ----
    def get_x(self) -> float:
        with self._lock:
            return self._state.x

    def get_y(self) -> float:
        with self._lock:
            return self._state.y

    def get_magnitude(self) -> float:
        with self._lock:
            return self._state.magnitude

    def get_angle_radians(self) -> float:
        with self._lock:
            return self._state.angle_radians

    def get_angle_degrees(self) -> float:
        with self._lock:
            return self._state.angle_degrees

    def get_displacement(self) -> Point:
        with self._lock:
            return self._state.displacement

    def is_dragging(self) -> bool:
        with self._lock:
            return self._state.drag_active

    def snapshot(self) -> StickSnapshot:
        with self._lock:
            return self._state.snapshot()

    # ---- configuration ----
    def get_config(self) -> StickConfig:
        return self._config

    def set_config(self, cfg: StickConfig) -> None:
        cfg.validate()
        with self._lock:
            self._config = cfg
            self._state.config = cfg
        logger.info("Stick configuration replaced: %s", cfg)

    def _update_config(self, **changes) -> None:
        with self._lock:
            cfg = self._config.replaced(**changes)
            self._config = cfg
            self._state.config = cfg
        logger.info("Stick configuration changed: %s", changes)

    def get_stick_size_ratio(self) -> float:
        return self._config.stick_size_ratio

    def set_stick_size_ratio(self, ratio: float) -> None:
        self._update_config(stick_size_ratio=check_unit_range(ratio, "Stick size"))

    def get_arrow_size_ratio(self) -> float:
        return self._config.arrow_size_ratio

    def set_arrow_size_ratio(self, ratio: float) -> None:
        self._update_config(arrow_size_ratio=check_unit_range(ratio, "Arrow size"))

    def get_dead_zone(self) -> float:
        return self._config.dead_zone

    def set_dead_zone(self, value: float) -> None:
        self._update_config(dead_zone=check_unit_range(value, "Dead zone"))

    def is_y_inverted(self) -> bool:
        return self._config.invert_y

    def set_invert_y(self, invert: bool) -> None:
        self._update_config(invert_y=bool(invert))

    # ---- listeners ----
    def add_moved_listener(self, callback: Callable[["VirtualStick"], None]) -> None:
        self._moved.add(callback)

    def remove_moved_listener(self, callback: Callable[["VirtualStick"], None]) -> None:
        self._moved.remove(callback)

    def clear_moved_listeners(self) -> None:
        self._moved.clear()

    def add_clicked_listener(self, callback: Callable[["VirtualStick"], None]) -> None:
        self._clicked.add(callback)

    def remove_clicked_listener(self, callback: Callable[["VirtualStick"], None]) -> None:
        self._clicked.remove(callback)

    def clear_clicked_listeners(self) -> None:
        self._clicked.clear()
