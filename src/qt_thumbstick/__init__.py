"""On-screen virtual joystick: pointer-to-stick mapping, pad geometry and a Qt widget."""

from .config import StickConfig
from .errors import ConfigurationError, InvalidGeometryError, ThumbstickError
from .geometry import ArrowDirection, ArrowTriangle, PadGeometry, PadLayout, layout
from .stick_state import StickEvent, StickSnapshot, StickState
from .virtual_stick import VirtualStick

__all__ = [
    'ArrowDirection',
    'ArrowTriangle',
    'ConfigurationError',
    'InvalidGeometryError',
    'PadGeometry',
    'PadLayout',
    'StickConfig',
    'StickEvent',
    'StickSnapshot',
    'StickState',
    'ThumbstickError',
    'VirtualStick',
    'layout',
]
