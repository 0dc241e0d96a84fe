"""Qt widgets for the virtual thumbstick."""

from .stick_widget import StickStyle, StickWidget

__all__ = ['StickStyle', 'StickWidget']
