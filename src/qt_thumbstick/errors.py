"""Exception types raised by the thumbstick engine."""


class ThumbstickError(Exception):
    """Base class for all thumbstick errors."""


class ConfigurationError(ThumbstickError, ValueError):
    """A ratio or dead zone outside its allowed range."""


class InvalidGeometryError(ThumbstickError, ValueError):
    """Geometry input that cannot describe a shape."""
