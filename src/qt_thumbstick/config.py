"""Configuration for the thumbstick engine."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import ConfigurationError


DEFAULT_STICK_SIZE = 0.33
DEFAULT_ARROW_SIZE = 0.06
DEFAULT_DEAD_ZONE = 0.0


def check_unit_range(value: float, label: str) -> float:
    """Return *value* as float, raising ConfigurationError outside [0, 1]."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{label} must be a number, got {value!r}") from None
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{label} must be between 0.0 and 1.0, got {value}")
    return value


@dataclass(frozen=True)
class StickConfig:
    """User editable stick configuration."""

    stick_size_ratio: float = DEFAULT_STICK_SIZE  # thumb size vs pad [0..1]
    arrow_size_ratio: float = DEFAULT_ARROW_SIZE  # arrow size vs pad diameter [0..1]
    dead_zone: float = DEFAULT_DEAD_ZONE          # fraction of pad radius [0..1]
    invert_y: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self):
        # Frozen, so normalised values are written through object.__setattr__.
        for name, label in (
            ("stick_size_ratio", "Stick size"),
            ("arrow_size_ratio", "Arrow size"),
            ("dead_zone", "Dead zone"),
        ):
            object.__setattr__(self, name, check_unit_range(getattr(self, name), label))
        object.__setattr__(self, "invert_y", bool(self.invert_y))

    def replaced(self, **changes) -> "StickConfig":
        """Return a validated copy with *changes* applied."""
        return replace(self, **changes)
