"""Callback registry used for stick notifications."""

from typing import Callable, List


class ObserverRegistry:
    """Ordered set of callbacks notified with the same arguments."""

    def __init__(self) -> None:
        self._callbacks: List[Callable] = []

    def add(self, callback: Callable) -> None:
        if not callable(callback):
            raise TypeError(f"Observer must be callable, got {callback!r}")
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove(self, callback: Callable) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def clear(self) -> None:
        self._callbacks.clear()

    def notify(self, *args) -> None:
        # Copy so callbacks may unregister themselves while being notified.
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback) -> bool:
        return callback in self._callbacks
