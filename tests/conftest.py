import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from qt_thumbstick import StickConfig, VirtualStick  # noqa: E402


class Surface:
    """Mutable drawing-area size handed to the engine as its size provider."""

    def __init__(self, width=250, height=250):
        self.width = width
        self.height = height

    def __call__(self):
        return (self.width, self.height)


@pytest.fixture
def surface():
    return Surface()


@pytest.fixture
def stick(surface):
    # 250x250 with a 0.25 stick ratio: pad radius 100, stick radius 25, centre (125, 125)
    return VirtualStick(StickConfig(stick_size_ratio=0.25), surface_size=surface)


@pytest.fixture
def recorder():
    calls = []

    def record(*args):
        calls.append(args)

    record.calls = calls
    return record


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
