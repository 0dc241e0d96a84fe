import threading

import pytest

from qt_thumbstick import ConfigurationError, StickConfig, StickEvent, VirtualStick


CENTER = (125, 125)


def drag(stick, *points):
    """Press on the thumb centre, move through *points* and release at the last one."""
    assert stick.on_pointer_down(*CENTER)
    for point in points:
        stick.on_pointer_move(*point)
    end = points[-1] if points else CENTER
    return stick.on_pointer_up(*end)


def test_outputs_start_at_zero(stick):
    assert stick.get_x() == 0.0
    assert stick.get_y() == 0.0
    assert stick.get_magnitude() == 0.0
    assert stick.get_angle_radians() == 0.0
    assert stick.get_angle_degrees() == 0.0
    assert not stick.is_dragging()


def test_layout_defaults_to_surface_size(stick, surface):
    assert stick.layout().pad_radius == 100
    assert stick.layout(200, 100).pad_center == (100, 50)
    surface.width = 100
    assert stick.layout().pad_center == (50, 125)


def test_press_off_the_thumb_does_not_start_a_drag(stick, recorder):
    stick.add_moved_listener(recorder)
    stick.add_clicked_listener(recorder)

    assert not stick.on_pointer_down(200, 125)
    assert not stick.on_pointer_move(230, 125)
    assert stick.on_pointer_up(230, 125) is None

    assert recorder.calls == []
    assert stick.get_displacement() == (0, 0)


def test_press_on_thumb_rim_starts_a_drag(stick):
    assert stick.on_pointer_down(150, 125)
    assert stick.is_dragging()


def test_move_updates_outputs_and_notifies(stick, recorder):
    stick.add_moved_listener(recorder)

    stick.on_pointer_down(*CENTER)
    assert stick.on_pointer_move(155, 85)

    assert stick.get_displacement() == (30, 40)
    assert stick.get_x() == pytest.approx(0.3)
    assert stick.get_y() == pytest.approx(0.4)
    assert stick.get_magnitude() == 50.0
    assert stick.thumb_center() == (155, 85)
    assert recorder.calls == [(stick,)]


def test_click_fires_clicked_only(stick):
    moved, clicked = [], []
    stick.add_moved_listener(moved.append)
    stick.add_clicked_listener(clicked.append)

    assert drag(stick) is StickEvent.CLICKED

    assert clicked == [stick]
    assert moved == []
    assert not stick.is_dragging()


def test_drag_fires_moved_only_and_recenters(stick):
    moved, clicked = [], []
    stick.add_moved_listener(moved.append)
    stick.add_clicked_listener(clicked.append)

    assert drag(stick, (155, 85), (400, 125)) is StickEvent.MOVED

    assert len(moved) == 3  # two moves plus the release
    assert clicked == []
    assert stick.get_displacement() == (0, 0)
    assert stick.get_magnitude() == 0.0
    assert stick.get_x() == stick.get_y() == 0.0


def test_listeners_see_recentered_stick_on_release(stick):
    seen = []
    stick.on_pointer_down(*CENTER)
    stick.on_pointer_move(225, 125)
    stick.add_moved_listener(lambda s: seen.append(s.get_displacement()))
    stick.on_pointer_up(225, 125)
    assert seen == [(0, 0)]


def test_stray_press_during_drag_is_ignored(stick):
    stick.on_pointer_down(*CENTER)
    assert not stick.on_pointer_down(130, 130)
    stick.on_pointer_move(135, 125)
    assert stick.get_displacement() == (10, 0)


def test_pointer_far_outside_surface_is_clamped(stick):
    stick.on_pointer_down(*CENTER)
    stick.on_pointer_move(-10_000, 125)
    assert stick.get_displacement() == (-100, 0)
    assert stick.get_x() == pytest.approx(-1.0)


def test_resize_between_events_uses_geometry_of_each_event(stick, surface):
    stick.on_pointer_down(*CENTER)
    surface.width = surface.height = 125  # pad radius drops to 50
    stick.on_pointer_move(525, 125)
    assert stick.get_displacement() == (50, 0)
    assert stick.get_x() == pytest.approx(1.0)


def test_resize_to_nothing_is_not_an_error(stick, surface):
    stick.on_pointer_down(*CENTER)
    surface.width = 0
    stick.on_pointer_move(300, 300)
    assert stick.get_displacement() == (0, 0)
    assert stick.get_x() == 0.0
    assert stick.layout().is_empty


def test_dead_zone_and_inversion(stick):
    stick.set_dead_zone(0.5)
    stick.on_pointer_down(*CENTER)
    stick.on_pointer_move(145, 125)
    assert stick.get_x() == 0.0

    stick.set_invert_y(True)
    stick.on_pointer_move(155, 85)
    assert stick.get_x() == pytest.approx(0.3)
    assert stick.get_y() == pytest.approx(-0.4)
    assert stick.get_angle_degrees() == pytest.approx(53.13010235)


@pytest.mark.parametrize(
    "setter", ["set_stick_size_ratio", "set_arrow_size_ratio", "set_dead_zone"]
)
@pytest.mark.parametrize("value", [-0.5, 1.5])
def test_invalid_setters_keep_previous_config(stick, setter, value):
    before = stick.get_config()
    with pytest.raises(ConfigurationError):
        getattr(stick, setter)(value)
    assert stick.get_config() is before


def test_setters_and_getters(stick):
    stick.set_stick_size_ratio(0.5)
    stick.set_arrow_size_ratio(0.1)
    stick.set_dead_zone(0.2)
    stick.set_invert_y(True)

    assert stick.get_stick_size_ratio() == 0.5
    assert stick.get_arrow_size_ratio() == 0.1
    assert stick.get_dead_zone() == 0.2
    assert stick.is_y_inverted()
    assert stick.layout().stick_diameter == 83


def test_set_config_replaces_everything(stick):
    stick.set_config(StickConfig(stick_size_ratio=0.0, dead_zone=0.1))
    assert stick.get_config().stick_size_ratio == 0.0
    assert stick.layout().pad_radius == 125


def test_remove_and_clear_listeners(stick, recorder):
    stick.add_moved_listener(recorder)
    stick.remove_moved_listener(recorder)
    stick.add_clicked_listener(recorder)
    stick.clear_clicked_listeners()

    drag(stick)
    drag(stick, (150, 125))
    assert recorder.calls == []

    stick.add_moved_listener(recorder)
    stick.clear_moved_listeners()
    drag(stick, (150, 125))
    assert recorder.calls == []


def test_default_surface_is_empty():
    stick = VirtualStick()
    assert stick.layout().is_empty
    assert not stick.on_pointer_down(0, 0)


def test_concurrent_moves_keep_clamp_invariant(stick):
    stick.on_pointer_down(*CENTER)
    errors = []

    def mover(offset):
        for i in range(200):
            stick.on_pointer_move(125 + offset * i, 125 - offset * i)
            if stick.get_magnitude() > 101:
                errors.append(stick.get_displacement())

    threads = [threading.Thread(target=mover, args=(k,)) for k in (-3, -1, 1, 3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert stick.on_pointer_up(0, 0) is StickEvent.MOVED
