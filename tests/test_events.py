from pathlib import Path

import pytest

from quadframe.events import Conf, EventHandler, UpdateTrigger
from quadframe.input import DroppedFile, InputState, MouseButton, TouchPhase


def test_conf_defaults_match_source():
    conf = Conf()
    assert conf.draw_call_vertex_capacity == 10000
    assert conf.draw_call_index_capacity == 5000
    assert conf.default_filter_mode == "linear"
    assert conf.update_on == UpdateTrigger()


def test_conf_rejects_unknown_filter_mode():
    with pytest.raises(ValueError):
        Conf(default_filter_mode="bicubic")


def test_key_down_marks_pressed_without_scheduling_by_default():
    handler = EventHandler()
    handler.key_down_event("a", None, False)
    assert handler.input.is_key_pressed("a")
    assert handler.input.is_key_down("a")
    assert handler.take_scheduled_update() is False


def test_repeat_key_is_down_but_not_pressed():
    handler = EventHandler()
    handler.key_down_event("a", None, True)
    assert handler.input.is_key_down("a")
    assert not handler.input.is_key_pressed("a")


def test_key_down_trigger_schedules_once():
    handler = EventHandler(Conf(update_on=UpdateTrigger(key_down=True)))
    handler.key_down_event("a", None, False)
    assert handler.take_scheduled_update() is True
    assert handler.take_scheduled_update() is False


def test_specific_key_overrides_key_down():
    trigger = UpdateTrigger(key_down=True, specific_key=["a"])
    handler = EventHandler(Conf(update_on=trigger))
    handler.key_down_event("b", None, False)
    assert handler.take_scheduled_update() is False
    handler.key_down_event("a", None, False)
    assert handler.take_scheduled_update() is True


def test_update_on_none_never_schedules():
    handler = EventHandler(Conf(update_on=None))
    handler.mouse_button_down_event(MouseButton.LEFT, 1.0, 2.0)
    handler.key_down_event("a", None, False)
    assert handler.take_scheduled_update() is False


def test_key_up_releases_key():
    handler = EventHandler()
    handler.key_down_event("a", None, False)
    handler.key_up_event("a", None)
    assert not handler.input.is_key_down("a")
    assert handler.input.is_key_released("a")


def test_touch_simulates_mouse_and_uses_mouse_trigger():
    handler = EventHandler(Conf(update_on=UpdateTrigger(mouse_down=True, touch=True)))
    sub = handler.input.register_input_subscriber()
    handler.touch_event(TouchPhase.STARTED, 7, 10.0, 20.0)
    assert handler.input.is_mouse_button_pressed(MouseButton.LEFT)
    assert handler.input.mouse_position() == (10.0, 20.0)
    assert handler.take_scheduled_update() is True
    kinds = [event.kind for event in handler.input.take_input_events(sub)]
    assert kinds == ["mouse_button_down", "touch"]


def test_touch_without_simulation_uses_touch_trigger():
    handler = EventHandler(Conf(update_on=UpdateTrigger(mouse_down=True)))
    handler.input.simulate_mouse_with_touch(False)
    handler.touch_event(TouchPhase.STARTED, 3, 5.0, 5.0)
    assert not handler.input.is_mouse_button_pressed(MouseButton.LEFT)
    assert handler.take_scheduled_update() is False
    assert [t.id for t in handler.input.touches()] == [3]


def test_mouse_wheel_trigger_and_state():
    handler = EventHandler(Conf(update_on=UpdateTrigger(mouse_wheel=True)))
    handler.mouse_wheel_event(0.0, 1.0)
    assert handler.input.mouse_wheel() == (0.0, 1.0)
    assert handler.take_scheduled_update() is True


def test_raw_motion_moves_cursor_only_when_grabbed():
    handler = EventHandler()
    handler.raw_mouse_motion(3.0, 4.0)
    assert handler.input.mouse_position() == (0.0, 0.0)
    handler.input.set_cursor_grab(True)
    handler.raw_mouse_motion(3.0, 4.0)
    assert handler.input.mouse_position() == (3.0, 4.0)


def test_quit_goes_ahead_unless_prevented():
    handler = EventHandler()
    assert handler.quit_requested_event() is True
    assert handler.input.is_quit_requested() is False
    handler.input.prevent_quit()
    assert handler.quit_requested_event() is False
    assert handler.input.is_quit_requested() is True


def test_resize_updates_screen_and_schedules_when_blocking():
    state = InputState()
    handler = EventHandler(Conf(blocking_event_loop=True), state)
    handler.resize_event(1024.0, 768.0)
    assert (state.screen_width, state.screen_height) == (1024.0, 768.0)
    assert handler.take_scheduled_update() is True


def test_resize_does_not_schedule_without_blocking_loop():
    handler = EventHandler()
    handler.resize_event(640.0, 480.0)
    assert handler.take_scheduled_update() is False


def test_files_dropped_are_returned_once():
    handler = EventHandler()
    dropped = DroppedFile(path=Path("level.txt"), data=b"abc")
    handler.files_dropped_event([dropped])
    assert handler.input.get_dropped_files() == [dropped]
    assert handler.input.get_dropped_files() == []


def test_minimize_releases_held_input():
    handler = EventHandler()
    handler.key_down_event("a", None, False)
    handler.mouse_button_down_event(MouseButton.RIGHT, 0.0, 0.0)
    handler.window_minimized_event()
    assert handler.input.get_keys_down() == set()
    assert handler.input.is_key_released("a")
    assert handler.input.is_mouse_button_released(MouseButton.RIGHT)


def test_char_event_queues_character():
    handler = EventHandler()
    handler.char_event("x", None, False)
    assert handler.input.get_char_pressed() == "x"
    assert handler.input.get_char_pressed() is None