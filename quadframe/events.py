"""Window configuration and the handler that turns window events into input state."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from quadframe.input import DroppedFile, InputEvent, InputState, MouseButton, TouchPhase

FILTER_MODES = frozenset({"linear", "nearest"})
"""Accepted values of `Conf.default_filter_mode`."""


@dataclass
class UpdateTrigger:
    """Which events wake a blocking event loop for another frame."""

    key_down: bool = False
    mouse_down: bool = False
    mouse_up: bool = False
    mouse_motion: bool = False
    mouse_wheel: bool = False
    specific_key: Optional[list[Hashable]] = None
    touch: bool = False

    def wakes_on_key(self, keycode: Hashable) -> bool:
        """Whether a key press of `keycode` should schedule an update."""
        if self.specific_key is not None:
            return keycode in self.specific_key
        return self.key_down


@dataclass
class Conf:
    """Window and renderer settings.

    With `blocking_event_loop` the loop waits for events; `update_on` says which
    events schedule the next frame. `update_on=None` means no event does.
    """

    window_title: str = ""
    blocking_event_loop: bool = False
    update_on: Optional[UpdateTrigger] = field(default_factory=UpdateTrigger)
    default_filter_mode: str = "linear"
    draw_call_vertex_capacity: int = 10000
    draw_call_index_capacity: int = 5000

    def __post_init__(self) -> None:
        if self.default_filter_mode not in FILTER_MODES:
            raise ValueError(f"unknown filter mode {self.default_filter_mode!r}")
        if self.draw_call_vertex_capacity <= 0 or self.draw_call_index_capacity <= 0:
            raise ValueError("draw call capacities must be positive")


class EventHandler:
    """Receives window events, updates an `InputState` and tracks scheduled updates."""

    def __init__(self, conf: Optional[Conf] = None, input_state: Optional[InputState] = None) -> None:
        self.conf = conf if conf is not None else Conf()
        self.update_on = self.conf.update_on if self.conf.update_on is not None else UpdateTrigger()
        self.input = input_state if input_state is not None else InputState()
        self._update_scheduled = False

    def _schedule_if(self, condition: bool) -> None:
        if condition:
            self._update_scheduled = True

    def take_scheduled_update(self) -> bool:
        """Whether an update was scheduled since the last call; resets the flag."""
        scheduled, self._update_scheduled = self._update_scheduled, False
        return scheduled

    def resize_event(self, width: float, height: float) -> None:
        """Record the new window size."""
        self.input.screen_width = width
        self.input.screen_height = height
        self._schedule_if(self.conf.blocking_event_loop)

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse movement; moves the cursor only while it is grabbed."""
        self.input.push_event(InputEvent("raw_mouse_motion", x=x, y=y))

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse movement."""
        self.input.push_event(InputEvent("mouse_motion", x=x, y=y))
        self._schedule_if(self.update_on.mouse_motion)

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Wheel movement."""
        self.input.push_event(InputEvent("mouse_wheel", x=x, y=y))
        self._schedule_if(self.update_on.mouse_wheel)

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went down at (x, y)."""
        self.input.push_event(InputEvent("mouse_button_down", x=x, y=y, button=button))
        self._schedule_if(self.update_on.mouse_down)

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went up at (x, y)."""
        self.input.push_event(InputEvent("mouse_button_up", x=x, y=y, button=button))
        self._schedule_if(self.update_on.mouse_up)

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """A touch changed; may also raise simulated mouse events."""
        self.input.push_event(InputEvent("touch", x=x, y=y, phase=phase, touch_id=touch_id))
        if self.input.is_simulating_mouse_with_touch():
            triggers = {
                TouchPhase.STARTED: self.update_on.mouse_down,
                TouchPhase.ENDED: self.update_on.mouse_up,
                TouchPhase.MOVED: self.update_on.mouse_motion,
            }
            self._schedule_if(triggers.get(phase, False))
        else:
            self._schedule_if(self.update_on.touch)

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        """A character was typed."""
        self.input.push_event(
            InputEvent("char", character=character, modifiers=modifiers, repeat=repeat)
        )

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        """A key went down, or repeated while held."""
        self.input.push_event(
            InputEvent("key_down", keycode=keycode, modifiers=modifiers, repeat=repeat)
        )
        self._schedule_if(self.update_on.wakes_on_key(keycode))

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        """A key was released."""
        self.input.push_event(InputEvent("key_up", keycode=keycode, modifiers=modifiers))

    def files_dropped_event(self, files: Iterable[DroppedFile]) -> None:
        """Files were dropped onto the window."""
        self.input.push_event(InputEvent("files_dropped", files=tuple(files)))

    def window_minimized_event(self) -> None:
        """The window was minimized; held keys, buttons and touches are released."""
        self.input.push_event(InputEvent("window_minimized"))

    def window_restored_event(self) -> None:
        """The window was restored."""
        self.input.push_event(InputEvent("window_restored"))

    def quit_requested_event(self) -> bool:
        """Handle a close request; returns True if the quit goes ahead.

        When quitting is prevented the request is cancelled and reported through
        `InputState.is_quit_requested` instead.
        """
        if self.input.quit_prevented:
            self.input.quit_requested = True
            return False
        return True