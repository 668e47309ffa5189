"""A 2D camera panned and zoomed by the mouse."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadframe.vec import Vec2


@dataclass
class MouseCamera:
    """Camera with an offset and scale that follow mouse drags and wheel zoom."""

    offset: Vec2 = Vec2.ZERO
    scale: float = 1.0
    _last_mouse_pos: Vec2 = field(default=Vec2.ZERO, init=False, repr=False, compare=False)

    def scale_wheel(self, center: Vec2, wheel_value: float, scale_factor: float) -> None:
        """Zoom around `center` by `scale_factor` for positive wheel, its inverse for negative."""
        if wheel_value > 0.0:
            self.scale_mul(center, scale_factor)
        elif wheel_value < 0.0:
            self.scale_mul(center, 1.0 / scale_factor)

    def scale_mul(self, center: Vec2, mul_to_scale: float) -> None:
        """Multiply the scale by `mul_to_scale`, keeping `center` fixed."""
        self.scale_new(center, self.scale * mul_to_scale)

    def scale_new(self, center: Vec2, new_scale: float) -> None:
        """Set the scale to `new_scale`, keeping `center` fixed."""
        self.offset = (self.offset - center) * (new_scale / self.scale) + center
        self.scale = new_scale

    def update(self, mouse_pos: Vec2, should_offset: bool) -> None:
        """Feed the mouse position each frame; the camera moves with it when `should_offset`."""
        if should_offset:
            self.offset = self.offset + (mouse_pos - self._last_mouse_pos)
        self._last_mouse_pos = mouse_pos