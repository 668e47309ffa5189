import pytest

from quadframe.mouse_camera import MouseCamera
from quadframe.vec import Vec2


def _close(a, b):
    return a.x == pytest.approx(b.x) and a.y == pytest.approx(b.y)


def test_default_camera():
    camera = MouseCamera()
    assert camera.offset == Vec2.ZERO
    assert camera.scale == 1.0


def test_update_moves_by_mouse_delta():
    camera = MouseCamera()
    camera.update(Vec2(1.0, 2.0), True)
    assert camera.offset == Vec2(1.0, 2.0)
    before = camera.offset
    camera.update(Vec2(3.0, 5.0), True)
    assert _close(camera.offset - before, Vec2(3.0, 5.0) - Vec2(1.0, 2.0))


def test_update_without_offset_only_tracks_mouse():
    camera = MouseCamera(Vec2(7.0, 7.0), 1.0)
    camera.update(Vec2(3.0, 4.0), False)
    assert camera.offset == Vec2(7.0, 7.0)
    camera.update(Vec2(4.0, 4.0), True)
    assert _close(camera.offset, Vec2(7.0, 7.0) + Vec2(1.0, 0.0))


def test_scale_new_keeps_center_fixed():
    center = Vec2(2.0, -3.0)
    camera = MouseCamera(center, 1.0)
    camera.scale_new(center, 4.0)
    assert camera.scale == 4.0
    assert _close(camera.offset, center)


def test_scale_mul_matches_scale_new():
    a = MouseCamera(Vec2(1.0, 1.0), 2.0)
    b = MouseCamera(Vec2(1.0, 1.0), 2.0)
    center = Vec2(0.5, 0.25)
    a.scale_mul(center, 3.0)
    b.scale_new(center, 2.0 * 3.0)
    assert a.scale == pytest.approx(b.scale)
    assert _close(a.offset, b.offset)


def test_scale_wheel_in_then_out_round_trips():
    camera = MouseCamera(Vec2(3.0, -1.0), 1.5)
    center = Vec2(0.5, 0.5)
    camera.scale_wheel(center, 1.0, 1.1)
    assert camera.scale == pytest.approx(1.5 * 1.1)
    camera.scale_wheel(center, -1.0, 1.1)
    assert camera.scale == pytest.approx(1.5)
    assert _close(camera.offset, Vec2(3.0, -1.0))


def test_scale_wheel_zero_does_nothing():
    camera = MouseCamera(Vec2(3.0, -1.0), 1.5)
    camera.scale_wheel(Vec2(0.5, 0.5), 0.0, 2.0)
    assert camera.scale == 1.5
    assert camera.offset == Vec2(3.0, -1.0)