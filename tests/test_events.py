import pytest

from hexium.events import (
    CameraMode,
    CreateObject,
    Event,
    MouseDragged,
    PressedKey,
    StopEngine,
    UiMode,
)
from hexium.vector3 import Vector3


def test_create_object_holds_position():
    event = CreateObject(Vector3(0, 0, 3))
    assert event.position == Vector3(0, 0, 3)
    assert isinstance(event, Event)


def test_stop_engine_is_an_event_equal_to_another_stop():
    event = StopEngine()
    assert isinstance(event, Event)
    assert event == StopEngine()
    assert event != CameraMode(True)


def test_pressed_key_holds_key():
    assert PressedKey("W").key == "W"
    assert PressedKey("W") == PressedKey("W")
    assert PressedKey("W") != PressedKey("S")


@pytest.mark.parametrize("bad", ["", "WS"])
def test_pressed_key_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        PressedKey(bad)


def test_mouse_dragged_offsets():
    event = MouseDragged(12.5, -3.0)
    assert (event.x, event.y) == (12.5, -3.0)


def test_mode_events_hold_flag():
    assert CameraMode(True).key is True
    assert UiMode(False).key is False
    assert CameraMode(True) != UiMode(True)