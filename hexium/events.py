"""Events passed between engine subsystems over the event bus."""

from __future__ import annotations

from dataclasses import dataclass

from hexium.vector3 import Vector3


class Event:
    """Base class of all engine events."""


@dataclass
class CreateObject(Event):
    """Request to spawn a new object at ``position``."""

    position: Vector3


@dataclass
class StopEngine(Event):
    """Request to stop the main loop."""


@dataclass
class PressedKey(Event):
    """A single key is held down."""

    key: str

    def __post_init__(self) -> None:
        if len(self.key) != 1:
            raise ValueError(f"key must be a single character, got {self.key!r}")


@dataclass
class MouseDragged(Event):
    """The mouse moved by ``(x, y)`` from the window centre."""

    x: float
    y: float


@dataclass
class CameraMode(Event):
    """Camera control was switched on or off."""

    key: bool


@dataclass
class UiMode(Event):
    """User-interface mode was switched on or off."""

    key: bool