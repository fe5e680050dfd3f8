"""Force generators that push bodies around."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from hexium.vector3 import Vector3


class ForceReceiver(Protocol):
    """Anything with a mass that can accumulate forces."""

    mass: float

    def add_force(self, force: Vector3) -> None:
        ...


class ForceGenerator(ABC):
    """Base class for objects that add forces to bodies each step."""

    @abstractmethod
    def apply_rigid(self, body: ForceReceiver, dt: float) -> None:
        """Add this generator's force to ``body`` for a step of ``dt``."""


class GravityGenerator(ForceGenerator):
    """Uniform gravity: adds ``g * mass`` to a body."""

    def __init__(self, g: Vector3) -> None:
        self.g = Vector3(*g)

    def apply_rigid(self, body: ForceReceiver, dt: float) -> None:
        """Add the weight of ``body`` to its accumulated force."""
        body.add_force(self.g.multiply(body.mass))

    def __repr__(self) -> str:
        return f"GravityGenerator({self.g!r})"