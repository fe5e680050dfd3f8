"""Fixed-step physics update over the objects of a scene."""

from __future__ import annotations

from typing import Iterable, Protocol

from hexium.forces import ForceGenerator


class Body(Protocol):
    """An object the physics engine can push and integrate."""

    def apply_force(self, generator: ForceGenerator, dt: float) -> None:
        ...

    def integrate(self, dt: float) -> None:
        ...


class PhysicsEngine:
    """Applies force generators to objects and integrates them each step.

    The engine shares the object list it is given, so objects added to that
    list later take part in the next update.
    """

    def __init__(self, objects: list[Body]) -> None:
        self.objects = objects
        self.generators: list[ForceGenerator] = []

    def add_generator(self, generator: ForceGenerator) -> None:
        """Apply ``generator`` to every object on each update."""
        self.generators.append(generator)

    def update(self, delta: float) -> None:
        """Apply every generator to each object, then integrate it."""
        for obj in self.objects:
            for generator in self.generators:
                obj.apply_force(generator, delta)
            obj.integrate(delta)

    def set_objects(self, objects: Iterable[Body]) -> None:
        """Replace the contents of the shared object list with ``objects``."""
        self.objects[:] = list(objects)