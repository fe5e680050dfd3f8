"""Point masses and the particle system that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from hexium.vector3 import Vector3

#: Number of floats each particle contributes to a state vector.
STATE_SIZE = 6


@dataclass
class Particle:
    """A point mass with position, velocity and accumulated force."""

    mass: float
    position: Vector3
    velocity: Vector3 = field(default_factory=Vector3)
    force_accumulator: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        self.position = Vector3(*self.position)
        self.velocity = Vector3(*self.velocity)
        self.force_accumulator = Vector3(*self.force_accumulator)

    def clear_forces(self) -> None:
        """Reset the accumulated force to zero."""
        self.force_accumulator = Vector3()

    def add_force(self, force: Vector3) -> None:
        """Add ``force`` to the accumulated force."""
        self.force_accumulator = self.force_accumulator.add(force)

    def acceleration(self) -> Vector3:
        """Return the acceleration produced by the accumulated force."""
        return self.force_accumulator.multiply(1.0 / self.mass)


@dataclass
class ParticleSystem:
    """An ordered collection of particles with a shared simulation clock."""

    particles: list[Particle] = field(default_factory=list)
    simulation_time: float = 0.0

    def add_particle(self, particle: Particle) -> None:
        """Append ``particle`` to the system."""
        self.particles.append(particle)

    def clear_forces(self) -> None:
        """Reset the accumulated force of every particle."""
        for particle in self.particles:
            particle.clear_forces()

    def get_state(self) -> list[float]:
        """Return the flat state: position then velocity for each particle."""
        return [
            component
            for particle in self.particles
            for vector in (particle.position, particle.velocity)
            for component in vector
        ]

    def set_state(self, state: Iterable[float]) -> None:
        """Load positions and velocities from a flat state vector.

        Raises ValueError unless the state holds exactly six values per
        particle.
        """
        values = list(state)
        expected = STATE_SIZE * len(self.particles)
        if len(values) != expected:
            raise ValueError(
                f"state has {len(values)} values, expected {expected}"
            )
        chunks = zip(*[iter(values)] * STATE_SIZE)
        for particle, (px, py, pz, vx, vy, vz) in zip(self.particles, chunks):
            particle.position = Vector3(px, py, pz)
            particle.velocity = Vector3(vx, vy, vz)

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)