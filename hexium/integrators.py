"""Explicit integrators that advance a particle system in time."""

from __future__ import annotations

from hexium.particle import ParticleSystem


def particle_derivative(system: ParticleSystem) -> list[float]:
    """Return the state derivative: velocity then acceleration per particle."""
    derivative: list[float] = []
    for particle in system.particles:
        force = particle.force_accumulator
        derivative.extend(particle.velocity)
        derivative.extend(
            (
                force.x / particle.mass,
                force.y / particle.mass,
                force.z / particle.mass,
            )
        )
    return derivative


def _offset(state: list[float], delta: list[float]) -> list[float]:
    return [value + change for value, change in zip(state, delta)]


def _scaled(values: list[float], factor: float) -> list[float]:
    return [value * factor for value in values]


def euler_step(system: ParticleSystem, dt: float) -> None:
    """Advance ``system`` by one explicit Euler step of length ``dt``."""
    delta = _scaled(particle_derivative(system), dt)
    system.set_state(_offset(system.get_state(), delta))
    system.simulation_time += dt


def rk4_step(system: ParticleSystem, dt: float) -> None:
    """Advance ``system`` by one fourth-order Runge-Kutta style step.

    The first two stages are scaled by ``dt / 2`` and the third by ``dt``;
    the fourth stage enters the weighted sum unscaled.
    """
    y0 = system.get_state()

    k1 = _scaled(particle_derivative(system), dt * 0.5)
    system.set_state(_offset(y0, k1))

    k2 = _scaled(particle_derivative(system), dt * 0.5)
    system.set_state(_offset(y0, k2))

    k3 = _scaled(particle_derivative(system), dt)
    system.set_state(_offset(y0, k3))

    k4 = particle_derivative(system)

    system.set_state(
        [
            y + (a + 2 * b + 2 * c + d) / 6.0
            for y, a, b, c, d in zip(y0, k1, k2, k3, k4)
        ]
    )
    system.simulation_time += dt