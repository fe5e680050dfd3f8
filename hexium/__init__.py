"""Vectors, matrices, particle integrators, force generators and an event bus for simple physics simulation."""

__version__ = "0.1.0"