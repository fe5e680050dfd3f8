# hexium

A compact physics toolkit in pure Python, using only the standard library.

## Modules

- `hexium.vector3.Vector3`: a mutable 3D vector (dataclass with `x`, `y`, `z`) with `add`, `subtract`, `multiply`, `dot`, `cross`, `length`, `length_squared`, `normalize` (raises `ZeroDivisionError` for the zero vector) and `perpendicular`. It also supports `+`, `-`, `*` by a number, unary `-` and iteration over its components.
- `hexium.mat3.Matrix3`: a row-major 3×3 matrix (`m[row][col]`) with `set_zero`, `set_identity`, `set`, `+`, `*` (by a matrix, a `Vector3` or a number), `transpose`, `get_column`, `set_column`, `orthonormalize` (Gram–Schmidt on the columns) and the static `make_omega_matrix(w)`, the skew-symmetric matrix of a cross product with `w`.
- `hexium.mat4.Mat4`: a 4×4 matrix stored as 16 floats with the translation in entries 12–14. Static constructors `translate`, `scale`, `rotate_x`, `rotate_y`, `rotate_z` (degrees), `perspective`, `ortho` and `look_at`; `Mat4.multiply(a, b)`; `multiply_vec(v, w=1.0)`, which divides by the output weight unless it is zero; and `Mat4.radians`.
- `hexium.functions`: `derivative`, `euler_step`, `numerical_derivative` (central difference, `h=1e-5`), `clamp`, `lerp` and `euler_step_vec`, which returns a new list and raises `ValueError` if the sequences differ in length.
- `hexium.particle`: `Particle` (mass, position, velocity, force accumulator; `clear_forces`, `add_force`, `acceleration`) and `ParticleSystem`, whose flat state holds position then velocity for each particle (`get_state`, `set_state`, `clear_forces`, `add_particle`, `len()` and iteration). `set_state` raises `ValueError` unless it gets exactly six values per particle.
- `hexium.integrators`: `particle_derivative`, `euler_step` and `rk4_step`, which advance a `ParticleSystem` in place and add `dt` to its `simulation_time`.
- `hexium.forces`: the abstract `ForceGenerator` and `GravityGenerator(g)`, which adds `g * mass` to a body through its `add_force`.
- `hexium.events`: `Event` and the event dataclasses `CreateObject`, `StopEngine`, `PressedKey` (a single character, else `ValueError`), `MouseDragged`, `CameraMode` and `UiMode`.
- `hexium.event_bus.EventBus`: `subscribe(event_type, listener)` and `publish(event)`; an event reaches the listeners of its exact type, in the order they subscribed.
- `hexium.context.EngineContext`: shared settings (`delta_time`, `total_time`, `window_width` 1280, `window_height` 720, `near_plane` 0.1, `far_plane` 1700.0, `fov` 45.0, `window`), one instance per process through `EngineContext.get()`.
- `hexium.physics.PhysicsEngine`: holds a list of bodies and a list of force generators; `update(delta)` calls each body's `apply_force(generator, delta)` for every generator and then its `integrate(delta)`. `set_objects` replaces the contents of the shared list.

## Install

```
pip install .
```

## Example

```python
from hexium.vector3 import Vector3
from hexium.particle import Particle, ParticleSystem
from hexium.integrators import euler_step

system = ParticleSystem()
p = Particle(2.0, Vector3(0, 10, 0))
system.add_particle(p)
p.add_force(Vector3(0, -9.81 * p.mass, 0))

euler_step(system, 1 / 60)
print(p.position, p.velocity, system.simulation_time)
```

Events are delivered by type:

```python
from hexium.event_bus import EventBus
from hexium.events import PressedKey

bus = EventBus()
bus.subscribe(PressedKey, lambda e: print("pressed", e.key))
bus.publish(PressedKey("W"))
```

## What it does not do

hexium is a library only. It opens no window, draws nothing, reads no keyboard or mouse input, and has no main loop or command to run. It has no rigid-body or scene classes: `PhysicsEngine` works with any objects you give it that provide `apply_force` and `integrate`.

## Tests

```
pip install .[test]
pytest
```