# MIT License (see LICENSE)
"""
physics_demos - numerical models behind a set of classroom physics demos.

Each demo (inclined block, damped driven pendulum, two-body collision,
Atwood machine, orbit, spring cart, lever, rotating disk, uniform motion)
is a self-contained simulation with typed parameters, a fixed-substep
clock, and a bounded history of derived quantities for plotting.

Main entry points:
    - create_simulation / DemoKind: Build a demo by kind.
    - Simulation: Control surface shared by all demos.
    - Vector2, Body: Shared 2D primitives.
    - ConfigurationError: Raised for invalid parameters.

Submodules:
    - core: Integrators, clock, friction resolver, forces, history,
      orbital elements, invariants.
    - collision: Contact detection and restitution for round bodies.
    - demos: One module per demo.
    - io: Flat-value ingestion, records and JSON configurations.
    - renderer: Snapshot consumers.

Example:
    from physics_demos import create_simulation, DemoKind

    sim = create_simulation(DemoKind.PENDULUM)
    sim.start()
    for _ in range(60):
        sim.tick(1 / 60)
    print(sim.snapshot()["e_total"])
"""
from .demos import Simulation, DemoKind, Terminal, create_simulation
from .errors import ConfigurationError
from .types import Vector2, Body

__version__ = "0.1.0"

__all__ = [
    "Simulation",
    "DemoKind",
    "Terminal",
    "create_simulation",
    "ConfigurationError",
    "Vector2",
    "Body",
]
