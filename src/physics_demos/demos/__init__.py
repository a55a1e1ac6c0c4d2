# MIT License (see LICENSE)
"""
Demo simulations.

Each demo is a ``Simulation`` subclass with its own frozen parameter and
initial-condition dataclasses. ``create_simulation`` dispatches on
``DemoKind`` so callers that only know the demo's name (a UI, a config
file) get the right model.

Typical usage:
    from physics_demos.demos import DemoKind, create_simulation

    sim = create_simulation(DemoKind.PENDULUM)
    sim.start()
    sim.tick(1 / 60)
    print(sim.snapshot())
"""
from __future__ import annotations
from typing import Any

from ..errors import ConfigurationError
from .base import Simulation, DemoKind, Terminal
from .incline import InclinedBlock, InclineParams, InclineInitial
from .pendulum import DampedPendulum, PendulumParams, PendulumInitial, critical_beta
from .collision import TwoBodyCollision, CollisionParams, CollisionInitial
from .atwood import AtwoodMachine, AtwoodParams, AtwoodInitial
from .orbit import OrbitalMotion, OrbitParams, OrbitInitial
from .spring_cart import SpringCart, SpringCartParams, SpringCartInitial
from .lever import Lever, LeverParams, LeverInitial, Load
from .disk import RotatingDisk, DiskParams, DiskInitial
from .uniform import UniformMotion, UniformParams, UniformInitial

SIMULATIONS: dict[DemoKind, type[Simulation]] = {
    DemoKind.INCLINE: InclinedBlock,
    DemoKind.PENDULUM: DampedPendulum,
    DemoKind.COLLISION: TwoBodyCollision,
    DemoKind.ATWOOD: AtwoodMachine,
    DemoKind.ORBIT: OrbitalMotion,
    DemoKind.SPRING_CART: SpringCart,
    DemoKind.LEVER: Lever,
    DemoKind.DISK: RotatingDisk,
    DemoKind.UNIFORM: UniformMotion,
}


def simulation_class(kind: DemoKind | str) -> type[Simulation]:
    """
    Look up the Simulation subclass for a demo kind (enum or its value).

    Raises:
        ConfigurationError: If the kind is unknown.
    """
    try:
        return SIMULATIONS[DemoKind(kind)]
    except ValueError:
        raise ConfigurationError(
            f"Unknown demo kind: {kind!r} (expected one of {[k.value for k in DemoKind]})"
        ) from None


def create_simulation(kind: DemoKind | str, params: Any = None, initial: Any = None, **options: Any) -> Simulation:
    """
    Build a demo simulation.

    Args:
        kind: Which demo.
        params: The demo's parameter dataclass (defaults if None).
        initial: The demo's initial-condition dataclass (defaults if None).
        **options: Simulation options (sim_dt, sample_interval, ...).
    """
    return simulation_class(kind)(params, initial, **options)


__all__ = [
    "Simulation",
    "DemoKind",
    "Terminal",
    "SIMULATIONS",
    "simulation_class",
    "create_simulation",
    "InclinedBlock",
    "InclineParams",
    "InclineInitial",
    "DampedPendulum",
    "PendulumParams",
    "PendulumInitial",
    "critical_beta",
    "TwoBodyCollision",
    "CollisionParams",
    "CollisionInitial",
    "AtwoodMachine",
    "AtwoodParams",
    "AtwoodInitial",
    "OrbitalMotion",
    "OrbitParams",
    "OrbitInitial",
    "SpringCart",
    "SpringCartParams",
    "SpringCartInitial",
    "Lever",
    "LeverParams",
    "LeverInitial",
    "Load",
    "RotatingDisk",
    "DiskParams",
    "DiskInitial",
    "UniformMotion",
    "UniformParams",
    "UniformInitial",
]
