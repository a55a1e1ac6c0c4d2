# MIT License (see LICENSE)
"""
Static/kinetic (Coulomb) friction resolution.

Five demos share the same stick-slip policy: the inclined block, the Atwood
machine, the disk axle, the spring cart, and (rotationally) any torque-driven
body with a friction torque. The rule, for a driving force F, normal load N
and velocity v:

    if |v| < eps and |F| <= μs·N:   stuck   -> friction = F,        net = 0
    elif |v| >= eps:                sliding -> friction = μk·N·sgn(v)
    else:                           breakaway -> friction = μk·N·sgn(F)

Friction is returned as the force *subtracted* from the driving force, so
the net force is always ``F - friction``. For rotation, read force as torque
and N as the axle load expressed in the same units.

A body decelerating through zero under kinetic friction would otherwise flip
the friction sign every step and jitter around the stick point; ``settle``
detects that situation so the caller can snap the velocity to zero and
re-resolve in static mode.

Reference:
    https://en.wikipedia.org/wiki/Friction#Dry_friction
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..constants import STATIONARY_EPS
from ..util import sign


@dataclass(frozen=True)
class FrictionResult:
    """
    Outcome of a friction resolution.

    Attributes:
        friction: Friction force subtracted from the driving force (N or N·m).
        is_static: True when static friction holds the body at rest.
        net_force: driving - friction.
    """
    friction: float
    is_static: bool
    net_force: float


def max_static_friction(mu_static: float, normal: float) -> float:
    """Largest friction force static contact can supply: μs·|N|."""
    return mu_static * abs(normal)


def resolve_friction(
    driving: float,
    normal: float,
    velocity: float,
    mu_static: float,
    mu_kinetic: float,
    eps: float = STATIONARY_EPS,
    extra_resistance: float = 0.0,
) -> FrictionResult:
    """
    Decide between static and kinetic friction and return the net force.

    Args:
        driving: Sum of all non-friction forces along the motion axis.
        normal: Normal load (only its magnitude matters).
        velocity: Current velocity along the axis.
        mu_static: Static coefficient μs.
        mu_kinetic: Kinetic coefficient μk (≤ μs).
        eps: Speed below which the body counts as possibly at rest.
        extra_resistance: Constant resistive force added to both the static
            limit and the kinetic friction (axle friction in the Atwood
            machine).

    Returns:
        FrictionResult with the friction force, static flag and net force.
    """
    return resolve_friction_limits(
        driving,
        velocity,
        max_static_friction(mu_static, normal) + extra_resistance,
        mu_kinetic * abs(normal) + extra_resistance,
        eps=eps,
    )


def resolve_friction_limits(
    driving: float,
    velocity: float,
    static_limit: float,
    kinetic: float,
    eps: float = STATIONARY_EPS,
) -> FrictionResult:
    """
    Same rule as ``resolve_friction`` with the force magnitudes given directly.

    Used when several surfaces with their own coefficients share one motion
    axis: ``static_limit`` is Σ μs_i·N_i and ``kinetic`` is Σ μk_i·N_i, each
    plus any constant resistance.
    """
    if abs(velocity) < eps:
        if abs(driving) <= static_limit:
            return FrictionResult(friction=driving, is_static=True, net_force=0.0)
        direction = sign(driving)
    else:
        direction = sign(velocity)

    friction = kinetic * direction
    return FrictionResult(friction=friction, is_static=False, net_force=driving - friction)


def settle(
    velocity: float,
    acceleration: float,
    driving: float,
    max_static: float,
    snap_speed: float,
) -> bool:
    """
    Whether a sliding body should snap to rest this step.

    True when the body is slowing down (velocity and acceleration have
    opposite signs), is already slow (|v| < snap_speed), and static friction
    could hold it (|driving| <= max_static).
    """
    return (
        velocity * acceleration < 0.0
        and abs(velocity) < snap_speed
        and abs(driving) <= max_static
    )


def distribute(friction: float, weights: Sequence[float]) -> list[float]:
    """
    Split a shared friction force across several contact surfaces.

    Each surface receives a share proportional to its weight: its normal
    load, or its μ·N when the surfaces have different coefficients. If the
    total weight is zero every share is zero.
    """
    total = sum(abs(w) for w in weights)
    if total == 0.0:
        return [0.0 for _ in weights]
    return [friction * abs(w) / total for w in weights]
