# MIT License (see LICENSE)
"""
Rigid lever (beam on a movable fulcrum) carrying point loads.

Positions x are measured along the beam from its left end. With the
fulcrum at f, each load contributes a torque (x_i - f)·m_i·g, and the
beam's own weight acts at its middle:

    ΣM = Σ (x_i - f)·m_i·g + (L/2 - f)·M_beam·g
    I  = I_base + Σ m_i·(x_i - f)²
    α  = ΣM / I

Positive torque tips the right end down. The beam is integrated with
semi-implicit Euler, and its angular velocity is multiplied by a fixed
damping factor every substep. Torques use the horizontal lever arms, which
is adequate for the small angles allowed before the beam hits its stop.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import math

from ..constants import G_EARTH
from ..errors import ConfigurationError, require_positive
from ..util import clamp
from .base import Simulation, DemoKind, Terminal

logger = logging.getLogger(__name__)

# Threshold of |ΣM| (N·m) under which the lever reads as balanced.
BALANCE_EPS = 0.05


@dataclass(frozen=True)
class Load:
    """Point mass (kg) hung at position x (m) along the beam."""
    mass: float
    x: float

    def __post_init__(self) -> None:
        require_positive("load mass", self.mass)

    def moment(self, fulcrum: float, g: float = G_EARTH) -> float:
        return (self.x - fulcrum) * self.mass * g


DEFAULT_LOADS = (Load(10.0, 3.0), Load(5.0, 9.0))


@dataclass(frozen=True)
class LeverParams:
    """
    Attributes:
        length: Beam length L (m).
        fulcrum: Fulcrum position f (m from the left end).
        beam_mass: Beam mass (kg).
        base_inertia: Moment of inertia of the bare beam (kg·m²).
        damping: Multiplier applied to ω every substep, in (0, 1].
        max_angle: Tilt at which the beam hits its stop (rad).
        loads: Point loads on the beam.
        g: Gravitational acceleration (m/s²).
    """
    length: float = 10.0
    fulcrum: float = 5.0
    beam_mass: float = 2.0
    base_inertia: float = 5.0
    damping: float = 0.85
    max_angle: float = 0.35
    loads: tuple[Load, ...] = DEFAULT_LOADS
    g: float = G_EARTH

    def __post_init__(self) -> None:
        require_positive("length", self.length)
        require_positive("base_inertia", self.base_inertia)
        require_positive("max_angle", self.max_angle)
        require_positive("g", self.g)
        if not self.beam_mass >= 0:
            raise ConfigurationError(f"beam_mass must be non-negative, got {self.beam_mass!r}")
        if not 0.0 < self.damping <= 1.0:
            raise ConfigurationError(f"damping must lie in (0, 1], got {self.damping!r}")
        if not 0.0 <= self.fulcrum <= self.length:
            raise ConfigurationError(f"fulcrum {self.fulcrum!r} is off the beam [0, {self.length}]")
        object.__setattr__(self, "loads", tuple(self.loads))
        for load in self.loads:
            if not 0.0 <= load.x <= self.length:
                raise ConfigurationError(f"load at x={load.x!r} is off the beam [0, {self.length}]")


@dataclass(frozen=True)
class LeverInitial:
    theta: float = 0.0
    omega: float = 0.0


@dataclass
class LeverState:
    theta: float
    omega: float


def total_moment(params: LeverParams) -> float:
    """Net torque about the fulcrum (N·m), positive tipping the right end down."""
    m = sum(load.moment(params.fulcrum, params.g) for load in params.loads)
    m += (0.5 * params.length - params.fulcrum) * params.beam_mass * params.g
    return m


def moment_of_inertia(params: LeverParams) -> float:
    """Beam inertia plus the point loads about the fulcrum (kg·m²)."""
    return params.base_inertia + sum(
        load.mass * (load.x - params.fulcrum) ** 2 for load in params.loads
    )


def mechanical_advantage(params: LeverParams) -> float:
    """
    Ratio of the mean left arm to the mean right arm.

    Returns inf with no loads right of the fulcrum and 0 with none left of
    it.
    """
    left = [params.fulcrum - load.x for load in params.loads if load.x < params.fulcrum]
    right = [load.x - params.fulcrum for load in params.loads if load.x > params.fulcrum]
    if not right:
        return math.inf
    if not left:
        return 0.0
    return (sum(left) / len(left)) / (sum(right) / len(right))


def required_force(params: LeverParams) -> float:
    """Force at the mean left arm that cancels the right-hand loads (N)."""
    right_moment = sum(
        load.moment(params.fulcrum, params.g) for load in params.loads if load.x > params.fulcrum
    )
    left = [params.fulcrum - load.x for load in params.loads if load.x < params.fulcrum]
    if not left:
        return 0.0
    arm = sum(left) / len(left)
    return right_moment / arm if arm > 1e-6 else 0.0


def balancing_position(params: LeverParams) -> float | None:
    """
    Position of the last load that brings ΣM to zero, unclamped.

    None when there are no loads.
    """
    if not params.loads:
        return None
    movable = params.loads[-1]
    others = total_moment(params) - movable.moment(params.fulcrum, params.g)
    return params.fulcrum - others / (movable.mass * params.g)


class Lever(Simulation):
    """Lever demo; semi-implicit Euler with per-step damping at 1/120 s."""
    kind = DemoKind.LEVER
    params_type = LeverParams
    initial_type = LeverInitial
    SIM_DT = 1 / 120
    SAMPLE_INTERVAL = 1 / 120
    MAX_HISTORY = 2000
    HISTORY_FIELDS = ("moment",)

    def _initial_state(self) -> LeverState:
        return LeverState(theta=self.initial.theta, omega=self.initial.omega)

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state
        moment = total_moment(p)
        alpha = moment / moment_of_inertia(p)

        def accel(theta, omega, t):
            # per-substep damping of the updated ω, as an acceleration
            return alpha * p.damping - omega * (1.0 - p.damping) / dt

        s.theta, s.omega = self.integrate(s.theta, s.omega, self.time, dt, accel)

        # Let a balanced beam settle instead of creeping forever.
        if abs(s.omega) < 1e-6 and abs(moment) < 1e-3:
            s.omega = 0.0
            s.theta *= 0.995

        if abs(s.theta) >= p.max_angle:
            s.theta = math.copysign(p.max_angle, s.theta)
            s.omega = 0.0
            self._halt(Terminal.HARD_STOP)

    def is_balanced(self, eps: float = BALANCE_EPS) -> bool:
        return abs(total_moment(self.params)) <= eps

    def mechanical_advantage(self) -> float:
        return mechanical_advantage(self.params)

    def balancing_position(self) -> float | None:
        return balancing_position(self.params)

    def restore_balance(self) -> None:
        """
        Move the last load to where ΣM = 0 (clamped to the beam) and level
        the beam at rest.
        """
        x = self.balancing_position()
        if x is None:
            return
        x = clamp(x, 0.0, self.params.length)
        loads = self.params.loads[:-1] + (replace(self.params.loads[-1], x=x),)
        self.update_params(loads=loads)
        self.state.theta = 0.0
        self.state.omega = 0.0
        self.terminal = None
        logger.debug("lever rebalanced: last load moved to x=%.3f", x)

    def _sample(self) -> dict:
        return {"moment": total_moment(self.params)}

    def derived(self) -> dict:
        p = self.params
        moment = total_moment(p)
        inertia = moment_of_inertia(p)
        return {
            "moment": moment,
            "inertia": inertia,
            "angular_acceleration": moment / inertia,
            "is_balanced": abs(moment) <= BALANCE_EPS,
            "mechanical_advantage": mechanical_advantage(p),
            "required_force": required_force(p),
        }
