# MIT License (see LICENSE)
"""
Two round pucks on a frictionless table.

Between contacts the pucks move in straight lines. Each substep looks ahead
for the first touch inside the step (swept test), moves both pucks to that
instant, applies the restitution impulse along the line of centers, and
finishes the step. Pucks left overlapping are pushed apart.

The demo runs faster than real time: 0.1 s of simulated time per 60 Hz
frame, in five substeps.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..collision import detect_contact, resolve_collision, separate, time_of_impact
from ..core.invariants import kinetic_energy, linear_momentum
from ..errors import require_positive, require_unit_interval
from ..types import Body, Vector2
from .base import Simulation, DemoKind

# Default separation of the pucks along x before any offset (m).
START_X = 3.0


@dataclass(frozen=True)
class CollisionParams:
    """
    Attributes:
        mass_a, mass_b: Puck masses (kg).
        radius_a, radius_b: Puck radii (m).
        restitution: Coefficient of restitution e in [0, 1].
    """
    mass_a: float = 1.0
    radius_a: float = 0.5
    mass_b: float = 1.0
    radius_b: float = 0.5
    restitution: float = 1.0

    def __post_init__(self) -> None:
        require_positive("mass_a", self.mass_a)
        require_positive("radius_a", self.radius_a)
        require_positive("mass_b", self.mass_b)
        require_positive("radius_b", self.radius_b)
        require_unit_interval("restitution", self.restitution)


@dataclass(frozen=True)
class CollisionInitial:
    """
    Speeds (m/s) and headings (rad, from +x) of both pucks. Puck A starts at
    (-3, 0), puck B at (3, 0) shifted by the offset, unless explicit
    positions are given.
    """
    speed_a: float = 2.0
    heading_a: float = 0.0
    speed_b: float = 2.0
    heading_b: float = math.pi
    offset_x: float = 0.0
    offset_y: float = 0.0
    position_a: tuple[float, float] | None = None
    position_b: tuple[float, float] | None = None


@dataclass
class CollisionState:
    a: Body
    b: Body


class TwoBodyCollision(Simulation):
    """Two-puck collision demo; 0.02 s substeps."""
    kind = DemoKind.COLLISION
    params_type = CollisionParams
    initial_type = CollisionInitial
    SIM_DT = 0.02
    SAMPLE_INTERVAL = 0.02
    MAX_HISTORY = 2000
    HISTORY_FIELDS = ("px", "py", "e_kin")
    TIME_SCALE = 6.0
    INTEGRATOR = None

    def _initial_state(self) -> CollisionState:
        p, i = self.params, self.initial
        pos_a = Vector2(*i.position_a) if i.position_a is not None else Vector2(-START_X, 0.0)
        if i.position_b is not None:
            pos_b = Vector2(*i.position_b)
        else:
            pos_b = Vector2(START_X + i.offset_x, i.offset_y)
        a = Body(p.mass_a, p.radius_a, pos_a, Vector2.from_polar(i.speed_a, i.heading_a), label="A")
        b = Body(p.mass_b, p.radius_b, pos_b, Vector2.from_polar(i.speed_b, i.heading_b), label="B")
        return CollisionState(a=a, b=b)

    def _on_reset(self) -> None:
        self.collision_count = 0
        self.contact_points: list[Vector2] = []

    def _advance(self, dt: float) -> None:
        a, b = self.state.a, self.state.b
        toi = time_of_impact(a, b, dt)
        if toi is None:
            a.advance(dt)
            b.advance(dt)
            return
        a.advance(toi)
        b.advance(toi)
        self._impact()
        a.advance(dt - toi)
        b.advance(dt - toi)

    def _impact(self) -> None:
        a, b = self.state.a, self.state.b
        contact = detect_contact(a, b)
        if contact is not None:
            normal, point = contact.normal, contact.point
        else:
            # Exactly touching: the overlap test sees no penetration.
            normal = (b.position - a.position).normalize()
            point = a.position + normal * a.radius
        if resolve_collision(a, b, normal, self.params.restitution):
            self.collision_count += 1
            self.contact_points.append(point)
        if contact is not None:
            separate(a, b, contact)

    def _sample(self) -> dict:
        bodies = (self.state.a, self.state.b)
        px, py = linear_momentum(bodies)
        return {"px": float(px), "py": float(py), "e_kin": kinetic_energy(bodies)}

    def derived(self) -> dict:
        a, b = self.state.a, self.state.b
        p = linear_momentum((a, b))
        return {
            "momentum": (float(p[0]), float(p[1])),
            "total_momentum": float(math.hypot(p[0], p[1])),
            "e_kin_a": a.kinetic_energy,
            "e_kin_b": b.kinetic_energy,
            "e_kin": a.kinetic_energy + b.kinetic_energy,
            "collision_count": self.collision_count,
        }
