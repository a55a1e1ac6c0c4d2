# MIT License (see LICENSE)
"""
Core type definitions shared by the demo models.

Defines:
- Vector2: immutable 2D vector used by the collision and orbital demos.
- Body: a disk-shaped body with mass, radius, position and velocity
  (the two colliding pucks of the collision demo).

Scalar demos (incline, pendulum, disk, ...) keep their state in their own
dataclasses under ``physics_demos.demos``.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from .errors import require_positive


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector.

    Every operation returns a new vector, so a Vector2 can be shared between
    a snapshot and the live state without aliasing problems.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_array(cls, a) -> "Vector2":
        return cls(float(a[0]), float(a[1]))

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Vector2":
        """Vector of given length at ``angle`` radians from +x."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Scalar 2D cross product (z-component)."""
        return self.x * other.y - self.y * other.x

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> "Vector2":
        """
        Unit vector in the same direction.

        A zero-length vector normalizes to the zero vector rather than
        raising; force code treats it as "no direction".
        """
        n = self.length()
        if n == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def perpendicular(self) -> "Vector2":
        """Counter-clockwise perpendicular (-y, x)."""
        return Vector2(-self.y, self.x)

    def angle(self) -> float:
        """Polar angle in radians, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, k: float) -> "Vector2":
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector2":
        return Vector2(self.x / k, self.y / k)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


# =============================================================================
# Body
# =============================================================================

@dataclass
class Body:
    """
    A round body for the two-body collision demo.

    Free motion updates ``position``; the collision resolver replaces
    ``velocity`` (and nudges ``position``) at contact.

    Attributes:
        mass: Mass in kg (must be > 0).
        radius: Contact radius in meters (must be > 0).
        position: Center position in meters.
        velocity: Velocity in m/s.
        label: Display name ("A", "B").
    """
    mass: float
    radius: float
    position: Vector2 = Vector2()
    velocity: Vector2 = Vector2()
    label: str = ""

    def __post_init__(self) -> None:
        require_positive("mass", self.mass)
        require_positive("radius", self.radius)
        if not isinstance(self.position, Vector2):
            self.position = Vector2.from_array(self.position)
        if not isinstance(self.velocity, Vector2):
            self.velocity = Vector2.from_array(self.velocity)

    @property
    def momentum(self) -> Vector2:
        """Linear momentum m·v."""
        return self.velocity * self.mass

    @property
    def kinetic_energy(self) -> float:
        """Translational kinetic energy ½ m v²."""
        return 0.5 * self.mass * self.velocity.length_sq()

    def advance(self, dt: float) -> None:
        """Free motion over dt (no forces act between contacts)."""
        self.position = self.position + self.velocity * dt
