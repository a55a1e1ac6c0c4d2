# MIT License (see LICENSE)
"""
Contact detection and resolution for the two-body collision demo.

A contact is resolved in three parts:
1. Detection: overlap test between two round bodies.
2. Velocity update: the 1D coefficient-of-restitution formula applied to the
   velocity components along the contact normal. Tangential components pass
   through unchanged (frictionless contact).
3. Positional correction: each body is pushed back by half the penetration
   along the normal so the pair does not stay interlocked.

Normal-direction formula (e = coefficient of restitution):
    v1n' = ((m1 - e·m2)·v1n + (1 + e)·m2·v2n) / (m1 + m2)
    v2n' = ((m2 - e·m1)·v2n + (1 + e)·m1·v1n) / (m1 + m2)

Reference:
    https://en.wikipedia.org/wiki/Coefficient_of_restitution
"""
from __future__ import annotations
from dataclasses import dataclass

from ..errors import require_unit_interval
from ..types import Body, Vector2


@dataclass(frozen=True)
class Contact:
    """
    Geometry of a contact between two round bodies.

    Attributes:
        normal: Unit vector from body a toward body b.
        penetration: Overlap depth in meters (positive = overlapping).
        point: World-space contact point on the line of centers.
    """
    normal: Vector2
    penetration: float
    point: Vector2


def detect_contact(a: Body, b: Body) -> Contact | None:
    """
    Detect overlap between two round bodies.

    Returns:
        Contact if the bodies overlap, None otherwise. Coincident centers
        use the +x axis as the normal.
    """
    d = b.position - a.position
    dist = d.length()
    reach = a.radius + b.radius

    if dist >= reach:
        return None

    n = d / dist if dist > 1e-12 else Vector2(1.0, 0.0)
    penetration = reach - dist
    point = a.position + n * (a.radius - 0.5 * penetration)
    return Contact(normal=n, penetration=penetration, point=point)


def resolve_collision(a: Body, b: Body, normal: Vector2, restitution: float) -> bool:
    """
    Replace the velocities of a and b with their post-impact values.

    The impulse is applied only while the bodies approach each other along
    the normal; an already separating pair is left alone so that a pair
    still overlapping on the next substep is not bounced back together.

    Args:
        a: First body (modified in-place).
        b: Second body (modified in-place).
        normal: Unit contact normal from a toward b.
        restitution: Coefficient of restitution e in [0, 1].

    Returns:
        True if velocities were changed.
    """
    require_unit_interval("restitution", restitution)
    n = normal
    t = n.perpendicular()

    v1n, v1t = a.velocity.dot(n), a.velocity.dot(t)
    v2n, v2t = b.velocity.dot(n), b.velocity.dot(t)

    if v1n - v2n <= 0.0:
        return False

    m1, m2 = a.mass, b.mass
    e = restitution
    v1n_new = ((m1 - e * m2) * v1n + (1 + e) * m2 * v2n) / (m1 + m2)
    v2n_new = ((m2 - e * m1) * v2n + (1 + e) * m1 * v1n) / (m1 + m2)

    a.velocity = n * v1n_new + t * v1t
    b.velocity = n * v2n_new + t * v2t
    return True


def separate(a: Body, b: Body, contact: Contact) -> None:
    """Push overlapping bodies apart by half the penetration each."""
    correction = contact.normal * (0.5 * contact.penetration)
    a.position = a.position - correction
    b.position = b.position + correction


def collide(a: Body, b: Body, restitution: float) -> Contact | None:
    """
    Full contact handling for one pair: detect, resolve velocities, separate.

    Returns:
        The contact that was handled, or None if the bodies do not overlap.
    """
    contact = detect_contact(a, b)
    if contact is None:
        return None
    resolve_collision(a, b, contact.normal, restitution)
    separate(a, b, contact)
    return contact
