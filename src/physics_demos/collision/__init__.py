# MIT License (see LICENSE)
"""
Contact handling for the two-body collision demo.

This subpackage provides:
    - Contact: overlap geometry (normal, penetration, point).
    - Restitution-based velocity resolution along the contact normal.
    - Half-and-half positional correction.
    - Swept time-of-impact test against tunneling.

Typical usage:
    from physics_demos.collision import collide

    contact = collide(body_a, body_b, restitution=1.0)
    if contact:
        # velocities were updated and the bodies separated
"""
from .contact import Contact, detect_contact, resolve_collision, separate, collide
from .ccd import time_of_impact

__all__ = [
    "Contact",
    "detect_contact",
    "resolve_collision",
    "separate",
    "collide",
    "time_of_impact",
]
