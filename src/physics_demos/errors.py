# MIT License (see LICENSE)
"""
Exception types raised by the demo engine.

Only configuration problems are errors. Physical end-states (a satellite
hitting the planet, a cart leaving the rail) are reported through
``Simulation.terminal`` instead.
"""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when demo parameters or engine settings are invalid."""


def require_positive(name: str, value: float) -> None:
    """Reject zero, negative, or NaN values for quantities used as divisors."""
    if not value > 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")


def require_non_negative(name: str, value: float) -> None:
    """Reject negative or NaN values."""
    if not value >= 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value!r}")


def require_friction_pair(mu_static: float, mu_kinetic: float, suffix: str = "") -> None:
    """Check 0 <= mu_kinetic <= mu_static; ``suffix`` names the surface ("_a")."""
    require_non_negative(f"mu_static{suffix}", mu_static)
    require_non_negative(f"mu_kinetic{suffix}", mu_kinetic)
    if mu_static < mu_kinetic:
        raise ConfigurationError(
            f"mu_static{suffix} ({mu_static}) must not be less than mu_kinetic{suffix} ({mu_kinetic})"
        )


def require_unit_interval(name: str, value: float) -> None:
    """Check 0 <= value <= 1 (restitution, damping fractions)."""
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must lie in [0, 1], got {value!r}")
