# MIT License (see LICENSE)
"""
JSON demo configurations.

A configuration names a demo and gives its parameters and initial
conditions as flat values (degrees allowed via ``_deg``), plus optional
simulation options:

JSON Schema Overview:
---------------------
{
  "demo": string,                  # Required, a DemoKind value ("pendulum", ...)
  "params": {name: value, ...},    # Optional, see the demo's *Params dataclass
  "initial": {name: value, ...},   # Optional, see the demo's *Initial dataclass
  "options": {                     # Optional
    "sim_dt": float,
    "sample_interval": float,
    "max_history": int,
    "max_frame_dt": float,
    "time_scale": float,
    "integrator": string           # a name in core.integrators.INTEGRATORS
  }
}

Example:
    {"demo": "incline",
     "params": {"mass": 2.0, "angle_deg": 25, "mu_static": 0.5, "mu_kinetic": 0.4}}
"""
from __future__ import annotations
from dataclasses import asdict
import json
from typing import Any

from ..demos import Simulation, create_simulation
from ..errors import ConfigurationError
from .ingest import params_from_dict, initial_from_dict

OPTION_NAMES = ("sim_dt", "sample_interval", "max_history", "max_frame_dt", "time_scale", "integrator")


def load_config_raw(path: str) -> dict[str, Any]:
    """Load the raw JSON of a configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def simulation_from_config(data: dict[str, Any]) -> Simulation:
    """
    Build a ready-to-start Simulation from configuration data.

    Raises:
        ConfigurationError: If the demo is missing or unknown, or any value
            is invalid.
    """
    if "demo" not in data:
        raise ConfigurationError("configuration is missing the 'demo' field")
    kind = data["demo"]
    params = params_from_dict(kind, data.get("params", {}))
    initial = initial_from_dict(kind, data.get("initial", {}))

    options = dict(data.get("options", {}))
    unknown = sorted(set(options) - set(OPTION_NAMES))
    if unknown:
        raise ConfigurationError(f"unknown simulation options: {unknown}")
    if "max_history" in options:
        options["max_history"] = int(options["max_history"])

    return create_simulation(kind, params, initial, **options)


def load_config(path: str) -> Simulation:
    """Load a configuration file and build its Simulation."""
    return simulation_from_config(load_config_raw(path))


def config_to_json(sim: Simulation) -> dict[str, Any]:
    """
    Configuration data reproducing a simulation's current parameters and
    initial conditions (angles in radians).
    """
    options = {
        "sim_dt": sim.clock.sim_dt,
        "sample_interval": sim.history.sample_interval,
        "max_history": sim.history.max_length,
        "max_frame_dt": sim.clock.max_frame_dt,
        "time_scale": sim.clock.time_scale,
    }
    if sim.integrator_name is not None:
        options["integrator"] = sim.integrator_name
    return {
        "demo": sim.kind.value,
        "params": asdict(sim.params),
        "initial": asdict(sim.initial),
        "options": options,
    }


def save_config(sim: Simulation, path: str, indent: int = 2) -> None:
    """Write a simulation's configuration to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(sim), f, indent=indent)
