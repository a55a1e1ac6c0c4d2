# MIT License (see LICENSE)
"""
Conversion between flat named values and the typed demo objects.

A UI or config file hands over parameters as a flat mapping of names to
numbers. Angles may be given in degrees by suffixing the name with
``_deg`` (``angle_deg=30`` sets ``angle`` to π/6); they are converted to
radians here and nowhere else. Range checks are the parameter
dataclasses' job; unknown names are rejected here.

In the other direction, snapshots and history samples are flattened into
records of scalars (``position_x``, ``a_velocity_y``, ...) ready for a
table, a plot or a CSV writer.
"""
from __future__ import annotations
from dataclasses import fields, is_dataclass, asdict
from enum import Enum
from typing import Any, Mapping

import numpy as np

from ..demos import DemoKind, Simulation, simulation_class
from ..demos.lever import Load
from ..errors import ConfigurationError
from ..util import deg2rad

DEG_SUFFIX = "_deg"


def _build(cls: type, mapping: Mapping[str, Any], what: str) -> Any:
    known = {f.name for f in fields(cls)}
    values: dict[str, Any] = {}
    for key, value in mapping.items():
        name = key
        if key.endswith(DEG_SUFFIX):
            name = key[: -len(DEG_SUFFIX)]
            value = deg2rad(_number(key, value))
        if name not in known:
            raise ConfigurationError(f"unknown {what} field {key!r} for {cls.__name__}")
        if name in values:
            raise ConfigurationError(f"{what} field {name!r} given twice")
        values[name] = _value(name, value)
    return cls(**values)


def _number(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key!r} must be a number, got {value!r}") from None


def _value(name: str, value: Any) -> Any:
    if name == "loads":
        return tuple(_load(item) for item in value)
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return tuple(_number(name, v) for v in value)
    return _number(name, value)


def _load(item: Any) -> Load:
    if isinstance(item, Load):
        return item
    if isinstance(item, Mapping):
        return Load(mass=_number("mass", item["mass"]), x=_number("x", item["x"]))
    mass, x = item
    return Load(mass=_number("mass", mass), x=_number("x", x))


def params_from_dict(kind: DemoKind | str, mapping: Mapping[str, Any]) -> Any:
    """
    Build the parameter dataclass of a demo from flat values.

    Raises:
        ConfigurationError: On unknown names, non-numeric values, or values
            the parameter dataclass rejects.
    """
    return _build(simulation_class(kind).params_type, mapping, "parameter")


def initial_from_dict(kind: DemoKind | str, mapping: Mapping[str, Any]) -> Any:
    """Build the initial-condition dataclass of a demo from flat values."""
    return _build(simulation_class(kind).initial_type, mapping, "initial-condition")


def _flatten(prefix: str, value: Any, out: dict[str, Any]) -> None:
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, Enum):
        out[prefix] = value.value
    elif isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(f"{prefix}_{k}" if prefix else str(k), v, out)
    elif isinstance(value, np.ndarray) and value.shape == (2,):
        out[f"{prefix}_x"] = float(value[0])
        out[f"{prefix}_y"] = float(value[1])
    elif isinstance(value, (list, tuple)) and len(value) == 2 and all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in value
    ):
        out[f"{prefix}_x"] = float(value[0])
        out[f"{prefix}_y"] = float(value[1])
    elif isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{prefix}_{i}", v, out)
    elif isinstance(value, np.generic):
        out[prefix] = value.item()
    else:
        out[prefix] = value


def snapshot_to_record(snapshot: Mapping[str, Any]) -> dict[str, Any]:
    """
    Flatten a snapshot into a single-level dict of scalars.

    Nested dicts and dataclasses are joined with underscores; 2-vectors
    become ``<name>_x`` / ``<name>_y``; other sequences are indexed.
    """
    out: dict[str, Any] = {}
    _flatten("", snapshot, out)
    return out


def history_to_records(sim: Simulation) -> list[dict[str, Any]]:
    """The simulation's history as flat records, oldest first."""
    return [snapshot_to_record(sample) for sample in sim.export_history()]
