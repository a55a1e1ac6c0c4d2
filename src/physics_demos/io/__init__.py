# MIT License (see LICENSE)
"""
Input/Output utilities for the demos.

This subpackage provides:
    - Ingestion: flat named values (degrees allowed) to typed parameters.
    - Records: snapshots and history flattened to scalar records.
    - JSON configurations: load and save demo setups.

Typical usage:
    from physics_demos.io import params_from_dict, load_config

    params = params_from_dict("incline", {"mass": 2.0, "angle_deg": 25})
    sim = load_config("incline.json")
"""
from .ingest import (
    params_from_dict,
    initial_from_dict,
    snapshot_to_record,
    history_to_records,
)
from .json_io import (
    load_config,
    load_config_raw,
    simulation_from_config,
    config_to_json,
    save_config,
)

__all__ = [
    # Ingestion
    "params_from_dict",
    "initial_from_dict",
    # Records
    "snapshot_to_record",
    "history_to_records",
    # JSON configurations
    "load_config",
    "load_config_raw",
    "simulation_from_config",
    "config_to_json",
    "save_config",
]
