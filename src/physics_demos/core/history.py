# MIT License (see LICENSE)
"""
Bounded, time-sampled history of derived quantities.

Graphs and exports need energies, momenta, etc. at a steady rate that is
coarser than the physics substep (typically 1/60 s against 1/240 s). The
buffer therefore gates its own sampling: ``record`` is called after every
substep and keeps a sample only once ``sample_interval`` has elapsed since
the last kept one.

Storage is a ``collections.deque`` with ``maxlen``: once full, the oldest
sample is evicted for each new one (FIFO), so memory stays bounded no matter
how long a demo runs. Samples are plain dicts ``{"t": ..., <field>: ...}``
with a fixed set of field names per demo; they are never fed back into the
physics.
"""
from __future__ import annotations
from collections import deque
from typing import Any, Iterator, Sequence

import numpy as np

from ..errors import require_positive, ConfigurationError

# Fraction of an interval tolerated as float round-off when gating samples.
_GATE_SLACK = 1e-9


class HistoryBuffer:
    """
    Fixed-capacity FIFO of timestamped samples.

    Attributes:
        sample_interval: Minimum simulated time between kept samples (s).
        max_length: Capacity; the oldest sample is dropped beyond it.
    """

    def __init__(self, fields: Sequence[str], sample_interval: float, max_length: int) -> None:
        require_positive("sample_interval", sample_interval)
        if int(max_length) < 1:
            raise ConfigurationError(f"max_length must be at least 1, got {max_length!r}")
        if "t" in fields:
            raise ConfigurationError("'t' is reserved for the sample time")
        self._fields = tuple(fields)
        self.sample_interval = float(sample_interval)
        self.max_length = int(max_length)
        self._samples: deque[dict[str, Any]] = deque(maxlen=self.max_length)
        self._last_t: float | None = None

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names carried by every sample (besides ``t``)."""
        return self._fields

    def due(self, t: float) -> bool:
        """Whether a sample at time t would be kept."""
        if self._last_t is None:
            return True
        return t - self._last_t >= self.sample_interval * (1.0 - _GATE_SLACK)

    def record(self, t: float, **values: Any) -> bool:
        """
        Append a sample if the sampling interval has elapsed.

        Args:
            t: Simulation time of the sample.
            **values: Exactly the buffer's fields.

        Returns:
            True if the sample was stored.

        Raises:
            KeyError: If a field is missing or an unknown field is given.
        """
        if not self.due(t):
            return False
        self._append(t, values)
        return True

    def force_record(self, t: float, **values: Any) -> None:
        """Append a sample regardless of the interval (initial state at reset)."""
        self._append(t, values)

    def _append(self, t: float, values: dict[str, Any]) -> None:
        missing = [f for f in self._fields if f not in values]
        extra = [k for k in values if k not in self._fields]
        if missing or extra:
            raise KeyError(f"history fields mismatch: missing={missing}, unexpected={extra}")
        sample = {"t": float(t)}
        for f in self._fields:
            sample[f] = values[f]
        self._samples.append(sample)
        self._last_t = float(t)

    def clear(self) -> None:
        """Remove all samples and restart interval gating."""
        self._samples.clear()
        self._last_t = None

    def samples(self) -> list[dict[str, Any]]:
        """All samples, oldest first, as independent dict copies."""
        return [dict(s) for s in self._samples]

    def latest(self) -> dict[str, Any] | None:
        """Most recent sample, or None when empty."""
        if not self._samples:
            return None
        return dict(self._samples[-1])

    def column(self, name: str) -> np.ndarray:
        """
        One field across all samples as a float64 array (``"t"`` allowed).

        Raises:
            KeyError: If ``name`` is not a field of this buffer.
        """
        if name != "t" and name not in self._fields:
            raise KeyError(name)
        return np.array([s[name] for s in self._samples], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.samples())
