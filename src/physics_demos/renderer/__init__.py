# MIT License (see LICENSE)
"""
Frame-based consumers of demo snapshots.

DebugRenderer prints a line per frame, BufferedRenderer keeps the frames
for replay, and NullRenderer discards them. New backends subclass
RendererAdapter.

    from physics_demos.renderer import DebugRenderer
    DebugRenderer(fields=("theta", "omega")).render(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
