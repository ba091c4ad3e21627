"""
Replay system for value reconstruction.

Replay folds arithmetic over an operation log from the initial value.
Must be deterministic: same operations -> same value.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
