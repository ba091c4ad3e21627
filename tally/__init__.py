"""
Replayable Decimal Accumulator

Applies add/subtract/multiply/divide to a running decimal value with
undo and redo implemented by replaying the operation history.
"""

__version__ = "0.1.0"
