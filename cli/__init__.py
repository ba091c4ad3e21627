"""
Tally CLI - Replayable decimal accumulator

Commands:
- tally run STEP... - Apply a sequence of operations, undo and redo steps
- tally demo - Run the reference add/subtract/multiply/divide scenario
- tally version - Show version information
"""

__version__ = "0.1.0"
