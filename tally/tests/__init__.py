"""
Test suite for the accumulator.

Focus areas:
- Operation model and parsing
- Exact arithmetic and fixed-scale division
- Replay determinism
- Undo/redo state transitions
"""
