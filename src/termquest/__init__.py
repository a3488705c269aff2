"""Terminal Quest: learn Linux commands through puzzles and games."""

__version__ = "0.1.0"
