"""taskboard: in-memory task board with a per-task countdown timer."""

__version__ = "0.1.0"
