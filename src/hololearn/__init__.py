"""Interactive holography recording and reconstruction simulator."""

__version__ = "0.1.0"
