"""Application state, animation timing and background work."""
