"""Qt views and the pure renderers that feed them."""
