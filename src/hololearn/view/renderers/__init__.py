"""Pure (Qt-free) rasterization and overlay construction."""
