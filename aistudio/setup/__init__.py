"""Application setup (dependency wiring)."""
