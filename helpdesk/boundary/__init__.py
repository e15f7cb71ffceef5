"""Boundary layer: completion provider and ticket database adapters."""
