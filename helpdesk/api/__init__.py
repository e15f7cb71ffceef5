"""HTTP API: app factory, routers and dependency wiring."""
