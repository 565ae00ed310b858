"""HTTP layer: auth dependencies and routers."""
