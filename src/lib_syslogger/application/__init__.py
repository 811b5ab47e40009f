"""Application layer: ports the adapter depends on."""
