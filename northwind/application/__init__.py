"""Application layer: service orchestrators."""
