"""Application layer: services and reporters."""
