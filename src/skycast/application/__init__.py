"""Application layer: query objects consumed by the presentation layer."""
