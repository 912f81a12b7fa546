"""Local cache persistence."""
