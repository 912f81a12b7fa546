"""Domain layer: value objects, result envelopes and repository ports."""
