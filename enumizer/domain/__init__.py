"""Domain layer: normalized specifications and identifier synthesis."""
