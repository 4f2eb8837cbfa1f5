"""Domain layer: entities and operation outcomes."""
