"""Domain layer: authorization vocabulary, value objects and the engine."""
