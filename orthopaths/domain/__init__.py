"""Domain layer: value types and events."""
