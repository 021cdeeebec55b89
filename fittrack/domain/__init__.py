"""Domain layer: entities, store and aggregation functions."""
