"""Combat entities, resolution and log management."""
