"""Core infrastructure: data types, dice, configuration, errors and events."""
