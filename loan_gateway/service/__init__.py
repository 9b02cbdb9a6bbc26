"""Decision logic services."""
