"""Domain models and pure generation rules."""
