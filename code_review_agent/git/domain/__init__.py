"""Git domain models."""
