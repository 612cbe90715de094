"""Git services."""
