"""Report services."""
