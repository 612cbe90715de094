"""Report domain models."""
