"""Review domain models."""
