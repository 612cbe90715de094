"""Commit message services."""
