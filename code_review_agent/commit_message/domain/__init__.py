"""Commit message domain models."""
