"""Commit message bounded context: heuristic commit message suggestions."""
