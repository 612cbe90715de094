"""Exceptions raised by Git operations."""


class RepositoryNotFoundError(RuntimeError):
    """The given path is not inside a git working tree."""


class DiffUnavailableError(RuntimeError):
    """The diff for a single file could not be retrieved."""
