"""Exceptions raised by report writing."""


class ReportWriteError(RuntimeError):
    """A report could not be written to disk."""
