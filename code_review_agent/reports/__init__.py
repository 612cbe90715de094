"""Reports bounded context: writing review reports to markdown files."""
