"""Concrete implementation of report storage on the local filesystem."""

import logging
from pathlib import Path

from code_review_agent.reports.domain.exceptions import ReportWriteError
from code_review_agent.reports.repositories.interfaces import ReportRepository

logger = logging.getLogger(__name__)


class FileSystemReportRepositoryImpl(ReportRepository):
    """Report storage writing UTF-8 files to the local filesystem."""

    def ensure_directory(self, directory: Path) -> None:
        """
        Create a directory and any missing parents.

        Args:
            directory: Directory to create. Existing directories are left as is

        Raises:
            ReportWriteError: If the directory cannot be created
        """
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ReportWriteError(f"Failed to create directory {directory}: {e}") from e

    def write_text(self, file_path: Path, content: str) -> None:
        """
        Write a file, replacing any existing one.

        Args:
            file_path: Path of the file to write
            content: Full file content

        Raises:
            ReportWriteError: If the file cannot be written
        """
        logger.debug("Writing %d characters to %s", len(content), file_path)
        try:
            with file_path.open("w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ReportWriteError(f"Failed to write markdown file {file_path}: {e}") from e
