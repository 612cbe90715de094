"""Repository interfaces for report storage."""

from abc import ABC, abstractmethod
from pathlib import Path


class ReportRepository(ABC):
    """Interface for persisting markdown reports."""

    @abstractmethod
    def ensure_directory(self, directory: Path) -> None:
        """
        Create a directory and any missing parents.

        Args:
            directory: Directory to create. Existing directories are left as is
        """
        ...

    @abstractmethod
    def write_text(self, file_path: Path, content: str) -> None:
        """
        Write a file, replacing any existing one.

        Args:
            file_path: Path of the file to write
            content: Full file content
        """
        ...
