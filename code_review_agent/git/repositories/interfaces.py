"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from code_review_agent.git.domain.value_objects import ChangeRecord


class GitRepository(ABC):
    """Interface for Git working tree queries."""

    @abstractmethod
    def ensure_work_tree(self, repo_path: Path) -> None:
        """
        Check that a path is inside a git working tree.

        Args:
            repo_path: Path to check

        Raises:
            RepositoryNotFoundError: If the path is not inside a working tree
        """
        ...

    @abstractmethod
    def list_changed_files(self, repo_path: Path) -> tuple[ChangeRecord, ...]:
        """
        List files with pending changes and their line counts.

        Args:
            repo_path: Path inside the git working tree

        Returns:
            Tuple of change records without diff text, in git's order
        """
        ...

    @abstractmethod
    def get_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the pending diff of a single file.

        Args:
            repo_path: Path inside the git working tree
            file_path: Path to the file relative to repository root

        Returns:
            Diff content for the specific file
        """
        ...
