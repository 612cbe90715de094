"""Git service for reading pending changes of a working tree."""

import logging
from pathlib import Path

from code_review_agent.git.domain.value_objects import ChangeRecord
from code_review_agent.git.repositories.interfaces import GitRepository
from code_review_agent.git.services.file_filter_service import FileFilterService

logger = logging.getLogger(__name__)


class GitService:
    """Service for Git operations."""

    def __init__(
        self,
        git_repository: GitRepository,
        file_filter_service: FileFilterService | None = None,
    ) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
            file_filter_service: Filter for excluded files. Defaults to FileFilterService()
        """
        self._git_repository = git_repository
        self._file_filter_service = file_filter_service or FileFilterService()

    def list_changed_files(self, root_dir: str | Path) -> tuple[ChangeRecord, ...]:
        """
        List non-excluded files with pending changes, without their diff text.

        Args:
            root_dir: Directory inside the git working tree

        Returns:
            Tuple of change records in the order reported by git

        Raises:
            RepositoryNotFoundError: If root_dir is not inside a working tree
        """
        repo_path = Path(root_dir)
        self._git_repository.ensure_work_tree(repo_path)

        records = self._git_repository.list_changed_files(repo_path)
        return tuple(
            record for record in records if not self._file_filter_service.is_excluded(record.file)
        )

    def get_changes(self, root_dir: str | Path) -> tuple[ChangeRecord, ...]:
        """
        Read the pending changes of a working tree, including each file's diff.

        Args:
            root_dir: Directory inside the git working tree

        Returns:
            Tuple of change records with diff text, in the order reported by git

        Raises:
            RepositoryNotFoundError: If root_dir is not inside a working tree
            DiffUnavailableError: If the diff of any file cannot be retrieved
        """
        repo_path = Path(root_dir)
        changes = tuple(
            ChangeRecord(
                file=record.file,
                insertions=record.insertions,
                deletions=record.deletions,
                diff_text=self._git_repository.get_file_diff(repo_path, record.file),
                binary=record.binary,
            )
            for record in self.list_changed_files(repo_path)
        )

        logger.info("Read %d changed file(s) in %s", len(changes), repo_path)
        return changes
