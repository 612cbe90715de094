"""Concrete implementation of Git repository operations."""

import logging
import subprocess
from pathlib import Path

from code_review_agent.git.domain.exceptions import (
    DiffUnavailableError,
    RepositoryNotFoundError,
)
from code_review_agent.git.domain.value_objects import ChangeRecord
from code_review_agent.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def ensure_work_tree(self, repo_path: Path) -> None:
        """
        Check that a path is inside a git working tree.

        Args:
            repo_path: Path to check

        Raises:
            RepositoryNotFoundError: If the path does not exist, is not a
                directory, or is not inside a working tree
        """
        if not repo_path.exists():
            raise RepositoryNotFoundError(f"Repository path does not exist: {repo_path}")

        if not repo_path.is_dir():
            raise RepositoryNotFoundError(f"Repository path is not a directory: {repo_path}")

        result = self._run_git(
            ["rev-parse", "--is-inside-work-tree"], repo_path, check=False
        )
        if result.returncode != 0 or result.stdout.strip() != "true":
            raise RepositoryNotFoundError(f"Path is not a git working tree: {repo_path}")

    def list_changed_files(self, repo_path: Path) -> tuple[ChangeRecord, ...]:
        """
        List files with pending changes and their line counts.

        Args:
            repo_path: Path inside the git working tree

        Returns:
            Tuple of change records without diff text, in git's order

        Raises:
            RepositoryNotFoundError: If the diff summary cannot be read
        """
        try:
            result = self._run_git(
                ["diff", "--numstat", "-z", "--no-renames", "--no-color", "--no-ext-diff"],
                repo_path,
            )
        except subprocess.CalledProcessError as e:
            raise RepositoryNotFoundError(
                f"Failed to list changed files in {repo_path}: {e.stderr or e}"
            ) from e

        records: list[ChangeRecord] = []
        # With -z, paths are NUL-terminated and never quoted
        for entry in result.stdout.split("\0"):
            if not entry:
                continue
            parts = entry.split("\t", 2)
            if len(parts) != 3:
                logger.debug("Skipping unparsable numstat entry: %r", entry)
                continue
            insertions, deletions, file_path = parts
            # Binary files are reported as "-\t-\t<path>"
            binary = insertions == "-" and deletions == "-"
            records.append(
                ChangeRecord(
                    file=file_path,
                    insertions=0 if binary else int(insertions),
                    deletions=0 if binary else int(deletions),
                    binary=binary,
                )
            )

        return tuple(records)

    def get_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the pending diff of a single file.

        Args:
            repo_path: Path inside the git working tree
            file_path: Path to the file relative to repository root

        Returns:
            Diff content for the specific file

        Raises:
            DiffUnavailableError: If git fails to produce the diff, or produces
                none for a file it reported as changed
        """
        try:
            # numstat paths are relative to the top level, not to repo_path,
            # and must not be read as globs
            result = self._run_git(
                ["diff", "--no-color", "--no-ext-diff", "--", f":(top,literal){file_path}"],
                repo_path,
            )
        except (subprocess.CalledProcessError, UnicodeDecodeError) as e:
            error_msg = getattr(e, "stderr", None) or str(e)
            raise DiffUnavailableError(
                f"Failed to get file diff for {file_path}: {error_msg}"
            ) from e

        if not result.stdout:
            raise DiffUnavailableError(f"Git returned no diff for changed file {file_path}")
        return result.stdout

    @staticmethod
    def _run_git(
        args: list[str], repo_path: Path, check: bool = True
    ) -> subprocess.CompletedProcess[str]:
        """Run a git command inside the repository."""
        logger.debug("Running git %s in %s", " ".join(args), repo_path)
        return subprocess.run(
            ["git", *args],
            cwd=repo_path,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
        )
