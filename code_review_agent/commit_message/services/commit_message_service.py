"""Heuristic commit message generation from pending changes."""

import logging
from collections.abc import Sequence
from pathlib import Path

from code_review_agent.commit_message.domain.value_objects import (
    DEFAULT_MAX_LENGTH,
    HEADLINE_PRECEDENCE,
    HEADLINE_VERBS,
    NO_CHANGES_MESSAGE,
    ChangeKind,
    ChangeSummaryInput,
)
from code_review_agent.git.domain.value_objects import ChangeRecord
from code_review_agent.git.services.file_filter_service import FileFilterService
from code_review_agent.git.services.git_service import GitService

logger = logging.getLogger(__name__)

# Buckets larger than this are reported by count only
MAX_LISTED_FILES = 3

ELLIPSIS = "..."


def classify(record: ChangeRecord) -> ChangeKind:
    """Classify a change record by its insertion and deletion counts."""
    if record.insertions > 0 and record.deletions == 0:
        return ChangeKind.ADDED
    if record.insertions == 0 and record.deletions > 0:
        return ChangeKind.DELETED
    if record.insertions > 0 and record.deletions > 0:
        return ChangeKind.MODIFIED
    return ChangeKind.UNCHANGED


def summarize(
    records: Sequence[ChangeRecord],
    max_length: int = DEFAULT_MAX_LENGTH,
    file_filter_service: FileFilterService | None = None,
) -> str:
    """
    Render a single-line commit message for a set of changes.

    The headline names the first non-empty bucket of HEADLINE_PRECEDENCE,
    lists its files when there are at most MAX_LISTED_FILES of them, and is
    followed by the line totals of every record.

    Args:
        records: Changed files with their line counts
        max_length: Maximum length of the message
        file_filter_service: Filter for excluded files. Defaults to FileFilterService()

    Returns:
        The commit message, or NO_CHANGES_MESSAGE when there is nothing to report

    Raises:
        ValueError: If max_length is not positive
    """
    summary_input = ChangeSummaryInput(records=tuple(records), max_length=max_length)
    file_filter = file_filter_service or FileFilterService()

    changed_files = [
        record for record in summary_input.records if not file_filter.is_excluded(record.file)
    ]
    if not changed_files:
        return NO_CHANGES_MESSAGE

    buckets: dict[ChangeKind, list[ChangeRecord]] = {kind: [] for kind in ChangeKind}
    for record in changed_files:
        buckets[classify(record)].append(record)

    message = ""
    for kind in HEADLINE_PRECEDENCE:
        bucket = buckets[kind]
        if bucket:
            message = _headline(HEADLINE_VERBS[kind], bucket)
            break

    total_insertions = sum(record.insertions for record in changed_files)
    total_deletions = sum(record.deletions for record in changed_files)
    if total_insertions != 0 or total_deletions != 0:
        message += f" (+{total_insertions} -{total_deletions})"

    return _truncate(message, summary_input.max_length)


def _headline(verb: str, bucket: list[ChangeRecord]) -> str:
    count = len(bucket)
    headline = f"{verb} {count} file{'' if count == 1 else 's'}"
    if count <= MAX_LISTED_FILES:
        headline += ": " + ", ".join(record.file for record in bucket)
    return headline


def _truncate(message: str, max_length: int) -> str:
    if len(message) <= max_length:
        return message
    return (message[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS)[:max_length]


class CommitMessageService:
    """Service for suggesting commit messages for a working tree."""

    def __init__(self, git_service: GitService) -> None:
        """
        Initialize CommitMessageService.

        Args:
            git_service: Service for reading pending changes
        """
        self._git_service = git_service

    def generate_commit_message(
        self, root_dir: str | Path, max_length: int = DEFAULT_MAX_LENGTH
    ) -> str:
        """
        Suggest a commit message for the pending changes of a working tree.

        Args:
            root_dir: Directory inside the git working tree
            max_length: Maximum length of the message

        Returns:
            The suggested commit message

        Raises:
            RepositoryNotFoundError: If root_dir is not inside a working tree
        """
        records = self._git_service.list_changed_files(root_dir)
        message = summarize(records, max_length=max_length)
        logger.info("Suggested commit message for %s: %s", root_dir, message)
        return message
