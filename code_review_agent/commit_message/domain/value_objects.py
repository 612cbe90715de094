"""Value objects for the commit message domain."""

from dataclasses import dataclass
from enum import Enum

from code_review_agent.git.domain.value_objects import ChangeRecord

DEFAULT_MAX_LENGTH = 72

NO_CHANGES_MESSAGE = "No changes detected"


class ChangeKind(str, Enum):
    """Kind of change a file went through, judged from its line counts."""

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


# First non-empty kind in this order names the commit message headline
HEADLINE_PRECEDENCE: tuple[ChangeKind, ...] = (
    ChangeKind.ADDED,
    ChangeKind.DELETED,
    ChangeKind.MODIFIED,
)

HEADLINE_VERBS: dict[ChangeKind, str] = {
    ChangeKind.ADDED: "Add",
    ChangeKind.DELETED: "Remove",
    ChangeKind.MODIFIED: "Update",
}


@dataclass(frozen=True)
class ChangeSummaryInput:
    """Input data for commit message summarization."""

    records: tuple[ChangeRecord, ...]
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        """Validate the length bound."""
        if self.max_length <= 0:
            raise ValueError(f"max_length must be positive, got {self.max_length}")
