"""Value objects for Git domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeRecord:
    """Pending change of a single file in a working tree.

    Attributes:
        file: Path of the file relative to the repository root
        insertions: Number of inserted lines
        deletions: Number of deleted lines
        diff_text: Textual diff of the file (empty when not fetched)
        binary: Whether git reported the file as binary
    """

    file: str
    insertions: int
    deletions: int
    diff_text: str = ""
    binary: bool = False

    def to_dict(self) -> dict[str, str]:
        """Serialize the record the way the change-reading tool reports it."""
        return {"file": self.file, "diff": self.diff_text}
