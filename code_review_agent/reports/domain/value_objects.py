"""Value objects for the reports domain."""

from dataclasses import dataclass
from pathlib import Path

MARKDOWN_EXTENSION = ".md"

REPORT_TITLE = "Code Review Report"


@dataclass(frozen=True)
class MarkdownReportRequest:
    """Value object representing a report to write.

    Attributes:
        content: Markdown body of the report
        filename: Name of the file, with or without the .md extension
        directory: Directory to write the file to
    """

    content: str
    filename: str
    directory: Path = Path(".")

    def __post_init__(self) -> None:
        """Validate the request."""
        if not self.content:
            raise ValueError("Report content cannot be empty")

        if not self.filename:
            raise ValueError("Report filename cannot be empty")

    @property
    def markdown_filename(self) -> str:
        """Filename with the .md extension appended when missing."""
        if self.filename.endswith(MARKDOWN_EXTENSION):
            return self.filename
        return f"{self.filename}{MARKDOWN_EXTENSION}"

    @property
    def file_path(self) -> Path:
        """Path the report is written to."""
        return Path(self.directory) / self.markdown_filename


@dataclass(frozen=True)
class MarkdownReport:
    """A report that has been written to disk.

    Attributes:
        file_path: Path of the written file
        content: Full content of the file, header included
        message: Human-readable confirmation
    """

    file_path: Path
    content: str
    message: str

    def to_dict(self) -> dict[str, object]:
        """Serialize the report the way the report-writing tool reports it."""
        return {
            "success": True,
            "filePath": str(self.file_path),
            "message": self.message,
        }
