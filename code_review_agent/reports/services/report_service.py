"""Service for writing review reports."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from code_review_agent.reports.domain.value_objects import (
    REPORT_TITLE,
    MarkdownReport,
    MarkdownReportRequest,
)
from code_review_agent.reports.repositories.interfaces import ReportRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format a moment as an ISO-8601 UTC timestamp with millisecond precision."""
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_header(moment: datetime) -> str:
    """Render the header placed above every report body."""
    return f"# {REPORT_TITLE}\n\n*Generated on: {format_timestamp(moment)}*\n\n---\n\n"


class ReportService:
    """Service for orchestrating report writing."""

    def __init__(
        self,
        report_repository: ReportRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the report service.

        Args:
            report_repository: Repository for persisting reports
            clock: Source of the current time for report headers
        """
        self._report_repository = report_repository
        self._clock = clock

    def write_report(
        self, content: str, filename: str, directory: str | Path = "."
    ) -> MarkdownReport:
        """Write a markdown report with a generated header.

        Any existing file at the target path is overwritten.

        Args:
            content: Markdown body of the report
            filename: Name of the file. ".md" is appended when missing
            directory: Directory to write the file to, created when missing

        Returns:
            The written report

        Raises:
            ValueError: If content or filename is empty
            ReportWriteError: If the directory or the file cannot be written
        """
        request = MarkdownReportRequest(
            content=content, filename=filename, directory=Path(directory)
        )

        self._report_repository.ensure_directory(request.directory)

        full_content = render_header(self._clock()) + request.content
        file_path = request.file_path
        self._report_repository.write_text(file_path, full_content)

        logger.info("Wrote review report to %s", file_path)
        return MarkdownReport(
            file_path=file_path,
            content=full_content,
            message=f"Markdown file written successfully to {file_path}",
        )
