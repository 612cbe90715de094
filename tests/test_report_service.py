"""Tests for ReportService."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from code_review_agent.reports.domain.exceptions import ReportWriteError
from code_review_agent.reports.repositories.implementations import (
    FileSystemReportRepositoryImpl,
)
from code_review_agent.reports.services.report_service import (
    ReportService,
    format_timestamp,
)

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

HEADER = "# Code Review Report\n\n*Generated on: 2025-01-01T12:00:00.000Z*\n\n---\n\n"


@pytest.fixture
def report_service() -> ReportService:
    return ReportService(FileSystemReportRepositoryImpl(), clock=lambda: FIXED_NOW)


class TestFormatTimestamp:
    """ISO-8601 UTC timestamps."""

    def test_utc(self) -> None:
        moment = datetime(2025, 3, 4, 5, 6, 7, 890123, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2025-03-04T05:06:07.890Z"

    def test_converts_to_utc(self) -> None:
        moment = datetime(2025, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2025-01-01T12:00:00.000Z"


class TestReportService:
    """Writing reports to disk."""

    def test_writes_header_and_content(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        report = report_service.write_report("## Findings\n- ok", "review", tmp_path)

        assert report.file_path == tmp_path / "review.md"
        assert report.content == HEADER + "## Findings\n- ok"
        assert report.file_path.read_text(encoding="utf-8") == HEADER + "## Findings\n- ok"
        assert report.message == f"Markdown file written successfully to {tmp_path / 'review.md'}"

    def test_extension_is_not_duplicated(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        report = report_service.write_report("body", "notes.md", tmp_path)

        assert report.file_path.name == "notes.md"
        assert not (tmp_path / "notes.md.md").exists()

    def test_default_directory_is_current_directory(
        self, report_service: ReportService, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        report = report_service.write_report("body", "notes")

        assert report.file_path == Path(".") / "notes.md"
        assert (tmp_path / "notes.md").read_text(encoding="utf-8") == HEADER + "body"

    def test_creates_missing_directories(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        directory = tmp_path / "reports" / "2025" / "01"

        report = report_service.write_report("body", "notes", str(directory))

        assert report.file_path == directory / "notes.md"
        assert report.file_path.exists()

    def test_overwrites_existing_report(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        report_service.write_report("first", "notes", tmp_path)
        report_service.write_report("second", "notes", tmp_path)

        content = (tmp_path / "notes.md").read_text(encoding="utf-8")
        assert content.count("# Code Review Report") == 1
        assert content.endswith("second")
        assert "first" not in content

    def test_content_is_written_verbatim(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        body = "Résumé ✓\n\n```python\nprint('hi')\n```\n"

        report = report_service.write_report(body, "notes", tmp_path)

        assert report.file_path.read_text(encoding="utf-8").endswith(body)

    def test_to_dict(self, report_service: ReportService, tmp_path: Path) -> None:
        report = report_service.write_report("body", "notes", tmp_path)

        assert report.to_dict() == {
            "success": True,
            "filePath": str(tmp_path / "notes.md"),
            "message": report.message,
        }

    @pytest.mark.parametrize(("content", "filename"), [("", "notes"), ("body", "")])
    def test_empty_fields_are_rejected(
        self, report_service: ReportService, tmp_path: Path, content: str, filename: str
    ) -> None:
        with pytest.raises(ValueError):
            report_service.write_report(content, filename, tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_directory_creation_failure(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(ReportWriteError):
            report_service.write_report("body", "notes", blocker)

    def test_write_failure_keeps_created_directory(
        self, report_service: ReportService, tmp_path: Path
    ) -> None:
        directory = tmp_path / "out"
        # A directory where the file should go makes the write fail
        (directory / "notes.md").mkdir(parents=True)

        with pytest.raises(ReportWriteError):
            report_service.write_report("body", "notes", directory)
        assert directory.is_dir()
