"""Tests for FileFilterService."""

import pytest

from code_review_agent.git.services.file_filter_service import FileFilterService


class TestFileFilterService:
    """Exclusion of build output and lock files."""

    @pytest.mark.parametrize(
        "file_path",
        ["dist", "bun.lock", "dist/index.js", "packages/web/dist/app.js", "web/bun.lock"],
    )
    def test_excluded_paths(self, file_path: str) -> None:
        assert FileFilterService().is_excluded(file_path)

    @pytest.mark.parametrize(
        "file_path",
        ["src/app.ts", "distribution.md", "bun.lockb", "docs/dist.md", "package.json"],
    )
    def test_reviewed_paths(self, file_path: str) -> None:
        assert not FileFilterService().is_excluded(file_path)
