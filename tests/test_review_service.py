"""Tests for ReviewService."""

import io
from collections.abc import Iterator

import pytest

from code_review_agent.review.repositories.interfaces import ReviewAgentRepository
from code_review_agent.review.services.review_service import (
    ReviewService,
    build_review_prompt,
)


class StubReviewAgent(ReviewAgentRepository):
    """Agent yielding fixed chunks, optionally failing afterwards."""

    def __init__(self, chunks: list[str], error: Exception | None = None) -> None:
        self.chunks = chunks
        self.error = error
        self.prompts: list[str] = []

    def stream_review(self, prompt: str) -> Iterator[str]:
        self.prompts.append(prompt)
        yield from self.chunks
        if self.error is not None:
            raise self.error


class TestBuildReviewPrompt:
    """The fixed review instruction."""

    def test_names_the_directory(self) -> None:
        assert build_review_prompt("../my-agent") == (
            "Review the code changes in '../my-agent' directory, "
            "make your reviews and suggestions file by file"
        )


class TestReviewService:
    """Relaying the review to a stream."""

    def test_relay_writes_chunks_and_returns_text(self) -> None:
        agent = StubReviewAgent(["## a.py\n", "- Looks fine\n"])
        out = io.StringIO()

        review = ReviewService(agent).relay("Review", out)

        assert review == "## a.py\n- Looks fine\n"
        assert out.getvalue() == review
        assert agent.prompts == ["Review"]

    def test_failure_keeps_relayed_text(self) -> None:
        agent = StubReviewAgent(["Partial"], error=RuntimeError("Failed to generate review: 401"))
        out = io.StringIO()

        with pytest.raises(RuntimeError, match="401"):
            ReviewService(agent).relay("Review", out)
        assert out.getvalue() == "Partial"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ReviewService(StubReviewAgent(["hello"])).relay("Review")

        assert capsys.readouterr().out == "hello"

    def test_review_directory(self) -> None:
        agent = StubReviewAgent(["ok"])

        ReviewService(agent).review_directory("src", io.StringIO())

        assert agent.prompts == [build_review_prompt("src")]
