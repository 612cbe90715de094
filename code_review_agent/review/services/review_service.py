"""Review service relaying the agent's output."""

import logging
import sys
from typing import TextIO

from code_review_agent.review.repositories.interfaces import ReviewAgentRepository

logger = logging.getLogger(__name__)


def build_review_prompt(target_dir: str) -> str:
    """Render the fixed instruction asking for a review of a directory."""
    return (
        f"Review the code changes in '{target_dir}' directory, "
        "make your reviews and suggestions file by file"
    )


class ReviewService:
    """Service for running reviews and relaying the generated text."""

    def __init__(self, review_agent: ReviewAgentRepository) -> None:
        """
        Initialize ReviewService.

        Args:
            review_agent: Agent generating the review
        """
        self._review_agent = review_agent

    def relay(self, prompt: str, out: TextIO | None = None) -> str:
        """
        Run a review and write its text to a stream as it is generated.

        Args:
            prompt: Instruction naming what to review
            out: Stream receiving the text. Defaults to sys.stdout

        Returns:
            The full text of the review

        Raises:
            RuntimeError: If the agent fails. Text written before the failure
                stays written.
        """
        stream = out or sys.stdout
        chunks: list[str] = []
        for chunk in self._review_agent.stream_review(prompt):
            stream.write(chunk)
            stream.flush()
            chunks.append(chunk)

        review = "".join(chunks)
        logger.info("Relayed review of %d characters", len(review))
        return review

    def review_directory(self, target_dir: str, out: TextIO | None = None) -> str:
        """
        Review the pending changes of a directory.

        Args:
            target_dir: Directory to review
            out: Stream receiving the text. Defaults to sys.stdout

        Returns:
            The full text of the review
        """
        return self.relay(build_review_prompt(target_dir), out)
