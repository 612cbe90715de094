"""Repository interfaces for LLM review agents."""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class ReviewAgentRepository(ABC):
    """Interface for LLM-based code review."""

    @abstractmethod
    def stream_review(self, prompt: str) -> Iterator[str]:
        """
        Run a review and stream the generated text.

        Args:
            prompt: Instruction naming what to review

        Returns:
            Iterator over text chunks, in the order the model produces them
        """
        ...
