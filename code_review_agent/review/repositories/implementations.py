"""Concrete implementations of review agents using LangChain."""

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from code_review_agent.review.domain.value_objects import AgentConfig
from code_review_agent.review.repositories.base_langchain_agent import (
    BaseLangChainReviewAgent,
)

if TYPE_CHECKING:
    from langchain_core.tools import BaseTool

DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"

DEFAULT_OPENAI_MODEL = "gpt-4-turbo-preview"


def _client_kwargs(config: AgentConfig, default_model: str) -> dict[str, Any]:
    """Build the chat model arguments shared by every provider."""
    kwargs: dict[str, Any] = {
        "model_name": config.model_name or default_model,
        "temperature": config.temperature,
    }
    # Without an explicit key the provider SDK reads it from the environment
    if config.api_key:
        kwargs["api_key"] = config.api_key
    return kwargs


class LangChainClaudeReviewAgent(BaseLangChainReviewAgent):
    """LangChain implementation using Claude for code review."""

    def __init__(
        self,
        config: AgentConfig,
        tools: Sequence["BaseTool"],
        template_path: Path | None = None,
    ) -> None:
        """
        Initialize the Claude agent.

        Args:
            config: Agent configuration. The model defaults to claude-3-5-sonnet-20241022
            tools: Tools the model may call
            template_path: Optional path to a custom system prompt file
        """
        self._llm = ChatAnthropic(  # type: ignore[call-arg]
            **_client_kwargs(config, DEFAULT_ANTHROPIC_MODEL)
        )

        super().__init__(tools, max_steps=config.max_steps, template_path=template_path)


class LangChainOpenAIReviewAgent(BaseLangChainReviewAgent):
    """LangChain implementation using OpenAI for code review."""

    def __init__(
        self,
        config: AgentConfig,
        tools: Sequence["BaseTool"],
        template_path: Path | None = None,
    ) -> None:
        """
        Initialize the OpenAI agent.

        Args:
            config: Agent configuration. The model defaults to gpt-4-turbo-preview
            tools: Tools the model may call
            template_path: Optional path to a custom system prompt file
        """
        self._llm = ChatOpenAI(  # type: ignore[call-arg]
            **_client_kwargs(config, DEFAULT_OPENAI_MODEL)
        )

        super().__init__(tools, max_steps=config.max_steps, template_path=template_path)
