"""Factory for creating the configuration and the review agent."""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from code_review_agent.review.domain.value_objects import (
    DEFAULT_MAX_STEPS,
    AgentConfig,
)
from code_review_agent.review.repositories.implementations import (
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_OPENAI_MODEL,
    LangChainClaudeReviewAgent,
    LangChainOpenAIReviewAgent,
)
from code_review_agent.review.repositories.interfaces import ReviewAgentRepository

if TYPE_CHECKING:
    from langchain_core.tools import BaseTool

ANTHROPIC_PROVIDERS = ("anthropic", "claude")

OPENAI_PROVIDERS = ("openai", "gpt")


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of code_review_agent package)
    project_root = Path(__file__).parent.parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


def _parse_max_steps(value: str | None) -> int:
    if value is None or not value.strip():
        return DEFAULT_MAX_STEPS
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"REVIEW_MAX_STEPS must be an integer, got {value!r}") from None


def load_agent_config() -> AgentConfig:
    """
    Build the agent configuration from the environment and the .env file.

    The API key is not required here: when it is missing, the provider SDK
    reports the authentication error.

    Returns:
        The agent configuration

    Raises:
        ValueError: If REVIEW_MAX_STEPS is not a positive integer
    """
    _load_env_file()

    provider = os.getenv("LLM_PROVIDER", "anthropic").lower()

    if provider in ANTHROPIC_PROVIDERS:
        model_name: str | None = os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL)
        api_key = os.getenv("ANTHROPIC_API_KEY")
    elif provider in OPENAI_PROVIDERS:
        model_name = os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)
        api_key = os.getenv("OPENAI_API_KEY")
    else:
        # Rejected by create_review_agent
        model_name = None
        api_key = None

    return AgentConfig(
        provider=provider,
        model_name=model_name,
        api_key=api_key or None,
        max_steps=_parse_max_steps(os.getenv("REVIEW_MAX_STEPS")),
        target_dir=os.getenv("REVIEW_TARGET_DIR") or ".",
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )


def create_review_agent(
    config: AgentConfig, tools: Sequence["BaseTool"]
) -> ReviewAgentRepository:
    """
    Create a review agent instance based on configuration.

    Args:
        config: Agent configuration
        tools: Tools the agent may call

    Returns:
        Review agent instance (Claude or OpenAI)

    Raises:
        ValueError: If the provider is invalid
    """
    provider = config.provider.lower()

    if provider in ANTHROPIC_PROVIDERS:
        return LangChainClaudeReviewAgent(config, tools)
    elif provider in OPENAI_PROVIDERS:
        return LangChainOpenAIReviewAgent(config, tools)
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. "
            "Supported values: 'anthropic', 'claude', 'openai', 'gpt'"
        )
