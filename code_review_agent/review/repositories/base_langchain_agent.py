"""Base class for LangChain-based review agents."""

import json
import logging
from abc import ABC
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from langchain_core.messages import (
    AIMessageChunk,
    BaseMessage,
    HumanMessage,
    SystemMessage,
    ToolMessage,
)

from code_review_agent.review.domain.value_objects import DEFAULT_MAX_STEPS
from code_review_agent.review.repositories.interfaces import ReviewAgentRepository
from code_review_agent.review.templates import DEFAULT_TEMPLATE_PATH

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel
    from langchain_core.tools import BaseTool

logger = logging.getLogger(__name__)


class BaseLangChainReviewAgent(ReviewAgentRepository, ABC):
    """Base class for LangChain-based code review agents.

    The model is given the tools and asked to review. Each step streams one
    model response. When the response requests tool calls, the tools are run
    and their results are fed back before the next step. The review ends at
    the first response without tool calls, or after max_steps steps.
    """

    def __init__(
        self,
        tools: Sequence["BaseTool"],
        max_steps: int = DEFAULT_MAX_STEPS,
        template_path: Path | None = None,
    ) -> None:
        """Initialize the base agent with common configuration.

        Args:
            tools: Tools the model may call
            max_steps: Maximum number of model steps in one review
            template_path: Path to a custom system prompt file.
                          Defaults to the built-in prompt.
        """
        if max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {max_steps}")

        self._tools = list(tools)
        self._tools_by_name = {tool.name: tool for tool in self._tools}
        self._max_steps = max_steps
        self._template_path = template_path or DEFAULT_TEMPLATE_PATH
        self._system_prompt = self._load_system_prompt()
        self._llm: BaseChatModel  # Set by subclasses

    def _load_system_prompt(self) -> str:
        """Load the system prompt from file.

        Returns:
            The content of the template file.

        Raises:
            FileNotFoundError: If the template file does not exist.
            RuntimeError: If the template file cannot be read.
        """
        try:
            return self._template_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(
                f"System prompt file not found: {self._template_path}"
            ) from None
        except Exception as e:
            raise RuntimeError(
                f"Failed to read system prompt file: {self._template_path}: {e}"
            ) from e

    def stream_review(self, prompt: str) -> Iterator[str]:
        """
        Run a review and stream the generated text.

        Args:
            prompt: Instruction naming what to review

        Returns:
            Iterator over text chunks, in the order the model produces them

        Raises:
            RuntimeError: If the LLM API call fails. Chunks yielded before the
                failure are not taken back.
        """
        llm_with_tools = self._llm.bind_tools(self._tools)
        messages: list[BaseMessage] = [
            SystemMessage(content=self._system_prompt),
            HumanMessage(content=prompt),
        ]

        for step in range(1, self._max_steps + 1):
            response: AIMessageChunk | None = None
            try:
                for chunk in llm_with_tools.stream(messages):
                    response = chunk if response is None else response + chunk
                    text = self._extract_text(chunk.content)
                    if text:
                        yield text
            except Exception as e:
                raise RuntimeError(f"Failed to generate review: {str(e)}") from e

            if response is None:
                logger.debug("Model returned an empty response at step %d", step)
                return

            messages.append(response)
            tool_calls = response.tool_calls
            if not tool_calls:
                logger.debug("Review finished after %d step(s)", step)
                return

            for tool_call in tool_calls:
                messages.append(self._run_tool_call(tool_call))

        logger.info("Review stopped after reaching the limit of %d steps", self._max_steps)

    def _run_tool_call(self, tool_call: dict[str, Any]) -> ToolMessage:
        """Run a single tool call and wrap its outcome for the model."""
        tool_name = tool_call.get("name", "")
        tool_args = tool_call.get("args", {})
        tool_call_id = tool_call.get("id", "") or ""

        tool = self._tools_by_name.get(tool_name)
        if tool is None:
            logger.warning("Model requested unknown tool %r", tool_name)
            return ToolMessage(content=f"Unknown tool: {tool_name}", tool_call_id=tool_call_id)

        logger.debug("Running tool %s with %s", tool_name, tool_args)
        try:
            result = tool.invoke(tool_args)
        except Exception as e:
            logger.warning("Tool %s failed: %s", tool_name, e)
            return ToolMessage(
                content=f"Error running {tool_name}: {str(e)}",
                tool_call_id=tool_call_id,
            )

        content = result if isinstance(result, str) else json.dumps(result, ensure_ascii=False)
        return ToolMessage(content=content, tool_call_id=tool_call_id)

    @staticmethod
    def _extract_text(content: str | list[Any]) -> str:
        """Extract the text of a streamed chunk."""
        if isinstance(content, str):
            return content
        # Providers such as Anthropic stream a list of content blocks
        return "".join(
            item if isinstance(item, str) else str(item.get("text", ""))
            for item in content
            if isinstance(item, str) or item.get("type", "text") == "text"
        )
