"""Prompt templates shipped with the review agent."""

from pathlib import Path

DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "system_prompt.md"
