"""Value objects for the review domain."""

from dataclasses import dataclass

DEFAULT_MAX_STEPS = 10

DEFAULT_TEMPERATURE = 0.3


@dataclass(frozen=True)
class AgentConfig:
    """Process-wide configuration of the review agent.

    Built once at startup and passed to the components that need it.

    Attributes:
        provider: LLM provider name (anthropic, claude, openai or gpt)
        model_name: Model to use. None selects the provider default
        api_key: Provider API key. None lets the provider SDK look it up
        max_steps: Maximum number of model steps in one review
        temperature: Sampling temperature of the model
        target_dir: Directory whose pending changes are reviewed
        log_level: Name of the logging level
    """

    provider: str = "anthropic"
    model_name: str | None = None
    api_key: str | None = None
    max_steps: int = DEFAULT_MAX_STEPS
    temperature: float = DEFAULT_TEMPERATURE
    target_dir: str = "."
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not self.provider:
            raise ValueError("LLM provider cannot be empty")

        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")

        if not self.target_dir:
            raise ValueError("Target directory cannot be empty")
