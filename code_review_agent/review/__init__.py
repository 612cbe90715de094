"""Review bounded context: the LLM agent and its tools."""
