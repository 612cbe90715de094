"""LLM agent repositories."""
