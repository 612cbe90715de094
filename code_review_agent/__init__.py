"""Code review agent: reviews pending git changes with an LLM."""
