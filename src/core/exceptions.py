"""Exception hierarchy for Blog AI Studio."""


class BlogStudioError(Exception):
    """Base exception for all Blog AI Studio errors."""
    pass


class LLMError(BlogStudioError):
    """LLM API call failed."""
    pass


class ConfigurationError(LLMError):
    """Selected backend has no credential configured. Never retried."""
    pass


class GenerationError(LLMError):
    """Primary and fallback LLM calls both failed."""

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model
