"""Generate new code from a prompt or refactor existing code with an AI chat model."""

__version__ = "0.1.0"