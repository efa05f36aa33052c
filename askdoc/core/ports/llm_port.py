"""LLM Port Interface."""

from abc import ABC, abstractmethod


class LLMPort(ABC):
    """Abstract interface for LLM providers."""

    model_name: str = "unknown"

    @abstractmethod
    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        """Generate a response from the LLM."""
        ...
