"""Ports the core depends on; adapters implement them."""

from .embedding_port import EmbeddingPort
from .llm_port import LLMPort

__all__ = ["EmbeddingPort", "LLMPort"]
