from .gemini_embedding_adapter import GeminiEmbeddingAdapter

__all__ = ["GeminiEmbeddingAdapter"]
