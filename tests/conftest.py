"""
Pytest configuration and shared fixtures.
"""

import re

import pytest

from askdoc.core.ports.embedding_port import EmbeddingPort
from askdoc.core.ports.llm_port import LLMPort
from askdoc.core.services.prompts import FALLBACK_ANSWER


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP/CLI boundary)")


class TokenEmbedder(EmbeddingPort):
    """Deterministic bag-of-words embedder.

    Each distinct lowercase word gets its own dimension, so cosine similarity
    reflects shared vocabulary exactly.
    """

    model_name = "token-embedder"
    DIMENSIONS = 512

    def __init__(self) -> None:
        self.vocabulary: dict[str, int] = {}
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def vectorize(self, text: str) -> list[float]:
        vector = [0.0] * self.DIMENSIONS
        for word in re.findall(r"[a-z0-9]+", text.lower()):
            index = self.vocabulary.setdefault(word, len(self.vocabulary))
            vector[index] += 1.0
        return vector

    async def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vectorize(text)

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self.vectorize(text) for text in texts]

    @property
    def call_count(self) -> int:
        return len(self.document_calls) + len(self.query_calls)


def split_prompt(prompt: str) -> tuple[str, str]:
    """Return the (context, question) sections of a composed prompt."""
    context = prompt.split("Context:\n", 1)[1].split("\n\nQuestion:\n", 1)[0]
    question = prompt.split("Question:\n", 1)[1].split("\n\nAnswer:", 1)[0]
    return context, question


class EchoLLM(LLMPort):
    """Returns the context block it was given."""

    model_name = "echo"

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.temperatures: list[float] = []

    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        self.prompts.append(prompt)
        self.temperatures.append(temperature)
        return split_prompt(prompt)[0]


class GroundedLLM(EchoLLM):
    """Answers with the fallback sentence when no question word is in the context."""

    model_name = "grounded"

    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        await super().generate(prompt, temperature)
        context, question = split_prompt(prompt)
        keywords = [w for w in re.findall(r"[a-z]+", question.lower()) if len(w) > 3]
        if not any(word in context.lower() for word in keywords):
            return FALLBACK_ANSWER
        return f"Found in context: {context}"


@pytest.fixture
def token_embedder():
    return TokenEmbedder()


@pytest.fixture
def echo_llm():
    return EchoLLM()


@pytest.fixture
def grounded_llm():
    return GroundedLLM()


@pytest.fixture
def sky_and_grass():
    """Two-sentence document used by the end-to-end scenarios."""
    return "The sky is blue. The grass is green."


@pytest.fixture
def long_document():
    """Multi-paragraph document long enough to need several chunks."""
    paragraphs = [
        "Photosynthesis converts light energy into chemical energy. Plants use "
        "chlorophyll to absorb sunlight! Oxygen is released as a by-product.",
        "The water cycle moves water between oceans, air and land.\nEvaporation "
        "lifts water vapour. Condensation forms clouds? Precipitation returns "
        "water to the surface.",
        "Plate tectonics explains earthquakes and mountain ranges. The lithosphere "
        "is broken into plates that drift slowly over the mantle.",
        "Supercalifragilisticexpialidociousness-is-an-unbroken-token-that-is-longer-than-a-chunk.",
    ]
    return "\n\n".join(paragraphs)
