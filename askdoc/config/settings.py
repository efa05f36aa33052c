"""Configuration management for askdoc."""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into environment variables may carry BOM characters
    that break HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    embedding_model: str = "gemini-embedding-001"
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.1
    llm_max_tokens: int = 1024

    # RAG settings
    chunk_size: int = 1000
    chunk_overlap: int = 200
    top_k_results: int = 4
    embedding_batch_size: int = 100

    # External call timeouts (seconds)
    embedding_timeout_seconds: float = 30.0
    generation_timeout_seconds: float = 60.0

    # API
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local dev
        "http://localhost:5173",  # Vite dev server
    ]

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    debug: bool = False

    @model_validator(mode="after")
    def check_chunking(self) -> "Settings":
        """Reject chunking values that could never make progress."""
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.chunk_overlap < 0:
            raise ValueError("chunk_overlap must be non-negative")
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be less than chunk_size")
        if self.top_k_results < 1:
            raise ValueError("top_k_results must be at least 1")
        return self


# Global settings instance
settings = Settings()
