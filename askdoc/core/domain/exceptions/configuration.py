"""Configuration-related exceptions for askdoc."""

from .base import AskDocError


class ConfigurationError(AskDocError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "ASK_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "ASK_CFG_002"


class InvalidConfigurationError(ConfigurationError, ValueError):
    """Configuration value is invalid (e.g. chunk overlap >= chunk size)."""

    error_code = "ASK_CFG_003"
