"""
Application settings loaded from environment variables.

Uses pydantic-settings for automatic loading from .env file.
All settings have safe defaults for development mode.

The trusted host list is intentionally not a setting: it lives in
poolbot.core.registry and cannot be changed without a code change.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from poolbot.core.models import AddressStrictness, Network


class Settings(BaseSettings):
    """
    Application configuration.

    All values are loaded from environment variables.
    Copy .env.example to .env and fill in your values.

    Attributes:
        telegram_bot_token: Bot token from @BotFather (required to run the bot)
        environment: Runtime environment (development/production)
        log_level: Logging verbosity
        default_network: Cluster for pool creation links (devnet unless set)
        address_strictness: structural (length + alphabet) or decoded (32-byte pubkey)
    """

    telegram_bot_token: str = ""

    # Environment
    environment: Literal["development", "production"] = "development"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Pool creation
    default_network: Network = Network.DEVNET
    address_strictness: AddressStrictness = AddressStrictness.STRUCTURAL

    # Pydantic settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Case-insensitive env var names
        case_sensitive=False,
        # Don't fail if .env doesn't exist
        env_ignore_empty=True,
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to avoid re-reading .env file on every call.

    Returns:
        Settings instance with all configuration values.
    """
    return Settings()
