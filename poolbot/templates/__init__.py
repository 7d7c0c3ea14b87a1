"""Message templates."""

from poolbot.templates.messages import (
    ERROR_GENERIC,
    ERROR_INVALID_ADDRESS,
    ERROR_INVALID_INPUT,
    ERROR_LINK_BLOCKED,
    ERROR_NETWORK_UNAVAILABLE,
    HELP,
    PROMPT_OPEN_POOL_CREATION,
    PROMPT_VISIT_RAYDIUM,
    WELCOME,
)

__all__ = [
    "WELCOME",
    "HELP",
    "PROMPT_OPEN_POOL_CREATION",
    "PROMPT_VISIT_RAYDIUM",
    "ERROR_GENERIC",
    "ERROR_INVALID_ADDRESS",
    "ERROR_INVALID_INPUT",
    "ERROR_LINK_BLOCKED",
    "ERROR_NETWORK_UNAVAILABLE",
]
