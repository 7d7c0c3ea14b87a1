"""
Error presenter.

Maps any error value plus a context tag to one of a few fixed sentences.
The raw error is never converted to text: no str(), no repr(), no
traceback, so internal details cannot leak into a user message.

Mapping priority:
1. ValidationError (incl. InvalidAddressError) → invalid address
2. BlockedNavigationError → link blocked
3. UnsupportedNetworkError → network unavailable
4. Anything else → chosen by context, generic fallback
"""

from poolbot.core.exceptions import (
    BlockedNavigationError,
    UnsupportedNetworkError,
    ValidationError,
)
from poolbot.templates.messages import (
    ERROR_GENERIC,
    ERROR_INVALID_ADDRESS,
    ERROR_INVALID_INPUT,
    ERROR_LINK_BLOCKED,
    ERROR_NETWORK_UNAVAILABLE,
)

CONTEXT_VALIDATION = "validation"
CONTEXT_NETWORK = "network"
CONTEXT_NAVIGATION = "navigation"

KNOWN_ERRORS: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, ERROR_INVALID_ADDRESS),
    (BlockedNavigationError, ERROR_LINK_BLOCKED),
    (UnsupportedNetworkError, ERROR_NETWORK_UNAVAILABLE),
)

CONTEXT_FALLBACKS = {
    CONTEXT_VALIDATION: ERROR_INVALID_INPUT,
    CONTEXT_NETWORK: ERROR_NETWORK_UNAVAILABLE,
    CONTEXT_NAVIGATION: ERROR_LINK_BLOCKED,
}


def present_error(error: object, context: str) -> str:
    """
    Convert an error into a safe user-facing sentence.

    Args:
        error: Anything that was raised or caught (exception, string, None...)
        context: Where it happened ("validation", "network", "navigation", ...)

    Returns:
        One of the ERROR_* templates, never empty
    """
    for error_type, message in KNOWN_ERRORS:
        if isinstance(error, error_type):
            return message

    if isinstance(context, str):
        return CONTEXT_FALLBACKS.get(context, ERROR_GENERIC)

    return ERROR_GENERIC
