"""
Custom exceptions for PoolBot application.

Exception hierarchy:
    PoolBotError (base)
    ├── ValidationError - Structurally invalid user input
    │   └── InvalidAddressError - URL builder got an address that fails re-validation
    ├── UnsupportedNetworkError - No trusted endpoint for the requested cluster
    └── BlockedNavigationError - Outbound URL failed the host/scheme checks

Each exception carries a user-friendly message that can be shown to users,
and optionally a technical message for logging. Messages shown to users go
through ErrorPresenter, never through str(error).
"""


class PoolBotError(Exception):
    """
    Base exception for all PoolBot errors.

    Attributes:
        message: User-friendly error message (can be shown to users)
        technical_message: Detailed message for logs (optional)
    """

    def __init__(
        self,
        message: str = "Something went wrong. Please try again.",
        technical_message: str | None = None,
    ):
        self.message = message
        self.technical_message = technical_message or message
        super().__init__(self.technical_message)

    def __str__(self) -> str:
        return self.technical_message


class ValidationError(PoolBotError):
    """
    Raised when input validation fails.

    Examples:
        - Empty token address
        - Characters outside the base58 alphabet
        - Multi-line input
    """

    def __init__(
        self,
        message: str = "Invalid token address.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class InvalidAddressError(ValidationError):
    """
    Raised by the URL builder when the address does not pass re-validation.

    The builder never trusts a caller's earlier validation, so this error
    means a caller passed an unchecked (or since-modified) value.
    """

    def __init__(
        self,
        message: str = "Invalid token address.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class UnsupportedNetworkError(PoolBotError):
    """Raised when the trusted host registry has no endpoint for a network."""

    def __init__(
        self,
        message: str = "This network is not supported.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class BlockedNavigationError(PoolBotError):
    """
    Raised when an outbound URL fails the host or scheme checks.

    Examples:
        - Host not in the allow-list
        - Scheme other than https
        - Produced URL does not point at the registered endpoint host
    """

    def __init__(
        self,
        message: str = "The link was blocked for security reasons.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)
