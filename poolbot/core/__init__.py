"""
Core module - models, protocols, registry and exceptions.

This module contains the fundamental building blocks of the application:
- Data models (Pydantic)
- Protocol definitions (interfaces)
- Trusted host registry
- Custom exceptions
"""

from poolbot.core.exceptions import (
    BlockedNavigationError,
    InvalidAddressError,
    PoolBotError,
    UnsupportedNetworkError,
    ValidationError,
)
from poolbot.core.models import (
    AddressStrictness,
    ConfirmationRequest,
    Network,
    Notice,
    Severity,
    ValidationResult,
)
from poolbot.core.protocols import ConfirmationStrategy, Navigator
from poolbot.core.registry import TRUSTED_HOSTS, PoolEndpoint, TrustedHostRegistry

__all__ = [
    # Exceptions
    "PoolBotError",
    "ValidationError",
    "InvalidAddressError",
    "UnsupportedNetworkError",
    "BlockedNavigationError",
    # Models
    "Network",
    "AddressStrictness",
    "Severity",
    "ValidationResult",
    "ConfirmationRequest",
    "Notice",
    # Registry
    "PoolEndpoint",
    "TrustedHostRegistry",
    "TRUSTED_HOSTS",
    # Protocols
    "ConfirmationStrategy",
    "Navigator",
]
