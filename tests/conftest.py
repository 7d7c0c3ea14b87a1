"""
Pytest configuration and fixtures.

Provides reusable test fixtures for:
- Deterministic confirmation strategies and a recording navigator
- Link guard and pool creation flow
- Sample addresses
- Mock aiogram messages
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from poolbot.config.settings import Settings
from poolbot.core.models import ConfirmationRequest
from poolbot.handlers.confirmation import ConfirmationBroker
from poolbot.services.factory import ServiceFactory
from poolbot.services.link_guard import OutboundLinkGuard
from poolbot.services.pool_flow import PoolCreationFlow

# =============================================================================
# Collaborator Fakes
# =============================================================================


class FixedConfirmation:
    """ConfirmationStrategy that always gives the same answer."""

    def __init__(self, accepted: bool):
        self.accepted = accepted
        self.requests: list[ConfirmationRequest] = []

    async def confirm(self, request: ConfirmationRequest) -> bool:
        self.requests.append(request)
        return self.accepted


class RecordingNavigator:
    """Navigator that remembers every URL it was asked to open."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    async def open(self, url: str) -> None:
        self.opened.append(url)


class MockMessage:
    """Mock aiogram Message object."""

    def __init__(self, text: str | None = "test message", chat_id: int = 42):
        self.text = text
        self.chat = MagicMock()
        self.chat.id = chat_id
        self.from_user = MagicMock()
        self.from_user.id = 12345
        self.from_user.username = "testuser"
        self.answer = AsyncMock()


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def accepting() -> FixedConfirmation:
    """Confirmation that always says yes."""
    return FixedConfirmation(accepted=True)


@pytest.fixture
def declining() -> FixedConfirmation:
    """Confirmation that always says no."""
    return FixedConfirmation(accepted=False)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def accepting_guard(
    accepting: FixedConfirmation,
    navigator: RecordingNavigator,
) -> OutboundLinkGuard:
    """Guard whose user accepts every question."""
    return OutboundLinkGuard(accepting, navigator)


@pytest.fixture
def declining_guard(
    declining: FixedConfirmation,
    navigator: RecordingNavigator,
) -> OutboundLinkGuard:
    """Guard whose user declines every question."""
    return OutboundLinkGuard(declining, navigator)


@pytest.fixture
def accepting_flow(accepting_guard: OutboundLinkGuard) -> PoolCreationFlow:
    """Flow with default settings and an accepting user."""
    return PoolCreationFlow(accepting_guard)


@pytest.fixture
def declining_flow(declining_guard: OutboundLinkGuard) -> PoolCreationFlow:
    """Flow with default settings and a declining user."""
    return PoolCreationFlow(declining_guard)


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the local .env file."""
    return Settings(telegram_bot_token="test-token", _env_file=None)


@pytest.fixture
def factory(settings: Settings) -> ServiceFactory:
    return ServiceFactory(settings)


@pytest.fixture
def broker() -> ConfirmationBroker:
    return ConfirmationBroker()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def valid_mint_address() -> str:
    """Smallest non-zero public key (32 characters)."""
    return "11111111111111111111111111111112"


@pytest.fixture
def usdc_address() -> str:
    """Valid Solana token address (USDC)."""
    return "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


@pytest.fixture
def invalid_addresses() -> list[str]:
    """List of invalid addresses for testing."""
    return [
        "",  # Empty
        "   ",  # Whitespace
        "abc",  # Too short
        "0x742d35Cc6634C0532925a3b844Bc9e7595f5bEb2",  # Ethereum
        "So11111111111111111111111111111111111111112!",  # Invalid char
        "O0Il" * 11,  # Invalid base58 chars
        "1" * 32,  # Zero address
        "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v\n",  # Trailing newline
    ]
