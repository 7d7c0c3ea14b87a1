"""
Tests for PoolCreationFlow.

Integration tests over validator, builder, guard and presenter with
deterministic confirmation strategies.
"""

import pytest

from poolbot.core.exceptions import UnsupportedNetworkError
from poolbot.core.models import AddressStrictness, Network, Severity
from poolbot.services.link_guard import OutboundLinkGuard
from poolbot.services.pool_flow import RAYDIUM_HOME_URL, PoolCreationFlow
from poolbot.templates.messages import (
    ERROR_INVALID_INPUT,
    ERROR_NETWORK_UNAVAILABLE,
    NOTICE_ADDRESS_REQUIRED,
    NOTICE_BLOCKED,
    NOTICE_INVALID_ADDRESS,
    NOTICE_INVALID_INPUT,
    NOTICE_SECURITY_BLOCK,
    PROMPT_OPEN_POOL_CREATION,
    PROMPT_VISIT_RAYDIUM,
)
from poolbot.utils.validators import ERROR_BAD_CHARACTERS

from tests.conftest import FixedConfirmation, RecordingNavigator


class TestCheckAddress:
    """Live feedback for the address field."""

    def test_empty_has_no_feedback(self, accepting_flow: PoolCreationFlow) -> None:
        assert accepting_flow.check_address("") is None

    def test_valid_has_no_feedback(
        self, accepting_flow: PoolCreationFlow, usdc_address: str
    ) -> None:
        assert accepting_flow.check_address(usdc_address) is None

    def test_invalid_returns_reason(self, accepting_flow: PoolCreationFlow) -> None:
        assert accepting_flow.check_address("0x" + "a" * 40) == ERROR_BAD_CHARACTERS

    def test_uses_configured_strictness(self, accepting_guard: OutboundLinkGuard) -> None:
        flow = PoolCreationFlow(accepting_guard, strictness=AddressStrictness.DECODED)
        assert flow.check_address("2" * 32) is not None


class TestOpenPoolCreation:
    """Tests for the "open Raydium" action."""

    @pytest.mark.asyncio
    async def test_success_opens_devnet_url(
        self,
        accepting_flow: PoolCreationFlow,
        accepting: FixedConfirmation,
        navigator: RecordingNavigator,
        valid_mint_address: str,
    ) -> None:
        """Valid address + accept → devnet URL opened, no notice."""
        notice = await accepting_flow.open_pool_creation(valid_mint_address)

        assert notice is None
        assert navigator.opened == [
            "https://raydium.io/liquidity/create-pool/"
            "?inputMint=11111111111111111111111111111112&cluster=devnet"
        ]
        assert accepting.requests[0].message == PROMPT_OPEN_POOL_CREATION

    @pytest.mark.asyncio
    async def test_explicit_network(
        self,
        accepting_flow: PoolCreationFlow,
        navigator: RecordingNavigator,
        usdc_address: str,
    ) -> None:
        await accepting_flow.open_pool_creation(usdc_address, Network.MAINNET)

        assert "cluster=" not in navigator.opened[0]

    @pytest.mark.asyncio
    async def test_configured_default_network(
        self,
        accepting_guard: OutboundLinkGuard,
        navigator: RecordingNavigator,
        usdc_address: str,
    ) -> None:
        flow = PoolCreationFlow(accepting_guard, default_network=Network.MAINNET)

        await flow.open_pool_creation(usdc_address)

        assert "cluster=" not in navigator.opened[0]

    @pytest.mark.asyncio
    async def test_empty_address(
        self,
        accepting_flow: PoolCreationFlow,
        accepting: FixedConfirmation,
    ) -> None:
        notice = await accepting_flow.open_pool_creation("")

        assert notice.title == NOTICE_ADDRESS_REQUIRED
        assert notice.severity == Severity.DESTRUCTIVE
        assert accepting.requests == []

    @pytest.mark.asyncio
    async def test_invalid_address(
        self,
        accepting_flow: PoolCreationFlow,
        navigator: RecordingNavigator,
    ) -> None:
        notice = await accepting_flow.open_pool_creation("not-an-address")

        assert notice.title == NOTICE_INVALID_ADDRESS
        assert notice.description
        assert navigator.opened == []

    @pytest.mark.asyncio
    async def test_declined(
        self,
        declining_flow: PoolCreationFlow,
        navigator: RecordingNavigator,
        usdc_address: str,
    ) -> None:
        notice = await declining_flow.open_pool_creation(usdc_address)

        assert notice.title == NOTICE_SECURITY_BLOCK
        assert navigator.opened == []

    @pytest.mark.asyncio
    async def test_builder_failure_is_presented(
        self,
        accepting_flow: PoolCreationFlow,
        usdc_address: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Unexpected builder errors become a safe notice."""

        def broken_builder(*args, **kwargs):
            raise RuntimeError("secret internals")

        monkeypatch.setattr("poolbot.services.pool_flow.build_pool_creation_url", broken_builder)

        notice = await accepting_flow.open_pool_creation(usdc_address)

        assert notice.title == NOTICE_INVALID_INPUT
        assert notice.description == ERROR_INVALID_INPUT
        assert "secret" not in notice.description

    @pytest.mark.asyncio
    async def test_unsupported_network_is_presented(
        self,
        accepting_flow: PoolCreationFlow,
        usdc_address: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def no_endpoint(*args, **kwargs):
            raise UnsupportedNetworkError(technical_message="no endpoint for testnet")

        monkeypatch.setattr("poolbot.services.pool_flow.build_pool_creation_url", no_endpoint)

        notice = await accepting_flow.open_pool_creation(usdc_address)

        assert notice.description == ERROR_NETWORK_UNAVAILABLE


class TestOpenExternalLink:
    """Tests for the "visit Raydium" action."""

    @pytest.mark.asyncio
    async def test_trusted_link(
        self,
        accepting_flow: PoolCreationFlow,
        accepting: FixedConfirmation,
        navigator: RecordingNavigator,
    ) -> None:
        notice = await accepting_flow.open_external_link(RAYDIUM_HOME_URL, PROMPT_VISIT_RAYDIUM)

        assert notice is None
        assert navigator.opened == [RAYDIUM_HOME_URL]
        assert accepting.requests[0].message == PROMPT_VISIT_RAYDIUM

    @pytest.mark.asyncio
    async def test_untrusted_link(self, accepting_flow: PoolCreationFlow) -> None:
        notice = await accepting_flow.open_external_link("https://evil.com/", PROMPT_VISIT_RAYDIUM)

        assert notice.title == NOTICE_BLOCKED

    @pytest.mark.asyncio
    async def test_declined_link(self, declining_flow: PoolCreationFlow) -> None:
        notice = await declining_flow.open_external_link(RAYDIUM_HOME_URL, PROMPT_VISIT_RAYDIUM)

        assert notice.title == NOTICE_BLOCKED
