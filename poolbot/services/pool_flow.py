"""
Pool creation flow.

Coordinates the validation, URL and navigation layers without containing
their logic. Each public method corresponds to one user action and returns
a Notice to show, or None when there is nothing to report.

Workflow for "open Raydium":
1. AddressValidator → reject empty/invalid input
2. SecureUrlBuilder → build the create-pool URL
3. OutboundLinkGuard → check, confirm, open
4. ErrorPresenter → turn any failure into a safe message
"""

import logging

from poolbot.core.exceptions import PoolBotError
from poolbot.core.models import AddressStrictness, Network, Notice, Severity
from poolbot.services.error_presenter import CONTEXT_VALIDATION, present_error
from poolbot.services.link_guard import OutboundLinkGuard
from poolbot.services.url_builder import build_pool_creation_url
from poolbot.templates.messages import (
    NOTICE_ADDRESS_REQUIRED,
    NOTICE_ADDRESS_REQUIRED_TEXT,
    NOTICE_BLOCKED,
    NOTICE_BLOCKED_TEXT,
    NOTICE_INVALID_ADDRESS,
    NOTICE_INVALID_INPUT,
    NOTICE_SECURITY_BLOCK,
    NOTICE_SECURITY_BLOCK_TEXT,
    PROMPT_OPEN_POOL_CREATION,
)
from poolbot.utils.validators import validate_mint_address

logger = logging.getLogger(__name__)

RAYDIUM_HOME_URL = "https://raydium.io/"


class PoolCreationFlow:
    """
    Orchestrates the "create a pool on Raydium" user actions.

    Holds only configuration (guard, default network, strictness), never
    per-user state: the address is passed in on every call.

    Usage:
        flow = PoolCreationFlow(guard)
        notice = await flow.open_pool_creation("So111...")
    """

    def __init__(
        self,
        guard: OutboundLinkGuard,
        default_network: Network = Network.DEVNET,
        strictness: AddressStrictness = AddressStrictness.STRUCTURAL,
    ):
        """
        Initialize flow.

        Args:
            guard: Outbound link guard used for every navigation
            default_network: Cluster used when the caller does not pick one
            strictness: Address validation strictness
        """
        self._guard = guard
        self._default_network = default_network
        self._strictness = strictness

    def check_address(self, value: str) -> str | None:
        """
        Live feedback for the address field.

        Args:
            value: Current field content

        Returns:
            Validation reason, or None when the field is empty or valid
        """
        if not value:
            return None

        result = validate_mint_address(value, self._strictness)
        return None if result.is_valid else result.error

    async def open_pool_creation(
        self,
        address: str,
        network: Network | None = None,
    ) -> Notice | None:
        """
        Send the user to Raydium's create-pool page for a token.

        Args:
            address: Raw token mint address as entered
            network: Cluster to use (defaults to the configured one)

        Returns:
            Notice describing why nothing was opened, or None on success
        """
        if not address:
            return Notice(
                title=NOTICE_ADDRESS_REQUIRED,
                description=NOTICE_ADDRESS_REQUIRED_TEXT,
                severity=Severity.DESTRUCTIVE,
            )

        # Checked again here even if the caller already showed live feedback
        validation = validate_mint_address(address, self._strictness)
        if not validation.is_valid:
            logger.debug(f"Invalid address: {validation.error}")
            return Notice(
                title=NOTICE_INVALID_ADDRESS,
                description=validation.error,
                severity=Severity.DESTRUCTIVE,
            )

        try:
            url = build_pool_creation_url(
                address,
                network or self._default_network,
                strictness=self._strictness,
            )
        except PoolBotError as e:
            logger.warning(f"{type(e).__name__}: {e.technical_message}")
            return Notice(
                title=NOTICE_INVALID_INPUT,
                description=present_error(e, CONTEXT_VALIDATION),
                severity=Severity.DESTRUCTIVE,
            )
        except Exception as e:
            logger.exception(f"Unexpected error while building URL: {type(e).__name__}")
            return Notice(
                title=NOTICE_INVALID_INPUT,
                description=present_error(e, CONTEXT_VALIDATION),
                severity=Severity.DESTRUCTIVE,
            )

        opened = await self._guard.open_verified_url(url, PROMPT_OPEN_POOL_CREATION)
        if not opened:
            return Notice(
                title=NOTICE_SECURITY_BLOCK,
                description=NOTICE_SECURITY_BLOCK_TEXT,
                severity=Severity.DESTRUCTIVE,
            )

        logger.info(f"Pool creation opened for {address[:8]}...")
        return None

    async def open_external_link(self, url: str, confirm_message: str) -> Notice | None:
        """
        Open any external link through the guard.

        Args:
            url: Link to open
            confirm_message: Static confirmation prompt

        Returns:
            "Blocked" notice if the link was not opened, None otherwise
        """
        opened = await self._guard.open_verified_url(url, confirm_message)
        if not opened:
            return Notice(
                title=NOTICE_BLOCKED,
                description=NOTICE_BLOCKED_TEXT,
                severity=Severity.DESTRUCTIVE,
            )
        return None
