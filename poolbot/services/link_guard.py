"""
Outbound link guard.

The only way out of the bot. Every URL handed to a user goes through
OutboundLinkGuard.open_verified_url, which:
1. Parses the URL
2. Checks the host against the trusted allow-list
3. Requires https
4. Asks the user to confirm
5. Opens the link only after a "yes"

Failures are reported as False, never raised, so callers can show their
own message without try/except.
"""

import logging
from urllib.parse import SplitResult, urlsplit

from poolbot.core.exceptions import BlockedNavigationError
from poolbot.core.models import ConfirmationRequest
from poolbot.core.protocols import ConfirmationStrategy, Navigator
from poolbot.core.registry import TRUSTED_HOSTS, TrustedHostRegistry

logger = logging.getLogger(__name__)

ALLOWED_SCHEME = "https"
ALLOWED_PORTS = {None, 443}


class OutboundLinkGuard:
    """
    Single choke point for sending users to external sites.

    Holds no state between calls; the confirmation strategy and the
    navigator are injected so the guard works the same in the bot and
    in tests.

    Usage:
        guard = OutboundLinkGuard(confirmation, navigator)
        opened = await guard.open_verified_url(url, "Open Raydium?")
    """

    def __init__(
        self,
        confirmation: ConfirmationStrategy,
        navigator: Navigator,
        registry: TrustedHostRegistry = TRUSTED_HOSTS,
    ):
        """
        Initialize guard with its collaborators.

        Args:
            confirmation: Asks the user yes/no
            navigator: Opens a verified URL
            registry: Allow-list source (the process-wide registry by default)
        """
        self._confirmation = confirmation
        self._navigator = navigator
        self._registry = registry

    async def open_verified_url(self, url: str, confirm_message: str) -> bool:
        """
        Verify, confirm and open a URL.

        Args:
            url: Any URL (trusted or not)
            confirm_message: Static prompt shown to the user

        Returns:
            True if navigation was started, False if blocked or declined
        """
        try:
            self.verify(url)
        except BlockedNavigationError as e:
            logger.warning(f"Blocked outbound link: {e.technical_message}")
            return False

        try:
            request = ConfirmationRequest(url=url, message=confirm_message)
            accepted = await self._confirmation.confirm(request)
        except Exception as e:
            logger.error(f"Confirmation failed: {type(e).__name__}: {e}")
            return False

        if not accepted:
            logger.info("User declined outbound link")
            return False

        try:
            await self._navigator.open(url)
        except Exception as e:
            logger.error(f"Navigation failed: {type(e).__name__}: {e}")
            return False

        logger.info(f"Opened outbound link to {urlsplit(url).hostname}")
        return True

    def verify(self, url: str) -> SplitResult:
        """
        Run the pre-flight checks without asking the user.

        Args:
            url: URL to check

        Returns:
            Parsed URL

        Raises:
            BlockedNavigationError: If any check fails
        """
        # urlsplit silently drops tabs and newlines; refuse them instead
        if not isinstance(url, str) or any(
            char.isspace() or not char.isprintable() for char in url
        ):
            raise BlockedNavigationError(
                technical_message="URL is not a string or contains whitespace/control characters"
            )

        try:
            parts = urlsplit(url)
            port = parts.port
        except (TypeError, ValueError) as e:
            raise BlockedNavigationError(
                technical_message=f"Unparseable URL: {type(e).__name__}"
            ) from e

        host = parts.hostname
        if not host:
            raise BlockedNavigationError(technical_message="URL has no host")

        if parts.username is not None or parts.password is not None:
            raise BlockedNavigationError(
                technical_message=f"URL carries credentials for host {host!r}"
            )

        if not self._registry.is_allowed_host(host):
            raise BlockedNavigationError(
                technical_message=f"Host {host!r} is not in the allow-list"
            )

        if parts.scheme.lower() != ALLOWED_SCHEME:
            raise BlockedNavigationError(
                technical_message=f"Scheme {parts.scheme!r} is not allowed"
            )

        if port not in ALLOWED_PORTS:
            raise BlockedNavigationError(
                technical_message=f"Port {port} is not allowed"
            )

        return parts
