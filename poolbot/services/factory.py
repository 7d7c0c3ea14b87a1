"""
Service factory for dependency injection.

Creates and configures the link guard and the pool creation flow from
application settings. The Telegram collaborators (confirmation and
navigator) are bound to a single incoming message, so handlers ask the
factory for a fresh flow per message.
"""

import logging

from poolbot.config.settings import Settings
from poolbot.core.protocols import ConfirmationStrategy, Navigator
from poolbot.core.registry import TRUSTED_HOSTS
from poolbot.services.link_guard import OutboundLinkGuard
from poolbot.services.pool_flow import PoolCreationFlow

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Factory for creating application services.

    Usage:
        factory = ServiceFactory(settings)
        flow = factory.create_flow(confirmation, navigator)
    """

    def __init__(self, settings: Settings):
        """
        Initialize factory with application settings.

        Args:
            settings: Application configuration
        """
        self._settings = settings
        self._log_mode()

    def _log_mode(self) -> None:
        """Log the current configuration for debugging."""
        logger.info(
            f"ServiceFactory initialized: network={self._settings.default_network.value}, "
            f"strictness={self._settings.address_strictness.value}"
        )

    def create_link_guard(
        self,
        confirmation: ConfirmationStrategy,
        navigator: Navigator,
    ) -> OutboundLinkGuard:
        """
        Create the outbound link guard.

        The registry is always the built-in TRUSTED_HOSTS; settings cannot
        extend it.
        """
        return OutboundLinkGuard(confirmation, navigator, registry=TRUSTED_HOSTS)

    def create_flow(
        self,
        confirmation: ConfirmationStrategy,
        navigator: Navigator,
    ) -> PoolCreationFlow:
        """
        Create a pool creation flow bound to the given collaborators.

        Args:
            confirmation: Asks the user yes/no
            navigator: Opens verified URLs

        Returns:
            PoolCreationFlow ready for use
        """
        guard = self.create_link_guard(confirmation, navigator)
        return PoolCreationFlow(
            guard,
            default_network=self._settings.default_network,
            strictness=self._settings.address_strictness,
        )
