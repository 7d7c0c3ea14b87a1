"""
Protocol definitions (interfaces) for the navigation collaborators.

OutboundLinkGuard does not know how the user is asked or how a link is
opened. The bot layer provides Telegram implementations; tests inject
deterministic fakes.
"""

from typing import Protocol, runtime_checkable

from poolbot.core.models import ConfirmationRequest


@runtime_checkable
class ConfirmationStrategy(Protocol):
    """
    Asks the user a yes/no question and waits for the answer.

    This is the one deliberate suspension point of the link guard.
    There is no timeout: the wait ends when the user answers.
    """

    async def confirm(self, request: ConfirmationRequest) -> bool:
        """
        Present the request to the user.

        Args:
            request: URL about to be opened and the static prompt text

        Returns:
            True if the user agreed, False otherwise
        """
        ...


@runtime_checkable
class Navigator(Protocol):
    """
    Opens an already verified URL for the user.

    Implementations must open the URL in a fresh, unprivileged context
    with no handle back to the bot.
    """

    async def open(self, url: str) -> None:
        """
        Hand the URL to the user.

        Args:
            url: URL that passed OutboundLinkGuard checks
        """
        ...
