"""
Telegram implementations of the navigation collaborators.

- InlineConfirmation asks "yes/no" with an inline keyboard and waits for
  the button press
- ConfirmationBroker connects the waiting question to the callback handler
- TelegramNavigator hands a verified URL to the user as a URL button

A URL button is opened by the user's Telegram client in an external
browser, outside the bot, with no way back into the chat session.
"""

import asyncio
import logging
import secrets

from aiogram.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    LinkPreviewOptions,
    Message,
)

from poolbot.core.models import ConfirmationRequest, Notice, Severity
from poolbot.templates.messages import (
    CONFIRM_NO_BUTTON,
    CONFIRM_YES_BUTTON,
    LINK_READY,
    NOTICE_BUSY,
    NOTICE_BUSY_TEXT,
    OPEN_LINK_BUTTON,
)
from poolbot.utils.callbacks import ConfirmCallback

logger = logging.getLogger(__name__)

# Random bytes per question; the hex nonce must fit in 64 bytes of callback data
NONCE_BYTES = 8


class ConfirmationBroker:
    """
    Pending confirmations, one per user in each chat.

    A question is addressed to the user who asked for the link and is
    tagged with a random nonce carried by its buttons. Only that user,
    pressing a button of that exact question, can answer it.

    A user with an open question cannot start another one in the same
    chat; this is the bot's equivalent of disabling the submit button
    while a request is in flight.

    Usage:
        nonce, future = broker.register(chat_id, user_id)
        ...
        broker.resolve(chat_id, user_id, nonce, accepted=True)  # from the callback handler
    """

    def __init__(self) -> None:
        self._pending: dict[tuple[int, int], tuple[str, asyncio.Future[bool]]] = {}

    def is_pending(self, chat_id: int, user_id: int) -> bool:
        """Check whether a user has an unanswered question in a chat."""
        entry = self._pending.get((chat_id, user_id))
        return entry is not None and not entry[1].done()

    def register(self, chat_id: int, user_id: int) -> tuple[str, asyncio.Future[bool]]:
        """
        Open a question for a user in a chat.

        Returns:
            The question's nonce and the future its answer is delivered to

        Raises:
            RuntimeError: If the user already has an open question in the chat
        """
        if self.is_pending(chat_id, user_id):
            raise RuntimeError(
                f"User {user_id} already has a pending confirmation in chat {chat_id}"
            )

        nonce = secrets.token_hex(NONCE_BYTES)
        future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()
        self._pending[(chat_id, user_id)] = (nonce, future)
        return nonce, future

    def resolve(self, chat_id: int, user_id: int, nonce: str, accepted: bool) -> bool:
        """
        Deliver a button press.

        Returns:
            True if it answered the user's open question, False if there is
            no such question or the button belongs to another one
        """
        entry = self._pending.get((chat_id, user_id))
        if entry is None:
            return False

        expected, future = entry
        if future.done() or nonce != expected:
            return False

        del self._pending[(chat_id, user_id)]
        future.set_result(accepted)
        return True

    def discard(self, chat_id: int, user_id: int, future: asyncio.Future[bool]) -> None:
        """Forget a question if it is still the registered one."""
        entry = self._pending.get((chat_id, user_id))
        if entry is not None and entry[1] is future:
            del self._pending[(chat_id, user_id)]


class InlineConfirmation:
    """
    ConfirmationStrategy that asks in the chat with Yes/No buttons.

    The question belongs to the author of `message`. Waits until they
    press a button; there is no timeout.
    """

    def __init__(self, message: Message, broker: ConfirmationBroker):
        """
        Args:
            message: Message the question replies to
            broker: Shared pending-question registry
        """
        self._message = message
        self._broker = broker

    async def confirm(self, request: ConfirmationRequest) -> bool:
        chat_id = self._message.chat.id
        user_id = sender_id(self._message)
        nonce, future = self._broker.register(chat_id, user_id)

        try:
            await self._message.answer(
                request.message,
                reply_markup=confirmation_keyboard(nonce),
            )
            logger.debug(f"Waiting for confirmation from user {user_id} in chat {chat_id}")
            return await future
        finally:
            self._broker.discard(chat_id, user_id, future)


class TelegramNavigator:
    """Navigator that sends the verified URL as an inline URL button."""

    def __init__(self, message: Message):
        self._message = message

    async def open(self, url: str) -> None:
        await self._message.answer(
            LINK_READY,
            reply_markup=InlineKeyboardMarkup(
                inline_keyboard=[[InlineKeyboardButton(text=OPEN_LINK_BUTTON, url=url)]]
            ),
            link_preview_options=LinkPreviewOptions(is_disabled=True),
        )


def confirmation_keyboard(nonce: str) -> InlineKeyboardMarkup:
    """Build the Yes/No keyboard of one question."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text=CONFIRM_YES_BUTTON,
                    callback_data=ConfirmCallback(accepted=True, nonce=nonce).pack(),
                ),
                InlineKeyboardButton(
                    text=CONFIRM_NO_BUTTON,
                    callback_data=ConfirmCallback(accepted=False, nonce=nonce).pack(),
                ),
            ]
        ]
    )


def busy_notice() -> Notice:
    """Notice for a user who already has an open confirmation in the chat."""
    return Notice(title=NOTICE_BUSY, description=NOTICE_BUSY_TEXT, severity=Severity.WARNING)


def sender_id(message: Message) -> int:
    """User a question is addressed to (the chat itself when the sender is hidden)."""
    if message.from_user is None:
        return message.chat.id
    return message.from_user.id
