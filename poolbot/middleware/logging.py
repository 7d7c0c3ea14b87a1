"""
Update logging for aiogram.

One line per update saying where it came from (chat and user) and what it
carries, plus its processing time at debug level. Message text is cut to a
short prefix so full addresses never reach the logs, and confirmation
presses are logged as the answer they carry rather than their raw payload.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import Update

from poolbot.utils.callbacks import ConfirmCallback

logger = logging.getLogger(__name__)

# Enough to recognize an address, not to copy it
TEXT_PREVIEW_LENGTH = 12


class LoggingMiddleware(BaseMiddleware):
    """
    Middleware that logs all incoming updates.

    Usage:
        dp.update.middleware(LoggingMiddleware())
    """

    async def __call__(
        self,
        handler: Callable[[Update, dict[str, Any]], Awaitable[Any]],
        event: Update,
        data: dict[str, Any],
    ) -> Any:
        start_time = time.monotonic()
        logger.info(f"Incoming: {describe_origin(event)} | {describe_content(event)}")

        try:
            result = await handler(event, data)
        except Exception as e:
            elapsed = (time.monotonic() - start_time) * 1000
            logger.error(f"Error after {elapsed:.2f}ms: {type(e).__name__}")
            raise

        elapsed = (time.monotonic() - start_time) * 1000
        logger.debug(f"Processed in {elapsed:.2f}ms")
        return result


def describe_origin(event: Update) -> str:
    """Chat and user of an update, the pair pending confirmations are keyed on."""
    chat_id = user_id = None

    if event.message:
        chat_id = event.message.chat.id
        if event.message.from_user:
            user_id = event.message.from_user.id
    elif event.callback_query:
        user_id = event.callback_query.from_user.id
        if event.callback_query.message:
            chat_id = event.callback_query.message.chat.id

    return f"chat={chat_id or 'unknown'} user={user_id or 'unknown'}"


def describe_content(event: Update) -> str:
    """Short, log-safe summary of what an update carries."""
    if event.message and event.message.text:
        text = event.message.text
        if len(text) > TEXT_PREVIEW_LENGTH:
            text = text[:TEXT_PREVIEW_LENGTH] + "..."
        return f"text={text!r}"

    if event.callback_query:
        try:
            answer = ConfirmCallback.unpack(event.callback_query.data or "")
        except (TypeError, ValueError):
            return "callback=unrecognized"
        return f"confirmation={'accepted' if answer.accepted else 'declined'}"

    return "type=other"
