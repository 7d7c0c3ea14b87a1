"""
Error handling middleware for aiogram.

Catches all exceptions and returns user-friendly error messages.
Logs technical details for debugging while hiding them from users:
the text sent to the user always comes from ErrorPresenter.

Exception handling priority:
1. ValidationError → invalid address message
2. BlockedNavigationError → link blocked message
3. Other PoolBotError → message by context
4. Unknown errors → generic message
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import Message, Update

from poolbot.core.exceptions import (
    BlockedNavigationError,
    PoolBotError,
    ValidationError,
)
from poolbot.services.error_presenter import (
    CONTEXT_NAVIGATION,
    CONTEXT_VALIDATION,
    present_error,
)

logger = logging.getLogger(__name__)

CONTEXT_UNKNOWN = "unknown"


class ErrorHandlerMiddleware(BaseMiddleware):
    """
    Global error handling middleware.

    Catches exceptions from handlers and:
    1. Logs technical details for debugging
    2. Sends a safe message to the user
    3. Prevents exception from crashing the bot

    Usage:
        dp.update.middleware(ErrorHandlerMiddleware())
    """

    async def __call__(
        self,
        handler: Callable[[Update, Dict[str, Any]], Awaitable[Any]],
        event: Update,
        data: Dict[str, Any],
    ) -> Any:
        """
        Process update with error handling.

        Args:
            handler: Next handler in chain
            event: Incoming update
            data: Handler data

        Returns:
            Handler result or None if error occurred
        """
        try:
            return await handler(event, data)

        except ValidationError as e:
            await self._handle_error(event, e, CONTEXT_VALIDATION, log_level="warning")

        except BlockedNavigationError as e:
            await self._handle_error(event, e, CONTEXT_NAVIGATION, log_level="warning")

        except PoolBotError as e:
            # Catch-all for our custom exceptions
            await self._handle_error(event, e, CONTEXT_UNKNOWN, log_level="error")

        except Exception as e:
            # Unknown errors - log full traceback
            logger.exception(f"Unexpected error: {type(e).__name__}: {e}")
            await self._send_error_message(event, present_error(e, CONTEXT_UNKNOWN))

        return None

    async def _handle_error(
        self,
        event: Update,
        error: PoolBotError,
        context: str,
        log_level: str = "error",
    ) -> None:
        """
        Handle a known error type.

        Args:
            event: The update that caused the error
            error: The exception that was raised
            context: Context tag passed to ErrorPresenter
            log_level: Logging level (warning, error)
        """
        log_func = getattr(logger, log_level)
        log_func(f"{type(error).__name__}: {error.technical_message}")

        await self._send_error_message(event, present_error(error, context))

    async def _send_error_message(
        self,
        event: Update,
        message: str,
    ) -> None:
        """
        Send error message to user.

        Extracts the message object from update and sends the error.

        Args:
            event: The update to respond to
            message: Error message to send
        """
        msg: Message | None = None

        if event.message:
            msg = event.message
        elif event.callback_query and event.callback_query.message:
            msg = event.callback_query.message

        if msg:
            try:
                await msg.answer(message)
            except Exception as e:
                logger.error(f"Failed to send error message: {e}")
