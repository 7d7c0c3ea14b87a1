"""
Pool creation handler.

Handles messages containing token mint addresses and the Yes/No answers
to confirmation questions.
Main workflow:
1. Refuse a new address while the user has an open question in the chat
2. Validate the address exactly as sent (no trimming)
3. Run the pool creation flow (build URL, confirm, send link)
4. Render any resulting notice
"""

import logging

from aiogram import F, Router
from aiogram.types import CallbackQuery, Message

from poolbot.handlers.confirmation import (
    ConfirmationBroker,
    InlineConfirmation,
    TelegramNavigator,
    busy_notice,
    sender_id,
)
from poolbot.services.factory import ServiceFactory
from poolbot.templates.messages import CONFIRMATION_DECLINED, CONFIRMATION_EXPIRED
from poolbot.utils.callbacks import ConfirmCallback
from poolbot.utils.formatters import format_address_feedback, format_notice

logger = logging.getLogger(__name__)

router = Router(name="pool")


@router.callback_query(ConfirmCallback.filter())
async def handle_confirmation(
    callback: CallbackQuery,
    callback_data: ConfirmCallback,
    broker: ConfirmationBroker,
) -> None:
    """
    Handle a Yes/No button press.

    Delivers the answer to the waiting confirmation. Only the user the
    question was asked for can answer it, and only with the buttons of
    that question; every other press gets a short "no longer active" alert.

    Args:
        callback: Incoming callback query
        callback_data: Parsed button payload
        broker: Injected pending-question registry
    """
    message = callback.message
    if message is None:
        await callback.answer(CONFIRMATION_EXPIRED)
        return

    delivered = broker.resolve(
        message.chat.id,
        callback.from_user.id,
        callback_data.nonce,
        callback_data.accepted,
    )
    if not delivered:
        logger.info(f"Ignored confirmation press from user {callback.from_user.id}")
        await callback.answer(CONFIRMATION_EXPIRED)
        return

    await callback.answer(None if callback_data.accepted else CONFIRMATION_DECLINED)

    # Remove the buttons so the question cannot be answered twice
    if isinstance(message, Message):
        await message.edit_reply_markup(reply_markup=None)


@router.message(F.text)
async def handle_address(
    message: Message,
    factory: ServiceFactory,
    broker: ConfirmationBroker,
) -> None:
    """
    Handle any text message as a token mint address.

    This is a catch-all handler for messages that don't match
    any commands. The text is used exactly as sent: stripping it
    would hide a mismatch between what the user sees and what is used.

    Args:
        message: Incoming Telegram message
        factory: Injected service factory
        broker: Injected pending-question registry
    """
    if broker.is_pending(message.chat.id, sender_id(message)):
        await message.answer(format_notice(busy_notice()))
        return

    flow = factory.create_flow(
        InlineConfirmation(message, broker),
        TelegramNavigator(message),
    )

    # Live feedback: short reason for the user, no notice
    error = flow.check_address(message.text)
    if error:
        logger.debug(f"Invalid address: {error}")
        await message.answer(format_address_feedback(error))
        return

    # Errors escaping the flow are caught by ErrorHandlerMiddleware
    notice = await flow.open_pool_creation(message.text)
    if notice:
        await message.answer(format_notice(notice))
