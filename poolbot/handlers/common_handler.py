"""
Common handlers for basic bot commands.

Handles:
- /start - Welcome message
- /help - Usage instructions
- /raydium - Link to the official Raydium website (through the link guard)
"""

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from poolbot.handlers.confirmation import (
    ConfirmationBroker,
    InlineConfirmation,
    TelegramNavigator,
    busy_notice,
    sender_id,
)
from poolbot.services.factory import ServiceFactory
from poolbot.services.pool_flow import RAYDIUM_HOME_URL
from poolbot.templates.messages import (
    HELP,
    PROMPT_VISIT_RAYDIUM,
    WELCOME,
)
from poolbot.utils.formatters import format_notice

router = Router(name="common")


@router.message(Command("start"))
async def handle_start(message: Message) -> None:
    """
    Handle /start command.

    Sends welcome message with usage instructions.
    This is the first message users see when they start the bot.
    """
    await message.answer(WELCOME)


@router.message(Command("help"))
async def handle_help(message: Message) -> None:
    """
    Handle /help command.

    Sends pool creation steps and notes.
    """
    await message.answer(HELP)


@router.message(Command("raydium"))
async def handle_raydium(
    message: Message,
    factory: ServiceFactory,
    broker: ConfirmationBroker,
) -> None:
    """Handle /raydium command: offer the official Raydium website."""
    if broker.is_pending(message.chat.id, sender_id(message)):
        await message.answer(format_notice(busy_notice()))
        return

    flow = factory.create_flow(
        InlineConfirmation(message, broker),
        TelegramNavigator(message),
    )
    notice = await flow.open_external_link(RAYDIUM_HOME_URL, PROMPT_VISIT_RAYDIUM)
    if notice:
        await message.answer(format_notice(notice))

