"""
PoolBot entry point.

Initializes all components and starts the bot.
This is the main module that ties everything together.

Run with: python -m poolbot.main
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from poolbot.config import Settings, get_settings
from poolbot.handlers import setup_routers
from poolbot.services.factory import ServiceFactory


def setup_logging(level: str) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # Reduce noise from external libraries
    logging.getLogger("aiogram").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def validate_runtime_config(settings: Settings) -> None:
    """
    Validate that the bot can start.

    Raises:
        RuntimeError: If required env vars are missing.
    """
    if not settings.telegram_bot_token:
        raise RuntimeError("Missing required env var: TELEGRAM_BOT_TOKEN.")


async def main() -> None:
    """
    Main application entry point.

    Initializes:
    1. Configuration from environment
    2. Logging
    3. Services via factory
    4. Bot and dispatcher
    5. Handlers and middleware

    Then starts polling for updates.
    """
    settings = get_settings()

    # Setup logging first (so validation errors are logged)
    setup_logging(settings.log_level)

    validate_runtime_config(settings)
    logger = logging.getLogger(__name__)

    logger.info("=" * 50)
    logger.info("PoolBot starting...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Default network: {settings.default_network.value}")
    logger.info("=" * 50)

    factory = ServiceFactory(settings)

    bot = Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(
            parse_mode=ParseMode.HTML,
        ),
    )

    dp = Dispatcher()
    setup_routers(dp, factory)

    async def on_shutdown() -> None:
        logger.info("Shutting down...")
        await bot.session.close()

    dp.shutdown.register(on_shutdown)

    logger.info("Bot is ready. Starting polling...")

    try:
        # Updates run as tasks, so a button press can answer a waiting question
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
            handle_as_tasks=True,
        )
    except Exception as e:
        logger.exception(f"Bot stopped with error: {e}")
        raise
    finally:
        logger.info("Bot stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user.")
