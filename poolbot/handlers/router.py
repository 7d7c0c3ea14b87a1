"""
Router setup and configuration.

Registers all handlers and middleware with the dispatcher.
Order matters - command handlers are registered before catch-all.
"""

from aiogram import Dispatcher

from poolbot.handlers import common_handler, pool_handler
from poolbot.handlers.confirmation import ConfirmationBroker
from poolbot.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from poolbot.services.factory import ServiceFactory


def setup_routers(
    dp: Dispatcher,
    factory: ServiceFactory,
    broker: ConfirmationBroker | None = None,
) -> None:
    """
    Configure dispatcher with all routers and middleware.

    Sets up:
    1. Global middleware (error handling, logging)
    2. Command handlers (/start, /help, /raydium)
    3. Confirmation callbacks and the address handler (catch-all)

    Args:
        dp: Aiogram dispatcher
        factory: Service factory for injection into handlers
        broker: Pending-question registry (a new one if omitted)
    """
    # Register middleware (order: first registered = outermost)
    # Logging should be outermost to capture all requests including errors
    # Error handler is inner to catch and transform exceptions
    dp.update.middleware(LoggingMiddleware())
    dp.update.middleware(ErrorHandlerMiddleware())

    # Available as handler arguments
    dp["factory"] = factory
    dp["broker"] = broker or ConfirmationBroker()

    # Commands should be matched before catch-all address handler
    dp.include_router(common_handler.router)
    dp.include_router(pool_handler.router)
