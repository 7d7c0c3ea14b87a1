"""Middleware for aiogram."""

from poolbot.middleware.error_handler import ErrorHandlerMiddleware
from poolbot.middleware.logging import LoggingMiddleware

__all__ = ["ErrorHandlerMiddleware", "LoggingMiddleware"]
