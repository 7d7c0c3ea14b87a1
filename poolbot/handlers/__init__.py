"""Telegram handlers."""

from poolbot.handlers.router import setup_routers

__all__ = ["setup_routers"]
