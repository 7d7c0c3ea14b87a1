"""
Services module - business logic layer.

Contains the URL builder, link guard, error presenter, the pool creation
flow and the ServiceFactory for dependency injection.
"""

from poolbot.services.error_presenter import present_error
from poolbot.services.factory import ServiceFactory
from poolbot.services.link_guard import OutboundLinkGuard
from poolbot.services.pool_flow import PoolCreationFlow
from poolbot.services.url_builder import build_pool_creation_url

__all__ = [
    "ServiceFactory",
    "PoolCreationFlow",
    "OutboundLinkGuard",
    "build_pool_creation_url",
    "present_error",
]
