"""Utility functions."""

from poolbot.utils.callbacks import ConfirmCallback
from poolbot.utils.formatters import format_address_feedback, format_notice
from poolbot.utils.validators import is_valid_mint_address, validate_mint_address

__all__ = [
    "ConfirmCallback",
    "validate_mint_address",
    "is_valid_mint_address",
    "format_notice",
    "format_address_feedback",
]
