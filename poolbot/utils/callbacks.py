"""Callback payloads of inline keyboards."""

from aiogram.filters.callback_data import CallbackData


class ConfirmCallback(CallbackData, prefix="confirm"):
    """Payload of the Yes/No buttons of one confirmation question."""

    accepted: bool
    nonce: str
