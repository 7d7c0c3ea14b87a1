"""
Output formatters for Telegram messages.

Converts Notice values and validation feedback into Telegram HTML.
Dynamic text is always escaped before it is put into markup.
"""

from aiogram import html

from poolbot.core.models import Notice, Severity
from poolbot.templates.messages import ADDRESS_FEEDBACK

# Emoji mappings for notice severities
SEVERITY_EMOJI = {
    Severity.INFO: "ℹ️",
    Severity.SUCCESS: "✅",
    Severity.WARNING: "⚠️",
    Severity.DESTRUCTIVE: "⛔",
}


def format_notice(notice: Notice) -> str:
    """
    Format a notice as Telegram message.

    Args:
        notice: Notice returned by PoolCreationFlow

    Returns:
        Formatted HTML string like "⛔ <b>Blocked</b>" followed by the description
    """
    emoji = SEVERITY_EMOJI[notice.severity]
    return f"{emoji} {html.bold(html.quote(notice.title))}\n{html.quote(notice.description)}"


def format_address_feedback(error: str) -> str:
    """Format inline validation feedback for the address the user sent."""
    return ADDRESS_FEEDBACK.format(error=html.quote(error))
