"""
Message templates for Telegram bot.

All user-facing messages are defined here for easy localization
and consistent messaging. Uses HTML formatting for Telegram.

Template naming convention:
- WELCOME, HELP - informational messages
- PROMPT_* - static confirmation questions (never built from user input)
- NOTICE_* - titles of feedback notices
- ERROR_* - safe error sentences returned by ErrorPresenter
"""

# =============================================================================
# Informational Messages
# =============================================================================

WELCOME = """
Hi! I am <b>PoolBot</b>.

Send me the mint address of your token and I will take you to Raydium
to create a liquidity pool for it.

<i>Example:</i>
<code>11111111111111111111111111111112</code>
""".strip()

HELP = """
<b>How it works:</b>

1. Send your token's mint address
2. Confirm that you want to open Raydium
3. Complete the pool creation on Raydium
4. Add your initial liquidity

<b>Important notes:</b>
• Pool creation requires SOL for fees
• You need both SOL and your tokens
• Price is determined by the initial ratio
• Liquidity can be removed later

/raydium - visit the official Raydium website

<i>All external links are validated and require your confirmation.</i>
""".strip()

ADDRESS_FEEDBACK = """
{error}

Please fix the token address before proceeding.
""".strip()

OPEN_LINK_BUTTON = "Open in Raydium"
CONFIRM_YES_BUTTON = "Yes, open"
CONFIRM_NO_BUTTON = "Cancel"
LINK_READY = "Your verified link is ready:"
CONFIRMATION_DECLINED = "Cancelled."
CONFIRMATION_EXPIRED = "This question is no longer active."

# =============================================================================
# Confirmation Prompts
# =============================================================================

PROMPT_OPEN_POOL_CREATION = "Open Raydium to create a liquidity pool for your token?"

PROMPT_VISIT_RAYDIUM = "Visit the official Raydium website?"

# =============================================================================
# Notices
# =============================================================================

NOTICE_ADDRESS_REQUIRED = "Token Address Required"
NOTICE_ADDRESS_REQUIRED_TEXT = "Please enter a valid token mint address first."

NOTICE_INVALID_ADDRESS = "Invalid Token Address"

NOTICE_INVALID_INPUT = "Invalid Input"

NOTICE_SECURITY_BLOCK = "Security Block"
NOTICE_SECURITY_BLOCK_TEXT = "The link was blocked for security reasons."

NOTICE_BLOCKED = "Blocked"
NOTICE_BLOCKED_TEXT = "This link has been blocked for security reasons."

NOTICE_BUSY = "Confirmation Pending"
NOTICE_BUSY_TEXT = "Please answer the open question before sending another address."

# =============================================================================
# Error Messages
# =============================================================================

ERROR_GENERIC = "Something went wrong. Please try again later."

ERROR_INVALID_ADDRESS = "The token address is not valid. Please check it and try again."

ERROR_INVALID_INPUT = "The input could not be processed. Please check it and try again."

ERROR_LINK_BLOCKED = "The link was blocked for security reasons."

ERROR_NETWORK_UNAVAILABLE = "The selected network is not available right now."
