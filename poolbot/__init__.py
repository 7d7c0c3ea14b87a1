"""PoolBot - safe hand-off from Telegram to Raydium pool creation."""

__version__ = "0.1.0"
