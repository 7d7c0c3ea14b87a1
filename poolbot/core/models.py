"""
Pydantic models for PoolBot application.

All value types passed between the validation, URL and navigation layers
are defined here. Every model is frozen: results are created fresh per call
and never mutated afterwards.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Network(str, Enum):
    """
    Solana cluster the pool is created on.

    Values are the cluster names Raydium understands.
    """

    MAINNET = "mainnet"
    DEVNET = "devnet"


class AddressStrictness(str, Enum):
    """
    How hard AddressValidator looks at a candidate.

    STRUCTURAL checks length and alphabet only.
    DECODED additionally base58-decodes the value and requires exactly
    32 bytes. Solana public keys have no checksum, so this is the
    strongest offline check available.
    """

    STRUCTURAL = "structural"
    DECODED = "decoded"


class Severity(str, Enum):
    """Notice severity, mirrors the toast variants of the web page."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


class ValidationResult(BaseModel):
    """
    Verdict of AddressValidator.

    `error` is present if and only if `is_valid` is False.
    """

    is_valid: bool
    """Whether the candidate passed every check"""

    error: str | None = None
    """User-displayable reason (only when invalid)"""

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_error_presence(self) -> "ValidationResult":
        if self.is_valid and self.error is not None:
            raise ValueError("valid result must not carry an error")
        if not self.is_valid and not (self.error and self.error.strip()):
            raise ValueError("invalid result requires a non-empty error")
        return self

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error)


class ConfirmationRequest(BaseModel):
    """
    Question put to the user right before a navigation attempt.

    `message` must be a static, developer-authored string; user input
    never ends up here.
    """

    url: str
    message: str = Field(min_length=1)

    model_config = {"frozen": True}


class Notice(BaseModel):
    """
    Short user-visible feedback (title + description + severity).

    Returned by PoolCreationFlow; the bot layer decides how to render it.
    """

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    severity: Severity = Severity.INFO

    model_config = {"frozen": True}
