"""
Solana mint address validation.

Checks that a string is structurally a Solana public key before it is
ever put into a URL. This is an offline check only: it never asks the
chain whether the mint exists.

Solana addresses:
- Use base58 encoding (no 0, O, I, l characters)
- Decode to exactly 32 bytes
- Are 32-44 characters when encoded
"""

import base58

from poolbot.core.models import AddressStrictness, ValidationResult

BASE58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))

MIN_ADDRESS_LENGTH = 32
MAX_ADDRESS_LENGTH = 44
PUBKEY_BYTES = 32

# All-zero public key (System Program id); never a token mint
ZERO_ADDRESS = "1" * 32

# Every character str.splitlines() treats as a line boundary
LINE_BREAKS = frozenset("\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029")

ERROR_EMPTY = "Token address is required."
ERROR_MULTILINE = "Token address must be a single line."
ERROR_WHITESPACE = "Token address must not start or end with spaces."
ERROR_BAD_CHARACTERS = (
    "Token address contains invalid characters "
    "(base58 excludes 0, O, I and l)."
)
ERROR_ZERO_ADDRESS = "The all-zero address cannot be used as a token mint."
ERROR_BAD_ENCODING = "Token address does not decode to a 32-byte public key."


def _length_error(length: int) -> str:
    return (
        f"Token address has {length} characters "
        f"(expected {MIN_ADDRESS_LENGTH}-{MAX_ADDRESS_LENGTH})."
    )


def validate_mint_address(
    candidate: str,
    strictness: AddressStrictness = AddressStrictness.STRUCTURAL,
) -> ValidationResult:
    """
    Validate a token mint address.

    Input is checked exactly as typed. Surrounding whitespace is an error
    rather than something to trim, so what the user sees is what gets
    used.

    Args:
        candidate: Raw user input
        strictness: STRUCTURAL (length + alphabet) or DECODED
            (additionally base58-decode to 32 bytes)

    Returns:
        ValidationResult
        - is_valid=True if the address passed every check
        - is_valid=False with a user-displayable reason otherwise

    Examples:
        >>> validate_mint_address("11111111111111111111111111111112").is_valid
        True

        >>> validate_mint_address("").error
        'Token address is required.'
    """
    if not candidate:
        return ValidationResult.fail(ERROR_EMPTY)

    # Multi-line input fails regardless of length
    if any(char in LINE_BREAKS for char in candidate):
        return ValidationResult.fail(ERROR_MULTILINE)

    if candidate != candidate.strip():
        return ValidationResult.fail(ERROR_WHITESPACE)

    if not MIN_ADDRESS_LENGTH <= len(candidate) <= MAX_ADDRESS_LENGTH:
        return ValidationResult.fail(_length_error(len(candidate)))

    if not set(candidate) <= BASE58_ALPHABET:
        return ValidationResult.fail(ERROR_BAD_CHARACTERS)

    if candidate == ZERO_ADDRESS:
        return ValidationResult.fail(ERROR_ZERO_ADDRESS)

    if strictness == AddressStrictness.DECODED:
        try:
            decoded = base58.b58decode(candidate)
        except ValueError:
            return ValidationResult.fail(ERROR_BAD_ENCODING)
        if len(decoded) != PUBKEY_BYTES:
            return ValidationResult.fail(ERROR_BAD_ENCODING)

    return ValidationResult.ok()


def is_valid_mint_address(
    candidate: str,
    strictness: AddressStrictness = AddressStrictness.STRUCTURAL,
) -> bool:
    """
    Simple boolean check for mint address validity.

    Convenience wrapper around validate_mint_address for
    cases where you only need a boolean result.
    """
    return validate_mint_address(candidate, strictness).is_valid
