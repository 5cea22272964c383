"""Base-36 digit codec used by the Punycode integer representation."""

from ..exceptions import InvalidCharacterError
from .constants import BASE

DIGITS = "abcdefghijklmnopqrstuvwxyz0123456789"


def encode_digit(value: int) -> str:
    """Return the lowercase ASCII character for a digit value in 0..35."""
    if not 0 <= value < BASE:
        raise ValueError(f"Digit value {value} outside 0..{BASE - 1}")
    return DIGITS[value]


def decode_digit(char: str) -> int:
    """Return the digit value of an ASCII letter (either case) or decimal digit.

    Raises:
        InvalidCharacterError: If ``char`` is not in ``[a-zA-Z0-9]``.
    """
    code = ord(char)
    if 0x61 <= code <= 0x7A:  # a-z
        return code - 0x61
    if 0x41 <= code <= 0x5A:  # A-Z
        return code - 0x41
    if 0x30 <= code <= 0x39:  # 0-9
        return code - 0x30 + 26
    raise InvalidCharacterError(f"Unexpected character {char!r} in digit segment")
