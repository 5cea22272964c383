"""Generalized variable-length integers (RFC 3492, section 3.3).

Each integer is written little-endian in base 36 with a per-position
threshold ``t``. A digit below ``t`` terminates the integer, so no separator
is needed between consecutive integers of a digit segment.
"""

from ..exceptions import InvalidCharacterError, PunycodeOverflowError
from .bias import threshold
from .constants import BASE, MAX_INT
from .digits import decode_digit, encode_digit


def encode_integer(value: int, bias: int) -> str:
    """Encode a non-negative integer as a generalized variable-length integer."""
    digits = []
    q = value
    k = BASE
    while True:
        t = threshold(k, bias)
        if q < t:
            digits.append(encode_digit(q))
            return "".join(digits)
        digits.append(encode_digit(t + (q - t) % (BASE - t)))
        q = (q - t) // (BASE - t)
        k += BASE


def decode_integer(segment: str, start: int, bias: int) -> tuple[int, int]:
    """Read one generalized variable-length integer from ``segment``.

    Args:
        segment: The extended-digit segment of an ACE label.
        start: Index of the first digit of the integer.
        bias: Current bias.

    Returns:
        tuple[int, int]: The decoded value and the index just past its last digit.

    Raises:
        InvalidCharacterError: On a non-digit character or a segment that
            ends before the terminating digit.
        PunycodeOverflowError: If the value exceeds ``MAX_INT``.
    """
    value = 0
    weight = 1
    pos = start
    k = BASE
    while True:
        if pos >= len(segment):
            raise InvalidCharacterError("Digit segment ends inside a variable-length integer")
        digit = decode_digit(segment[pos])
        pos += 1
        if digit > (MAX_INT - value) // weight:
            raise PunycodeOverflowError("Decoded integer exceeds 32 bits")
        value += digit * weight
        t = threshold(k, bias)
        if digit < t:
            return value, pos
        if weight > MAX_INT // (BASE - t):
            raise PunycodeOverflowError("Digit weight exceeds 32 bits")
        weight *= BASE - t
        k += BASE
