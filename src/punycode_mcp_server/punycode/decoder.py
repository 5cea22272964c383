"""Punycode label decoder (RFC 3492, section 6.2)."""

from ..exceptions import InvalidCharacterError, LabelLengthError, PunycodeOverflowError
from .bias import adapt
from .constants import (
    ACE_PREFIX,
    DELIMITER,
    INITIAL_BIAS,
    INITIAL_N,
    MAX_CODE_POINT,
    MAX_INT,
    MAX_LABEL_LENGTH,
    SURROGATE_FIRST,
    SURROGATE_LAST,
)
from .varint import decode_integer


def has_ace_prefix(label: str) -> bool:
    """Return True if the label starts with ``xn--`` in any letter case."""
    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def decode_label(label: str | bytes) -> str:
    """Decode a single ACE label back into Unicode.

    Labels that do not start with ``xn--`` are returned unchanged.

    Args:
        label (str | bytes): One domain label, without dots. Bytes are read as ASCII.

    Returns:
        str: The Unicode form of the label.

    Raises:
        LabelLengthError: If the label is not 1 to 63 characters long, or
            nothing follows the ``xn--`` prefix.
        InvalidCharacterError: On non-ASCII input, a non-basic character in
            the literal part, or a character outside ``[a-zA-Z0-9]`` in the
            digit segment.
        PunycodeOverflowError: If a decoded value leaves the 32-bit range or
            names a surrogate or a code point above U+10FFFF.
    """
    if isinstance(label, bytes):
        try:
            label = label.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidCharacterError("Label is not ASCII") from e

    if not 1 <= len(label) <= MAX_LABEL_LENGTH:
        raise LabelLengthError(
            f"Label length {len(label)} is not between 1 and {MAX_LABEL_LENGTH}", label
        )
    if not has_ace_prefix(label):
        return label

    encoded = label[len(ACE_PREFIX) :]
    if not encoded:
        raise LabelLengthError("Nothing follows the ACE prefix", label)

    split = encoded.rfind(DELIMITER)
    if split >= 0:
        output = list(encoded[:split])
        digits = encoded[split + 1 :]
    else:
        output = []
        digits = encoded
    if any(ord(char) >= INITIAL_N for char in output):
        raise InvalidCharacterError("Non-basic character before the delimiter", label)

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    pos = 0
    while pos < len(digits):
        old_i = i
        try:
            delta, pos = decode_integer(digits, pos, bias)
        except (InvalidCharacterError, PunycodeOverflowError) as e:
            e.label = label
            raise
        if delta > MAX_INT - i:
            raise PunycodeOverflowError("Insertion index exceeds 32 bits", label)
        i += delta

        length = len(output) + 1
        bias = adapt(i - old_i, length, old_i == 0)
        if i // length > MAX_INT - n:
            raise PunycodeOverflowError("Code point exceeds 32 bits", label)
        n += i // length
        if n > MAX_CODE_POINT or SURROGATE_FIRST <= n <= SURROGATE_LAST:
            raise PunycodeOverflowError(f"Code point U+{n:X} is out of range", label)
        i %= length
        output.insert(i, chr(n))
        i += 1

    return "".join(output)
