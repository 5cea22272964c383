"""Punycode label encoder (RFC 3492, section 6.3)."""

from ..exceptions import PunycodeOverflowError
from .bias import adapt
from .constants import (
    ACE_PREFIX,
    DELIMITER,
    INITIAL_BIAS,
    INITIAL_N,
    MAX_INT,
    SURROGATE_FIRST,
    SURROGATE_LAST,
)
from .varint import encode_integer


def _ascii_lower(code_point: int) -> str:
    if 0x41 <= code_point <= 0x5A:
        code_point += 0x20
    return chr(code_point)


def encode_label(label: str) -> str:
    """Encode a single Unicode label into its ASCII-compatible form.

    Labels without extended code points are returned unchanged. Otherwise the
    basic code points are lower-cased and copied in front of the delimiter,
    and the extended code points are written as deltas in ascending order of
    value, prefixed with ``xn--``.

    Args:
        label (str): One domain label, without dots.

    Returns:
        str: The ACE form of the label.

    Raises:
        PunycodeOverflowError: If the label holds a surrogate code point or
            the delta accumulator exceeds 32 bits.
    """
    code_points = [ord(char) for char in label]
    extended = sorted({cp for cp in code_points if cp >= INITIAL_N})
    for cp in extended:
        if SURROGATE_FIRST <= cp <= SURROGATE_LAST:
            raise PunycodeOverflowError(f"Code point U+{cp:X} is out of range", label)
    if not extended:
        return label

    output = [_ascii_lower(cp) for cp in code_points if cp < INITIAL_N]
    basic_count = handled = len(output)
    if output:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    for m in extended:
        if m - n > (MAX_INT - delta) // (handled + 1):
            raise PunycodeOverflowError("Delta overflow while encoding", label)
        delta += (m - n) * (handled + 1)
        n = m

        for cp in code_points:
            if cp < n:
                delta += 1
                if delta > MAX_INT:
                    raise PunycodeOverflowError("Delta overflow while encoding", label)
            elif cp == n:
                output.append(encode_integer(delta, bias))
                bias = adapt(delta, handled + 1, handled == basic_count)
                delta = 0
                handled += 1

        delta += 1
        n += 1

    return ACE_PREFIX + "".join(output)
