"""Bootstring parameters for Punycode as fixed by RFC 3492, section 5."""

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80

ACE_PREFIX = "xn--"
DELIMITER = "-"

# Integer arithmetic is checked against an unsigned 32-bit range so that
# overflow behaves like the reference implementations.
MAX_INT = 0xFFFFFFFF
MAX_CODE_POINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF

MAX_LABEL_LENGTH = 63
