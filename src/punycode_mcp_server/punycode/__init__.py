"""Punycode (RFC 3492) codec for internationalized domain name labels."""

from .bias import adapt, threshold
from .decoder import decode_label, has_ace_prefix
from .digits import decode_digit, encode_digit
from .domain import convert_label, decode, decode_domain, encode, encode_domain
from .encoder import encode_label
from .varint import decode_integer, encode_integer

__all__ = [
    "adapt",
    "convert_label",
    "decode",
    "decode_digit",
    "decode_domain",
    "decode_integer",
    "decode_label",
    "encode",
    "encode_digit",
    "encode_domain",
    "encode_integer",
    "encode_label",
    "has_ace_prefix",
    "threshold",
]
