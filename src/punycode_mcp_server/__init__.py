"""
MCP Punycode Server - RFC 3492 Punycode conversion of internationalized domain names.
"""

from .punycode import decode, decode_label, encode, encode_label
from .server import PunycodeMCPServer, run_server

__all__ = [
    "PunycodeMCPServer",
    "decode",
    "decode_label",
    "encode",
    "encode_label",
    "run_server",
]
