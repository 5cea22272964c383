"""Exception types and error processing for Punycode conversions.

This module provides the exception hierarchy raised by the Punycode codec and
the helpers that turn codec and DNS name errors into user-friendly messages
for the Model Context Protocol (MCP) server.

The module serves three main purposes:
1. Define an error kind enumeration so callers branch on error identity
2. Define the codec exceptions, each tagged with its error kind
3. Map codec and dnspython exceptions to human-readable messages
"""

from enum import Enum

import dns.exception
import dns.name


class ErrorKind(str, Enum):
    """Identity of a failed label conversion."""

    LENGTH = "length"
    INVALID_CHARACTER = "invalid_character"
    OVERFLOW = "overflow"


class PunycodeError(ValueError):
    """Base exception for Punycode label conversion failures."""

    kind: ErrorKind

    def __init__(self, message: str, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label


class LabelLengthError(PunycodeError):
    """Raised when a label to decode is not between 1 and 63 characters long."""

    kind = ErrorKind.LENGTH


class InvalidCharacterError(PunycodeError):
    """Raised when an ACE label contains a character outside its alphabet."""

    kind = ErrorKind.INVALID_CHARACTER


class PunycodeOverflowError(PunycodeError):
    """Raised when an intermediate value leaves the representable range."""

    kind = ErrorKind.OVERFLOW


def handle_codec_error(error: Exception) -> str:
    """Convert Punycode codec exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, LabelLengthError):
        err_str = f"Label length out of range: {str(error)}"
    if isinstance(error, InvalidCharacterError):
        err_str = f"Invalid character in label: {str(error)}"
    if isinstance(error, PunycodeOverflowError):
        err_str = f"Punycode overflow: {str(error)}"
    return err_str


def handle_dns_error(error: Exception) -> str:
    """Convert DNS name exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    # Specific name errors below subclass dns.exception.SyntaxError.
    if isinstance(error, dns.exception.SyntaxError):
        err_str = f"Invalid domain name syntax: {str(error)}"
    if isinstance(error, dns.name.LabelTooLong):
        err_str = "Domain name label too long"
    if isinstance(error, dns.name.NameTooLong):
        err_str = "Domain name too long"
    if isinstance(error, dns.name.EmptyLabel):
        err_str = "Domain name contains an empty label"
    if isinstance(error, dns.name.BadEscape):
        err_str = "Invalid escape sequence in domain name"
    return err_str
