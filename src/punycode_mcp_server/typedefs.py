"""Type definitions for Punycode conversion results.

This module provides the dataclasses that define structured result types used
throughout the Punycode Model Context Protocol (MCP) server implementation.

The types defined here are used to:
- Report the outcome of a single label conversion, including its error kind
- Aggregate label outcomes for a whole domain name
- Return tool output to MCP clients in a consistent shape
"""

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ErrorKind


@dataclass
class LabelResult:
    """Stores the result of converting one domain label."""

    success: bool
    label: str
    output: str | None = None
    kind: ErrorKind | None = None
    error: str | None = None


@dataclass
class DomainResult:
    """Stores the result of converting every label of a domain name.

    ``kind`` and ``error`` describe the first label that failed.
    """

    success: bool
    domain: str
    output: str | None = None
    labels: list[LabelResult] = field(default_factory=list)
    kind: ErrorKind | None = None
    error: str | None = None


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
