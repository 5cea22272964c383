"""Domain-level Punycode conversion.

A domain name is split on ``.`` and every non-empty label is converted on its
own. Empty labels (leading, trailing or consecutive dots) are kept as they are.
Two flavours are offered: :func:`encode` and :func:`decode` raise the first
label's :class:`PunycodeError`, while :func:`encode_domain` and
:func:`decode_domain` record the outcome of every label in a
:class:`DomainResult`.
"""

from collections.abc import Callable
from typing import Literal

from fastmcp.utilities.logging import get_logger

from ..exceptions import PunycodeError
from ..typedefs import DomainResult, LabelResult
from .decoder import decode_label
from .encoder import encode_label

logger = get_logger(__name__)

Direction = Literal["encode", "decode"]

_CONVERTERS: dict[str, Callable[[str], str]] = {
    "encode": encode_label,
    "decode": decode_label,
}


def _map_labels(domain: str, converter: Callable[[str], str]) -> str:
    return ".".join(converter(label) if label else label for label in domain.split("."))


def encode(domain: str) -> str:
    """Convert a Unicode domain name to its ASCII-compatible form.

    >>> encode("bücher.com")
    'xn--bcher-kva.com'
    """
    return _map_labels(domain, encode_label)


def decode(domain: str) -> str:
    """Convert an ASCII-compatible domain name back to Unicode.

    >>> decode("xn--bcher-kva.com")
    'bücher.com'
    """
    return _map_labels(domain, decode_label)


def convert_label(label: str, direction: Direction) -> LabelResult:
    """Convert one label without raising on codec failures.

    Args:
        label: The label to convert.
        direction: ``"encode"`` or ``"decode"``.

    Returns:
        LabelResult: The converted label, or the error kind and message.
    """
    try:
        converter = _CONVERTERS[direction]
    except KeyError as e:
        raise ValueError(f"Unknown conversion direction: {direction!r}") from e
    try:
        return LabelResult(success=True, label=label, output=converter(label))
    except PunycodeError as e:
        logger.debug("Failed to %s label %r: %s", direction, label, e)
        return LabelResult(success=False, label=label, kind=e.kind, error=str(e))


def _convert_domain(domain: str, direction: Direction) -> DomainResult:
    parts: list[str] = []
    results: list[LabelResult] = []
    first_failure: LabelResult | None = None
    for label in domain.split("."):
        if not label:
            parts.append(label)
            continue
        result = convert_label(label, direction)
        results.append(result)
        if result.success and result.output is not None:
            parts.append(result.output)
        elif first_failure is None:
            first_failure = result

    if first_failure is not None:
        return DomainResult(
            success=False,
            domain=domain,
            labels=results,
            kind=first_failure.kind,
            error=f"Label {first_failure.label!r}: {first_failure.error}",
        )
    return DomainResult(success=True, domain=domain, output=".".join(parts), labels=results)


def encode_domain(domain: str) -> DomainResult:
    """Encode every label of ``domain`` and report per-label outcomes."""
    return _convert_domain(domain, "encode")


def decode_domain(domain: str) -> DomainResult:
    """Decode every label of ``domain`` and report per-label outcomes."""
    return _convert_domain(domain, "decode")
