from ..punycode import convert_label, decode_domain, encode_domain
from ..punycode.domain import Direction
from ..typedefs import DomainResult, ToolResult


def _label_details(result: DomainResult) -> dict:
    return {
        "labels": [
            {
                "label": label.label,
                "output": label.output,
                "kind": label.kind.value if label.kind else None,
                "error": label.error,
            }
            for label in result.labels
        ]
    }


async def punycode_converter_impl(domain: str) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name to convert to punycode.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    domain = domain.strip()
    result = encode_domain(domain)
    if not result.success:
        details = _label_details(result)
        details["kind"] = result.kind.value if result.kind else None
        return ToolResult(success=False, error=result.error, details=details)
    return ToolResult(success=True, output={"domain": domain, "punycode": result.output})


async def punycode_decoder_impl(domain: str) -> ToolResult:
    """Convert a punycode (ACE) domain name back into its Unicode form.

    Args:
        domain (str): The ASCII-compatible domain name to decode.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    domain = domain.strip()
    result = decode_domain(domain)
    if not result.success:
        details = _label_details(result)
        details["kind"] = result.kind.value if result.kind else None
        return ToolResult(success=False, error=result.error, details=details)
    return ToolResult(success=True, output={"domain": domain, "unicode": result.output})


async def punycode_label_converter_impl(label: str, direction: Direction) -> ToolResult:
    """Convert a single label in the requested direction.

    Args:
        label (str): One domain label, without dots.
        direction (str): ``encode`` for Unicode to ACE, ``decode`` for ACE to Unicode.

    Returns:
        ToolResult: The converted label or error details with the error kind.
    """
    if direction not in ("encode", "decode"):
        return ToolResult(
            success=False,
            error=f"Unknown direction `{direction}`, expected `encode` or `decode`.",
        )
    result = convert_label(label.strip(), direction)
    if not result.success:
        return ToolResult(
            success=False,
            error=result.error,
            details={"kind": result.kind.value if result.kind else None},
        )
    return ToolResult(
        success=True,
        output={"label": result.label, "direction": direction, "result": result.output},
    )
