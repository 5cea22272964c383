"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from .tools import (
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_label_converter_impl,
    validate_fqdn,
)
from .typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""

        @self.server.tool(
            name="punycode_converter",
            description=(
                "Use this tool to convert the specified internationalized domain name (IDN) "
                "into punycode format."
            ),
            tags=set(("dns", "idn", "punycode", "converter", "encode")),
            enabled=True,
        )
        async def punycode_converter(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await punycode_converter_impl(domain)

        @self.server.tool(
            name="punycode_decoder",
            description=(
                "Use this tool to convert a punycode (xn--) domain name back into its "
                "internationalized Unicode form."
            ),
            tags=set(("dns", "idn", "punycode", "converter", "decode")),
            enabled=True,
        )
        async def punycode_decoder(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding punycode domain `{domain}`.")
            return await punycode_decoder_impl(domain)

        @self.server.tool(
            name="punycode_label_converter",
            description=(
                "Use this tool to encode or decode a single domain label. Set `direction` "
                "to `encode` or `decode`. Failures report the error kind: `length`, "
                "`invalid_character` or `overflow`."
            ),
            tags=set(("idn", "punycode", "label")),
            enabled=self.config.get("features", {}).get("label_tools", False),
        )
        async def punycode_label_converter(
            label: str, direction: str, ctx: Context
        ) -> ToolResult:
            await ctx.info(f"Performing punycode {direction} of label `{label}`.")
            return await punycode_label_converter_impl(label, direction.strip().lower())

        @self.server.tool(
            name="validate_dns_fqdn",
            description=(
                "Use this tool to validate a Fully Qualified Domain Name (FQDN) "
                "according to DNS RFC rules. Internationalized labels are converted "
                "to punycode first."
            ),
            tags=set(("dns", "validation", "FQDN")),
            enabled=self.config.get("features", {}).get("fqdn_validation", False),
        )
        async def validate_dns_fqdn(ctx: Context, domain: str) -> ToolResult:
            await ctx.info(f"Validating FQDN: {domain}")
            result, message = await validate_fqdn(domain=domain)
            if result:
                return ToolResult(
                    success=True,
                    output=f"`{domain}` is a syntactically valid FQDN.",
                    details={"message": message},
                )
            else:
                return ToolResult(success=False, error=f"`{domain}` is not a valid FQDN: {message}")
