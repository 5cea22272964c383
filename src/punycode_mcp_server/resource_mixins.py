"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from typing import Any, Dict

from .punycode import constants


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: Dict[str, Any]  # Configuration dictionary

    def register_codec_resources(self) -> None:
        """Register Punycode codec resources such as the bootstring parameters."""

        @self.server.resource(
            uri="resource://punycode_parameters",
            name="punycode_parameters",
            description="The RFC 3492 bootstring parameters used by the punycode codec.",
        )
        async def get_punycode_parameters() -> Dict[str, Any]:
            return await self._get_punycode_parameters_impl()

    async def _get_punycode_parameters_impl(self) -> Dict[str, Any]:
        """Implementation to get the codec parameter table."""
        return {
            "base": constants.BASE,
            "tmin": constants.TMIN,
            "tmax": constants.TMAX,
            "skew": constants.SKEW,
            "damp": constants.DAMP,
            "initial_bias": constants.INITIAL_BIAS,
            "initial_n": constants.INITIAL_N,
            "ace_prefix": constants.ACE_PREFIX,
            "delimiter": constants.DELIMITER,
            "max_label_length": constants.MAX_LABEL_LENGTH,
        }
