"""Unit tests for the punycode converter tool implementations."""

import pytest

from punycode_mcp_server.tools import (
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_label_converter_impl,
)
from punycode_mcp_server.typedefs import ToolResult


class TestPunycodeConverter:
    """Test suite for the domain encoding tool."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_converts_idn(self):
        """Test an IDN is converted and the input echoed back."""
        result = await punycode_converter_impl("bücher.com")

        assert isinstance(result, ToolResult)
        assert result.success is True
        assert result.output == {"domain": "bücher.com", "punycode": "xn--bcher-kva.com"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_strips_whitespace(self):
        """Test surrounding whitespace is ignored."""
        result = await punycode_converter_impl("  münchen.de \n")

        assert result.output == {"domain": "münchen.de", "punycode": "xn--mnchen-3ya.de"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_ascii_domain_passes_through(self):
        """Test plain ASCII domains are returned as they are."""
        result = await punycode_converter_impl("example.com")

        assert result.success is True
        assert result.output["punycode"] == "example.com"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_overflow_is_reported(self):
        """Test encoder overflow becomes a failed ToolResult with its kind."""
        result = await punycode_converter_impl("a" * 5000 + "\U0010ffff" + ".com")

        assert result.success is False
        assert result.output is None
        assert result.details["kind"] == "overflow"
        assert result.details["labels"][1] == {
            "label": "com",
            "output": "com",
            "kind": None,
            "error": None,
        }

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_surrogate_is_reported_as_overflow(self):
        """Test a lone surrogate in the input fails with the overflow kind."""
        result = await punycode_converter_impl("a\ud800.com")

        assert result.success is False
        assert result.details["kind"] == "overflow"


class TestPunycodeDecoder:
    """Test suite for the domain decoding tool."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_decodes_ace(self):
        """Test an ACE domain is decoded."""
        result = await punycode_decoder_impl("xn--eckwd4c7c.xn--zckzah")

        assert result.success is True
        assert result.output == {
            "domain": "xn--eckwd4c7c.xn--zckzah",
            "unicode": "ドメイン.テスト",
        }

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_strips_whitespace(self):
        """Test the stripped domain is echoed back."""
        result = await punycode_decoder_impl("\txn--mnchen-3ya.de  ")

        assert result.output == {"domain": "xn--mnchen-3ya.de", "unicode": "münchen.de"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_surrogate_is_reported_as_overflow(self):
        """Test a label that decodes to a surrogate fails with the overflow kind."""
        result = await punycode_decoder_impl("xn--a-rc4g.com")

        assert result.success is False
        assert result.output is None
        assert result.details["kind"] == "overflow"
        assert result.details["labels"][0]["label"] == "xn--a-rc4g"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_invalid_character(self):
        """Test a bad digit is reported with its kind."""
        result = await punycode_decoder_impl("xn--bcher-k!a.com")

        assert result.success is False
        assert result.details["kind"] == "invalid_character"
        assert "xn--bcher-k!a" in result.error

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_label_too_long(self):
        """Test an over-long label is reported as a length error."""
        result = await punycode_decoder_impl("x" * 64 + ".com")

        assert result.success is False
        assert result.details["kind"] == "length"


class TestPunycodeLabelConverter:
    """Test suite for the single-label tool."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_encode(self):
        """Test label encoding."""
        result = await punycode_label_converter_impl("bücher", "encode")

        assert result.success is True
        assert result.output == {
            "label": "bücher",
            "direction": "encode",
            "result": "xn--bcher-kva",
        }

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_decode(self):
        """Test label decoding."""
        result = await punycode_label_converter_impl("xn--fiqs8s", "decode")

        assert result.success is True
        assert result.output["result"] == "中国"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_decode_failure(self):
        """Test label failures carry the error kind."""
        result = await punycode_label_converter_impl("xn--", "decode")

        assert result.success is False
        assert result.details == {"kind": "length"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_unknown_direction(self):
        """Test an unknown direction is rejected without raising."""
        result = await punycode_label_converter_impl("bücher", "reverse")

        assert result.success is False
        assert "reverse" in result.error
