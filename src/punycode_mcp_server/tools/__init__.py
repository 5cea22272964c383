"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_label_converter_impl,
)
from .validator import validate_fqdn

__ALL__ = [
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_label_converter_impl,
    validate_fqdn,
]
