import re
from typing import Tuple

import dns.exception
import dns.name

from ...exceptions import PunycodeError, handle_codec_error, handle_dns_error
from ...punycode import encode

# Letters, digits, hyphens; cannot start or end with a hyphen.
LABEL_REGEX = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


async def validate_fqdn(domain: str) -> Tuple[bool, str]:
    """
    Validate a Fully Qualified Domain Name (FQDN) according to DNS RFC rules.
    Covers RFC 1035, RFC 1123, and Punycode conversion of IDN labels.

    Returns:
        Tuple[bool, str]: (is_valid, message) where is_valid is True if the FQDN
        is valid and message describes the result or error.
    """

    if not isinstance(domain, str) or not domain:
        return False, "Domain must be a non-empty string"

    # Remove a trailing dot if present (FQDN canonical form)
    if domain.endswith("."):
        domain = domain[:-1]

    # Convert IDN labels to ASCII (punycode). If this fails → invalid.
    try:
        domain_ascii = encode(domain)
    except PunycodeError as e:
        return False, f"Invalid IDN encoding: {handle_codec_error(e)}"

    # Wire-format limits: empty labels, 63 octet labels, 255 octet names
    try:
        dns.name.from_text(domain_ascii)
    except dns.exception.DNSException as e:
        return False, handle_dns_error(e)

    for label in domain_ascii.split("."):
        if not LABEL_REGEX.match(label):
            description = (
                f"Label '{label}' is invalid (must be 1-63 chars, "
                "alphanumeric/hyphen, not start/end with hyphen)"
            )
            return False, description

    return True, f"Valid FQDN ({domain_ascii})"
