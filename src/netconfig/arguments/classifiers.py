"""Pure predicates and parsers used by the argument engine.

None of these touch the token cursor, so they can be reused on
substrings (address part of ``IP/PREFIX``, host part of ``HOST:PORT``).
"""
import ipaddress
import re
from typing import Optional

from ..errors import InvalidArgument
from .values import IpAddress, IpVer

# Longest accepted numeric token, enough for any 32-bit value
MAX_NUMERIC_LEN = 10

# Prefix length upper bounds per IP version
MAX_PREFIX = {
    IpVer.V4: 32,
    IpVer.V6: 64,
}

# Prefix used when IP[/PREFIX] is given without the prefix
DEFAULT_PREFIX = {
    IpVer.V4: 24,
    IpVer.V6: 64,
}

# Hostname grammar (RFC 1123, RFC 2181, RFC 1738):
# - whole name is at most 255 octets, separators included
# - at most 127 labels of 1-63 characters each
# - labels never start or end with a hyphen, may be entirely numeric
# - trailing dot is optional
FQDN_PATTERN = re.compile(
    r"(?=.{1,255}$)"
    r"((?!-)[a-z0-9-]{0,62}[a-z0-9]\.){0,126}"
    r"(?!-)[a-z0-9-]{0,62}[a-z0-9]\.?",
    re.IGNORECASE | re.ASCII,
)

# The rightmost label of a multi-label name never starts with a digit
# (RFC 1738, section 3.1), which also keeps "10.0.0.256" out.
TOP_LABEL_PATTERN = re.compile(
    r"(?:^|\.)[0-9][a-z0-9-]*\.?$", re.IGNORECASE | re.ASCII
)

_DIGITS = frozenset("0123456789")


def is_number(arg: Optional[str]) -> bool:
    """Check for an unsigned decimal number of at most 10 digits."""
    if not arg or len(arg) > MAX_NUMERIC_LEN:
        return False
    return all(ch in _DIGITS for ch in arg)


def parse_ip_address(arg: Optional[str]) -> IpAddress:
    """Parse IPv4 (dotted-decimal) or IPv6 literal.

    Args:
        arg: Address text, without prefix, port or zone index

    Returns:
        IpAddress with the canonical text of the parsed address

    Raises:
        InvalidArgument: If the text is not exactly an IP address
    """
    if arg and arg.strip() == arg and "%" not in arg:
        for version, factory in (
            (IpVer.V4, ipaddress.IPv4Address),
            (IpVer.V6, ipaddress.IPv6Address),
        ):
            try:
                addr = factory(arg)
            except ValueError:
                continue
            return IpAddress(version, addr.compressed)

    raise InvalidArgument(f"Invalid IP address: {arg}")


def prefix_is_valid(version: IpVer, prefix: int) -> bool:
    """Check prefix length in bits; /0 is never valid."""
    return 0 < prefix <= MAX_PREFIX[version]


def is_fqdn(arg: Optional[str]) -> bool:
    """Check host name against the FQDN grammar."""
    if not arg or not FQDN_PATTERN.fullmatch(arg):
        return False
    # Single label is a bare host name and may be all digits
    if "." in arg.rstrip("."):
        return not TOP_LABEL_PATTERN.search(arg)
    return True


def is_mac_address(arg: Optional[str]) -> bool:
    """Check for six hex octets joined by one separator (':' or '-')."""
    if not arg:
        return False
    for sep in (":", "-"):
        octets = arg.split(sep)
        if len(octets) == 6 and all(_is_hex_octet(o) for o in octets):
            return True
    return False


def _is_hex_octet(text: str) -> bool:
    return 0 < len(text) <= 2 and all(ch in "0123456789abcdefABCDEF" for ch in text)
