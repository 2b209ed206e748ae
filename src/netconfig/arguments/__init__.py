"""Command line argument parsing and validation.

Usage:
    from netconfig.arguments import Arguments

    args = Arguments(["add", "10.0.0.5/16", "10.0.0.1"])
    action = args.as_action()
    ver, ip, prefix = args.as_ip_addr_mask()
    gateway = args.as_ip_address()
    args.expect_end()
"""
from .classifiers import (
    is_fqdn,
    is_mac_address,
    is_number,
    parse_ip_address,
    prefix_is_valid,
)
from .cursor import TokenCursor
from .parser import Arguments, SYSLOG_DEFAULT_PORT, list_interfaces
from .values import Action, Endpoint, IpAddrMask, IpAddress, IpVer, Toggle

__all__ = [
    "Arguments",
    "TokenCursor",
    "SYSLOG_DEFAULT_PORT",
    "list_interfaces",
    # Values
    "Action",
    "Toggle",
    "IpVer",
    "IpAddress",
    "IpAddrMask",
    "Endpoint",
    # Classifiers
    "is_number",
    "is_fqdn",
    "is_mac_address",
    "parse_ip_address",
    "prefix_is_valid",
]
