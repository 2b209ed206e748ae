"""Typed accessors on top of the token cursor.

Every ``as_*`` method consumes the current token first and then
validates it, so a failed check leaves the cursor past the bad token.
"""
import logging
from typing import Iterable, Optional

import netifaces

from ..errors import InvalidArgument
from .classifiers import (
    DEFAULT_PREFIX,
    is_fqdn,
    is_mac_address,
    is_number,
    parse_ip_address,
    prefix_is_valid,
)
from .cursor import TokenCursor
from .values import Action, Endpoint, IpAddrMask, IpAddress, Toggle

logger = logging.getLogger(__name__)

# Remote syslog port used when ADDR[:PORT] has no port
SYSLOG_DEFAULT_PORT = 514

MAX_PORT = 65535


def list_interfaces() -> list[str]:
    """Names of the network interfaces currently present on the host."""
    return list(netifaces.interfaces())


def _try_parse_ip(text: str) -> Optional[IpAddress]:
    try:
        return parse_ip_address(text)
    except InvalidArgument:
        return None


def _parse_port(text: str) -> int:
    if is_number(text) and 0 < int(text) <= MAX_PORT:
        return int(text)
    raise InvalidArgument(
        f"Invalid port number: {text}, expected an integer in the range 1 - {MAX_PORT}"
    )


class Arguments(TokenCursor):
    """Command line arguments with validating accessors."""

    def as_one_of(self, expected: Iterable[str]) -> str:
        """Consume a token that must equal one of the expected literals."""
        expected = list(expected)
        arg = self.as_text()
        if arg not in expected:
            raise InvalidArgument(
                f"Invalid action: {arg}, expected one of [{', '.join(expected)}]"
            )
        return arg

    def as_action(self) -> Action:
        return Action(self.as_one_of(a.value for a in Action))

    def as_toggle(self) -> Toggle:
        return Toggle(self.as_one_of(t.value for t in Toggle))

    def as_number(
        self,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        """Consume an unsigned decimal number.

        Args:
            minimum: Optional inclusive lower bound
            maximum: Optional inclusive upper bound

        Raises:
            InvalidArgument: If the token is not a number or out of range
        """
        arg = self.as_text()
        if not is_number(arg):
            raise InvalidArgument(f"Invalid numeric argument: {arg}")

        value = int(arg)
        if (minimum is not None and value < minimum) or (
            maximum is not None and value > maximum
        ):
            low = minimum if minimum is not None else 0
            high = maximum if maximum is not None else "..."
            raise InvalidArgument(
                f"Invalid numeric argument: {arg}, expected a number in the range {low} - {high}"
            )
        return value

    def as_net_interface(self) -> str:
        """Consume the name of an existing network interface.

        The interface list is read from the host on every call.
        """
        arg = self.as_text()
        interfaces = list_interfaces()
        logger.debug(f"Host interfaces: {interfaces}")
        if arg not in interfaces:
            raise InvalidArgument(f"Invalid network interface name: {arg}")
        return arg

    def as_mac_address(self) -> str:
        arg = self.as_text()
        if not is_mac_address(arg):
            raise InvalidArgument(
                f"Invalid MAC address: {arg}, expected hex-digits-and-colons notation"
            )
        return arg

    def as_ip_address(self) -> IpAddress:
        """Consume an IPv4 or IPv6 address, returned in canonical form."""
        arg = self.as_text()
        ip = _try_parse_ip(arg)
        if ip is None:
            raise InvalidArgument(
                f"Invalid IP address: {arg}, expected IPv4 or IPv6 address"
            )
        return ip

    def as_ip_address_list(self) -> list[IpAddress]:
        """Consume all remaining tokens as IP addresses (at least one)."""
        values = [self.as_ip_address()]
        while self.peek() is not None:
            values.append(self.as_ip_address())
        return values

    def as_ip_addr_mask(self, default_prefix: bool = True) -> IpAddrMask:
        """Consume ``IP/PREFIX`` (or a bare ``IP``).

        The token is split on the last '/'. Address, prefix and the
        per-version prefix bound must all be valid together.

        Args:
            default_prefix: Accept a bare address and apply /24 (IPv4)
                or /64 (IPv6). If False the prefix is mandatory.

        Returns:
            IpAddrMask with canonical address
        """
        arg = self.as_text()
        addr, delim, mask = arg.rpartition("/")

        if delim:
            if is_number(mask):
                ip = _try_parse_ip(addr)
                if ip is not None and prefix_is_valid(ip.version, int(mask)):
                    return IpAddrMask(ip.version, ip.address, int(mask))
        elif default_prefix:
            ip = _try_parse_ip(arg)
            if ip is not None:
                return IpAddrMask(ip.version, ip.address, DEFAULT_PREFIX[ip.version])

        if default_prefix:
            expected = "IP[/PREFIX] (e.g. 10.0.0.1/8 or 192.168.1.1)"
        else:
            expected = "IP/PREFIX (e.g. 10.0.0.1/8)"
        raise InvalidArgument(f"Invalid argument: {arg}, expected {expected}")

    def as_ip_or_fqdn(self, value: Optional[str] = None) -> str:
        """Validate an IP address or host name.

        Args:
            value: Text to check instead of consuming the current token

        Returns:
            Canonical address for IP literals, otherwise the name itself
        """
        arg = self.as_text() if value is None else value

        ip = _try_parse_ip(arg)
        if ip is not None:
            return ip.address

        if is_fqdn(arg):
            return arg

        raise InvalidArgument(
            f"Invalid argument: {arg}, expected IP address or FQDN. "
            "Please, enter IPv4-addresses in dotted-decimal format."
        )

    def as_ip_or_fqdn_list(self) -> list[str]:
        """Consume all remaining tokens as servers (at least one)."""
        values = [self.as_ip_or_fqdn()]
        while self.peek() is not None:
            values.append(self.as_ip_or_fqdn())
        return values

    def as_addr_and_port(self) -> Endpoint:
        """Consume ``ADDR[:PORT]`` where ADDR is IPv4, FQDN or IPv6.

        Colon count decides the form:
            0   - address without port
            1   - ADDR:PORT
            2+  - IPv6; ``[IPv6]:PORT`` when bracketed, bare address otherwise

        The port defaults to 514 (syslog).
        """
        arg = self.as_text()
        colons = arg.count(":")

        if colons == 0:
            return Endpoint(self.as_ip_or_fqdn(arg), SYSLOG_DEFAULT_PORT)

        if colons == 1:
            host, _, port = arg.partition(":")
            return Endpoint(self.as_ip_or_fqdn(host), _parse_port(port))

        if not arg.startswith("["):
            return Endpoint(self.as_ip_or_fqdn(arg), SYSLOG_DEFAULT_PORT)

        close = arg.find("]")
        if close < 0:
            raise InvalidArgument(
                f"Invalid argument: {arg}, expected [IPv6-ADDRESS]:PORT"
            )
        host = self.as_ip_or_fqdn(arg[1:close])
        rest = arg[close + 1:]
        if not rest:
            return Endpoint(host, SYSLOG_DEFAULT_PORT)
        if not rest.startswith(":"):
            raise InvalidArgument(
                f"Invalid argument: {arg}, expected [IPv6-ADDRESS]:PORT"
            )
        return Endpoint(host, _parse_port(rest[1:]))
