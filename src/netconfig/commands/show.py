"""Printing of the current network configuration: ``show``"""
import logging
from typing import Any, Optional

from ..arguments import Arguments
from ..errors import ServiceError
from ..service import ManagedObjects, addresses_from_objects, objects
from .base import CommandContext

logger = logging.getLogger(__name__)

# Width of the property title column
TITLE_WIDTH = 20

BOOL_ENABLED = ("Disabled", "Enabled")
BOOL_LINK = ("DOWN", "UP")

DHCP_MODES = {
    objects.DHCP_CONF_BOTH: "Enabled (IPv4, IPv6)",
    objects.DHCP_CONF_V4: "Enabled (IPv4 only)",
    objects.DHCP_CONF_V6: "Enabled (IPv6 only)",
    objects.DHCP_CONF_NONE: "Disabled",
}


def format_value(
    value: Any,
    bool_values: tuple[str, str] = BOOL_ENABLED,
    names: Optional[dict[str, str]] = None,
) -> Optional[str]:
    """Render a property value; None means the property is missing."""
    names = names or {}
    if value is None:
        return None
    if isinstance(value, bool):
        return bool_values[1] if value else bool_values[0]
    if isinstance(value, (list, tuple)):
        return ", ".join(names.get(v, str(v)) for v in value)
    if isinstance(value, str):
        return names.get(value, value)
    return str(value)


def format_line(title: str, value: Optional[str]) -> str:
    """Format one ``  Title:   value`` line; N/A for missing, '-' for empty."""
    if value is None:
        value = "N/A"
    elif not value:
        value = "-"
    return f"  {title}: {'':{max(TITLE_WIDTH - len(title), 0)}}{value}"


class Show:
    """Prints network configuration published by the service."""

    def __init__(self, managed: ManagedObjects):
        self.managed = managed
        self.lines: list[str] = []

    def properties(self, path: str, interface: str) -> dict[str, Any]:
        return self.managed.get(path, {}).get(interface, {})

    def add(
        self,
        title: str,
        props: dict[str, Any],
        name: str,
        bool_values: tuple[str, str] = BOOL_ENABLED,
        names: Optional[dict[str, str]] = None,
    ) -> None:
        self.lines.append(format_line(title, format_value(props.get(name), bool_values, names)))

    def render(self, syslog: Optional[dict[str, Any]] = None) -> str:
        self.lines = []

        cfg = self.properties(objects.OBJECT_CONFIG, objects.SYSCFG_INTERFACE)
        self.lines.append("Global network configuration:")
        self.add("Host name", cfg, objects.SYSCFG_HOSTNAME)
        self.add("Default IPv4 gateway", cfg, objects.SYSCFG_DEFAULT_GW4)
        self.add("Default IPv6 gateway", cfg, objects.SYSCFG_DEFAULT_GW6)

        dhcp = self.properties(objects.OBJECT_DHCP, objects.DHCP_INTERFACE)
        self.lines.append("Global DHCP configuration:")
        self.add("DNS over DHCP", dhcp, objects.DHCP_DNS_ENABLED)
        self.add("NTP over DHCP", dhcp, objects.DHCP_NTP_ENABLED)

        self.lines.append("Remote syslog server:")
        if syslog is None:
            self.lines.append(format_line("Address", None))
        elif not syslog.get(objects.SYSLOG_ADDRESS):
            self.lines.append(format_line("Address", "Disabled"))
        else:
            self.add("Address", syslog, objects.SYSLOG_ADDRESS)
            self.add("Port", syslog, objects.SYSLOG_PORT)

        for path in sorted(self.managed):
            if objects.ETH_INTERFACE in self.managed[path]:
                self._render_interface(path)

        return "\n".join(self.lines)

    def _render_interface(self, path: str) -> None:
        eth = self.properties(path, objects.ETH_INTERFACE)
        vlan = self.properties(path, objects.VLAN_INTERFACE)
        mac = self.properties(path, objects.MAC_INTERFACE)

        name = eth.get(objects.ETH_NAME) or path.rsplit("/", 1)[-1]
        self.lines.append(f"Ethernet interface {name}:")
        if vlan:
            self.add("VLAN Id", vlan, objects.VLAN_ID)
        self.add("MAC address", mac, objects.MAC_ADDRESS)
        self.add("Link state", eth, objects.ETH_LINK_UP, BOOL_LINK)
        self.add("Link speed", eth, objects.ETH_SPEED)

        for addr in addresses_from_objects(self.managed, path):
            value = f"{addr.address}/{addr.prefix}"
            if addr.gateway:
                value += f", gateway {addr.gateway}"
            self.lines.append(format_line("IP address", value))

        self.add("DHCP", eth, objects.ETH_DHCP_ENABLED, names=DHCP_MODES)
        self.add("Domain names", eth, objects.ETH_DOMAIN_NAME)
        self.add("DNS servers", eth, objects.ETH_NAME_SERVERS)
        self.add("Static DNS servers", eth, objects.ETH_STATIC_NAME_SERVERS)
        self.add("NTP servers", eth, objects.ETH_NTP_SERVERS)


async def cmd_show(ctx: CommandContext, args: Arguments) -> None:
    """Show network configuration: ``show``"""
    args.expect_end()

    managed = await ctx.service.get_managed_objects(ctx.network, objects.OBJECT_ROOT)

    syslog: Optional[dict[str, Any]] = None
    try:
        syslog = {
            name: await ctx.service.get_property(
                ctx.settings.syslog_service, objects.OBJECT_SYSLOG,
                objects.SYSLOG_INTERFACE, name,
            )
            for name in (objects.SYSLOG_ADDRESS, objects.SYSLOG_PORT)
        }
    except ServiceError as e:
        # Syslog service is optional on some platforms
        logger.info(f"Remote syslog configuration unavailable: {e}")

    print(Show(managed).render(syslog))
