"""Handlers of the configuration commands.

Each handler validates all of its arguments before the first request
is sent, so a typo never leaves a half-applied change.
"""
import logging

from ..arguments import Action, Arguments, IpVer, Toggle, is_fqdn, parse_ip_address
from ..errors import InvalidArgument
from ..service import objects
from .base import (
    COMPLETE_MESSAGE,
    MAX_VLAN_ID,
    MIN_VLAN_ID,
    CommandContext,
    object_from_optional,
    verb,
)

logger = logging.getLogger(__name__)

ACTIONS = [a.value for a in Action]
TOGGLES = [t.value for t in Toggle]

PROTOCOLS = {
    IpVer.V4: objects.IP4_PROTOCOL,
    IpVer.V6: objects.IP6_PROTOCOL,
}

DEFAULT_GATEWAYS = {
    IpVer.V4: objects.SYSCFG_DEFAULT_GW4,
    IpVer.V6: objects.SYSCFG_DEFAULT_GW6,
}


def _canonical(address: str) -> str:
    try:
        return parse_ip_address(address).address
    except InvalidArgument:
        return address


async def _update_list(
    ctx: CommandContext,
    path: str,
    name: str,
    action: Action,
    values: list[str],
) -> None:
    if action == Action.ADD:
        await ctx.service.append_to_property(
            ctx.network, path, objects.ETH_INTERFACE, name, values
        )
    else:
        await ctx.service.remove_from_property(
            ctx.network, path, objects.ETH_INTERFACE, name, values
        )


async def cmd_reset(ctx: CommandContext, args: Arguments) -> None:
    """Reset network configuration: ``reset``"""
    args.expect_end()

    print("Reset network configuration...")
    await ctx.service.call(
        ctx.network, objects.OBJECT_ROOT, objects.RESET_INTERFACE, objects.RESET_METHOD
    )
    print(COMPLETE_MESSAGE)


async def cmd_mac(ctx: CommandContext, args: Arguments) -> None:
    """Set MAC address: ``mac [IFACE] MAC``"""
    iface = ctx.settings.default_interface
    if args.remaining() > 1:
        iface = args.as_net_interface()
    mac = args.as_mac_address()
    args.expect_end()

    print(f"Set new MAC address {mac}...")
    await ctx.service.set_property(
        ctx.network, objects.eth_object(iface),
        objects.MAC_INTERFACE, objects.MAC_ADDRESS, mac, "s",
    )
    print(COMPLETE_MESSAGE)


async def cmd_hostname(ctx: CommandContext, args: Arguments) -> None:
    """Set host name: ``hostname NAME``"""
    name = args.as_text()
    if not is_fqdn(name):
        raise InvalidArgument(f"Invalid host name: {name}")
    args.expect_end()

    print(f"Set new host name {name}...")
    await ctx.service.set_property(
        ctx.network, objects.OBJECT_CONFIG,
        objects.SYSCFG_INTERFACE, objects.SYSCFG_HOSTNAME, name, "s",
    )
    print(COMPLETE_MESSAGE)


async def cmd_domain(ctx: CommandContext, args: Arguments) -> None:
    """Add/remove domain names: ``domain [IFACE|VLANID] {add|del} NAME...``"""
    path = object_from_optional(args, ctx.settings, ACTIONS)
    action = args.as_action()
    names = [args.as_text()]
    while args.peek() is not None:
        names.append(args.as_text())

    print(f"{verb(action == Action.ADD)} domain name {', '.join(names)}...")
    await _update_list(ctx, path, objects.ETH_DOMAIN_NAME, action, names)
    print(COMPLETE_MESSAGE)


async def cmd_gateway(ctx: CommandContext, args: Arguments) -> None:
    """Set default gateway: ``gateway IP``"""
    gateway = args.as_ip_address()
    args.expect_end()

    print(f"Setting default gateway for IPv{int(gateway.version)} to {gateway.address}...")
    await ctx.service.set_property(
        ctx.network, objects.OBJECT_CONFIG, objects.SYSCFG_INTERFACE,
        DEFAULT_GATEWAYS[gateway.version], gateway.address, "s",
    )
    print(COMPLETE_MESSAGE)


async def cmd_ip(ctx: CommandContext, args: Arguments) -> None:
    """Add/remove IP: ``ip [IFACE|VLANID] {add IP[/PREFIX] GATEWAY|del IP}``"""
    path = object_from_optional(args, ctx.settings, ACTIONS)
    action = args.as_action()

    if action == Action.ADD:
        ver, ip, prefix = args.as_ip_addr_mask()
        gateway = args.as_ip_address()
        args.expect_end()
        if ver != gateway.version:
            raise InvalidArgument("IP version mismatch")

        print(f"Adding IP address {ip}/{prefix}, gateway {gateway.address}...")
        await ctx.service.call(
            ctx.network, path, objects.IP_CREATE_INTERFACE, objects.IP_CREATE_METHOD,
            "ssys", PROTOCOLS[ver], ip, prefix, gateway.address,
        )
    else:
        ip = args.as_ip_address()
        args.expect_end()

        print(f"Removing IP address {ip.address}...")
        for addr in await ctx.service.get_addresses(ctx.network, path):
            if _canonical(addr.address) == ip.address:
                await ctx.service.call(
                    ctx.network, addr.object,
                    objects.DELETE_INTERFACE, objects.DELETE_METHOD,
                )
                break
        else:
            raise InvalidArgument(f"IP address {ip.address} not found")

    print(COMPLETE_MESSAGE)


async def cmd_dhcp(ctx: CommandContext, args: Arguments) -> None:
    """Enable/disable DHCP client: ``dhcp [IFACE|VLANID] {enable|disable}``"""
    path = object_from_optional(args, ctx.settings, TOGGLES)
    toggle = args.as_toggle()
    args.expect_end()

    enable = toggle == Toggle.ENABLE
    print(f"{'Enable' if enable else 'Disable'} DHCP client...")
    await ctx.service.set_property(
        ctx.network, path, objects.ETH_INTERFACE, objects.ETH_DHCP_ENABLED,
        objects.DHCP_CONF_BOTH if enable else objects.DHCP_CONF_NONE, "s",
    )
    print(COMPLETE_MESSAGE)


async def cmd_dhcpcfg(ctx: CommandContext, args: Arguments) -> None:
    """Enable/disable DHCP features: ``dhcpcfg {enable|disable} {dns|ntp}``"""
    toggle = args.as_toggle()
    feature = args.as_one_of(["dns", "ntp"])
    args.expect_end()

    enable = toggle == Toggle.ENABLE
    prop = objects.DHCP_DNS_ENABLED if feature == "dns" else objects.DHCP_NTP_ENABLED
    print(f"{'Enable' if enable else 'Disable'} {feature.upper()} over DHCP...")
    await ctx.service.set_property(
        ctx.network, objects.OBJECT_DHCP, objects.DHCP_INTERFACE, prop, enable, "b",
    )
    print(COMPLETE_MESSAGE)


async def cmd_dns(ctx: CommandContext, args: Arguments) -> None:
    """Add/remove DNS servers: ``dns [IFACE|VLANID] {add|del} [static] IP...``"""
    path = object_from_optional(args, ctx.settings, ACTIONS)
    action = args.as_action()

    prop = objects.ETH_NAME_SERVERS
    if args.peek() == "static":
        args.advance()
        prop = objects.ETH_STATIC_NAME_SERVERS

    servers = [ip.address for ip in args.as_ip_address_list()]

    print(f"{verb(action == Action.ADD)} DNS server {', '.join(servers)}...")
    await _update_list(ctx, path, prop, action, servers)
    print(COMPLETE_MESSAGE)


async def cmd_ntp(ctx: CommandContext, args: Arguments) -> None:
    """Add/remove NTP servers: ``ntp [IFACE|VLANID] {add|del} SERVER...``"""
    path = object_from_optional(args, ctx.settings, ACTIONS)
    action = args.as_action()
    servers = args.as_ip_or_fqdn_list()

    print(f"{verb(action == Action.ADD)} NTP server {', '.join(servers)}...")
    await _update_list(ctx, path, objects.ETH_NTP_SERVERS, action, servers)
    print(COMPLETE_MESSAGE)


async def cmd_vlan(ctx: CommandContext, args: Arguments) -> None:
    """Add/remove VLAN: ``vlan {add|del} ID [IP/PREFIX GATEWAY]``

    A static address given on creation must carry an explicit prefix.
    """
    action = args.as_action()
    vlan_id = args.as_number(MIN_VLAN_ID, MAX_VLAN_ID)
    iface = ctx.settings.default_interface
    path = objects.vlan_object(iface, vlan_id)

    if action == Action.DEL:
        args.expect_end()
        print(f"Removing VLAN with ID {vlan_id}...")
        await ctx.service.call(
            ctx.network, path, objects.DELETE_INTERFACE, objects.DELETE_METHOD
        )
        print(COMPLETE_MESSAGE)
        return

    address = None
    gateway = None
    if args.peek() is not None:
        address = args.as_ip_addr_mask(default_prefix=False)
        gateway = args.as_ip_address()
        if address.version != gateway.version:
            raise InvalidArgument("IP version mismatch")
    args.expect_end()

    print(f"Adding VLAN with ID {vlan_id}...")
    await ctx.service.call(
        ctx.network, objects.OBJECT_ROOT,
        objects.VLAN_CREATE_INTERFACE, objects.VLAN_CREATE_METHOD,
        "su", iface, vlan_id,
    )
    if address is not None and gateway is not None:
        print(f"Adding IP address {address.address}/{address.prefix}...")
        await ctx.service.call(
            ctx.network, path, objects.IP_CREATE_INTERFACE, objects.IP_CREATE_METHOD,
            "ssys", PROTOCOLS[address.version], address.address, address.prefix,
            gateway.address,
        )
    print(COMPLETE_MESSAGE)


async def cmd_syslog(ctx: CommandContext, args: Arguments) -> None:
    """Set remote syslog server: ``syslog {enable ADDR[:PORT]|disable}``"""
    toggle = args.as_toggle()

    if toggle == Toggle.ENABLE:
        host, port = args.as_addr_and_port()
        args.expect_end()
        print(f"Sending logs to {host}, port {port}...")
    else:
        args.expect_end()
        host, port = "", 0
        print("Disable remote logging...")

    service = ctx.settings.syslog_service
    await ctx.service.set_property(
        service, objects.OBJECT_SYSLOG, objects.SYSLOG_INTERFACE,
        objects.SYSLOG_ADDRESS, host, "s",
    )
    await ctx.service.set_property(
        service, objects.OBJECT_SYSLOG, objects.SYSLOG_INTERFACE,
        objects.SYSLOG_PORT, port, "q",
    )
    logger.debug(f"Remote syslog target: {host!r}:{port}")
    print(COMPLETE_MESSAGE)
