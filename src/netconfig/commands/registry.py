"""Command table, dispatch and help output."""
import logging
from typing import Optional

from ..arguments import Arguments
from ..config import Settings
from ..errors import InvalidArgument
from ..service import NetworkService, create_service
from .base import Command, CommandContext
from .network import (
    cmd_dhcp,
    cmd_dhcpcfg,
    cmd_dns,
    cmd_domain,
    cmd_gateway,
    cmd_hostname,
    cmd_ip,
    cmd_mac,
    cmd_ntp,
    cmd_reset,
    cmd_syslog,
    cmd_vlan,
)
from .show import cmd_show

logger = logging.getLogger(__name__)

HELP_TOKENS = ("help", "--help", "-h")

# After a command name only the option forms ask for help
COMMAND_HELP_TOKENS = ("--help", "-h")

COMMANDS = [
    Command("show", None, "Show current configuration", cmd_show),
    Command("reset", None, "Reset configuration to factory defaults", cmd_reset),
    Command("mac", "[IFACE] MAC", "Set MAC address", cmd_mac),
    Command("hostname", "NAME", "Set host name", cmd_hostname),
    Command("domain", "[IFACE|VLANID] {add|del} NAME...", "Add or remove domain names", cmd_domain),
    Command("gateway", "IP", "Set default gateway", cmd_gateway),
    Command("ip", "[IFACE|VLANID] {add IP[/PREFIX] GATEWAY|del IP}",
            "Add or remove static IP address", cmd_ip),
    Command("dhcp", "[IFACE|VLANID] {enable|disable}", "Enable or disable DHCP client", cmd_dhcp),
    Command("dhcpcfg", "{enable|disable} {dns|ntp}", "Enable or disable DHCP features", cmd_dhcpcfg),
    Command("dns", "[IFACE|VLANID] {add|del} [static] IP...", "Add or remove DNS servers", cmd_dns),
    Command("ntp", "[IFACE|VLANID] {add|del} SERVER...", "Add or remove NTP servers", cmd_ntp),
    Command("vlan", "{add|del} ID [IP/PREFIX GATEWAY]", "Add or remove VLAN", cmd_vlan),
    Command("syslog", "{enable ADDR[:PORT]|disable}", "Set or clear remote syslog server", cmd_syslog),
]


def find_command(name: str) -> Optional[Command]:
    for cmd in COMMANDS:
        if cmd.name == name:
            return cmd
    return None


def command_help(cmd: Command) -> str:
    return f"{cmd.help}\n{cmd.name} {cmd.fmt or ''}".rstrip()


def print_help(args: Arguments) -> None:
    """Print help for the command named by the next argument, or for all."""
    topic = args.peek()
    if topic is not None:
        cmd = find_command(topic)
        if cmd is None:
            raise InvalidArgument(f"{topic} is not a valid command, try --help option")
        args.advance()
        args.expect_end()
        print(command_help(cmd))
        return

    for cmd in COMMANDS:
        print(f"  {cmd.name:<10} {cmd.help}")
        if cmd.fmt:
            print(f"  {'':<10} Command format: {cmd.name} {cmd.fmt}")
        print()


async def execute(
    args: Arguments,
    settings: Settings,
    service: Optional[NetworkService] = None,
) -> None:
    """Run the command named by the first argument.

    Raises:
        InvalidArgument: For unknown commands and bad arguments
        ServiceError: If the service rejects a request
    """
    name = args.as_text()
    cmd = find_command(name)
    if cmd is None:
        raise InvalidArgument(f"Invalid command: {name}")

    # "ip --help" asks for help, "ip add --help" is a bad argument and
    # "hostname help" names a host
    if args.peek() in COMMAND_HELP_TOKENS and args.peek_next() is None:
        print(command_help(cmd))
        return

    if service is None:
        service = create_service(settings)

    logger.debug(f"Executing {name} {list(args.pending())}")
    try:
        await cmd.handler(CommandContext(service, settings), args)
    finally:
        await service.disconnect()
