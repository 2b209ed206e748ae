"""Command descriptions and helpers shared by the handlers."""
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional

from ..arguments import Arguments, is_number
from ..config import Settings
from ..service import NetworkService
from ..service import objects

# IEEE 802.1Q VLAN ID limits
MIN_VLAN_ID = 2
MAX_VLAN_ID = 4094

# Printed after a request has been accepted by the service
COMPLETE_MESSAGE = "Request has been sent"


@dataclass
class CommandContext:
    """What a handler needs besides its arguments."""
    service: NetworkService
    settings: Settings

    @property
    def network(self) -> str:
        return self.settings.network_service


Handler = Callable[[CommandContext, Arguments], Awaitable[None]]


@dataclass(frozen=True)
class Command:
    """Command line command."""
    name: str
    fmt: Optional[str]
    help: str
    handler: Handler


def object_from_optional(
    args: Arguments,
    settings: Settings,
    keywords: Iterable[str],
) -> str:
    """Resolve the optional ``[IFACE|VLANID]`` slot to an object path.

    A number selects the VLAN on the default interface, any other word
    that is not one of the command's keywords must be an existing
    interface, otherwise the default interface is used.
    """
    arg = args.peek()
    if arg is not None and is_number(arg):
        vlan_id = args.as_number(MIN_VLAN_ID, MAX_VLAN_ID)
        return objects.vlan_object(settings.default_interface, vlan_id)
    if arg is not None and arg not in keywords:
        return objects.eth_object(args.as_net_interface())
    return objects.eth_object(settings.default_interface)


def verb(adding: bool) -> str:
    return "Adding" if adding else "Removing"
