"""Base abstraction for the remote network management service."""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..errors import InvalidArgument
from . import objects

logger = logging.getLogger(__name__)

# object path -> interface -> property -> value
ManagedObjects = dict[str, dict[str, dict[str, Any]]]


@dataclass
class IpObject:
    """IP address object published under an ethernet object."""
    object: str
    address: str
    prefix: int
    gateway: str = ""


def addresses_from_objects(managed: ManagedObjects, eth_path: str) -> list[IpObject]:
    """Pick IP objects below an ethernet object from a managed objects dump."""
    prefix = f"{eth_path}/ip"
    addresses = []
    for path, interfaces in sorted(managed.items()):
        if not path.startswith(prefix):
            continue
        props = interfaces.get(objects.IP_INTERFACE)
        if props is None:
            continue
        addresses.append(IpObject(
            object=path,
            address=props.get(objects.IP_ADDRESS, ""),
            prefix=int(props.get(objects.IP_PREFIX, 0)),
            gateway=props.get(objects.IP_GATEWAY, ""),
        ))
    return addresses


class NetworkService(ABC):
    """Abstract client of the network management service.

    The service owns all state; implementations only forward requests.
    """

    def __init__(self):
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    # Connection management
    @abstractmethod
    async def connect(self) -> None:
        """Connect to the bus."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the bus connection."""
        pass

    # Primitive requests
    @abstractmethod
    async def call(
        self,
        service: str,
        path: str,
        interface: str,
        method: str,
        signature: str = "",
        *args: Any,
    ) -> list[Any]:
        """Call a method and return the reply body."""
        pass

    @abstractmethod
    async def get_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
    ) -> Any:
        """Read a property value."""
        pass

    @abstractmethod
    async def set_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
        value: Any,
        signature: Optional[str] = None,
    ) -> None:
        """Write a property value.

        Args:
            signature: Value type signature; inferred from the value if omitted
        """
        pass

    @abstractmethod
    async def get_managed_objects(self, service: str, path: str) -> ManagedObjects:
        """Get all objects with their interfaces and properties."""
        pass

    # Helpers built on the primitives
    async def append_to_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
        values: Iterable[str],
    ) -> None:
        """Add values to a string array property.

        Raises:
            InvalidArgument: If one of the values is already present
        """
        array = list(await self.get_property(service, path, interface, name))
        for value in values:
            if value in array:
                raise InvalidArgument(f"Value {value} already exists")
            array.append(value)
        await self.set_property(service, path, interface, name, array, "as")

    async def remove_from_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
        values: Iterable[str],
    ) -> None:
        """Remove values from a string array property.

        Raises:
            InvalidArgument: If one of the values is not present
        """
        array = list(await self.get_property(service, path, interface, name))
        for value in values:
            if value not in array:
                raise InvalidArgument(f"Value {value} not found")
            array.remove(value)
        await self.set_property(service, path, interface, name, array, "as")

    async def get_addresses(self, service: str, eth_path: str) -> list[IpObject]:
        """List IP address objects of an ethernet (or VLAN) object."""
        managed = await self.get_managed_objects(service, objects.OBJECT_ROOT)
        addresses = addresses_from_objects(managed, eth_path)
        logger.debug(f"Addresses of {eth_path}: {addresses}")
        return addresses

    # Context manager support
    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
        return False
