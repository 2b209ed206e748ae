"""Network service client over the system D-Bus."""
import asyncio
import logging
from typing import Any, Optional

from dbus_fast import BusType, Message, MessageType, Variant
from dbus_fast.aio import MessageBus
from dbus_fast.errors import AuthError, DBusError

from ..errors import ServiceError
from ..utils.connection import with_retry
from ..utils.logging_config import timed
from . import objects
from .base import ManagedObjects, NetworkService

logger = logging.getLogger(__name__)


def infer_signature(value: Any) -> str:
    """D-Bus type signature for a plain Python value."""
    if isinstance(value, bool):
        return "b"
    if isinstance(value, int):
        return "u"
    if isinstance(value, str):
        return "s"
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return "as"
    raise TypeError(f"Cannot infer D-Bus signature for {value!r}")


def unwrap(value: Any) -> Any:
    """Strip Variant wrappers from a reply value."""
    if isinstance(value, Variant):
        return unwrap(value.value)
    if isinstance(value, dict):
        return {k: unwrap(v) for k, v in value.items()}
    if isinstance(value, list):
        return [unwrap(v) for v in value]
    return value


class DbusNetworkService(NetworkService):
    """NetworkService backed by dbus-fast's asyncio MessageBus."""

    def __init__(
        self,
        bus_type: BusType = BusType.SYSTEM,
        timeout: float = 10.0,
        connect_retries: int = 3,
    ):
        super().__init__()
        self.bus_type = bus_type
        self.timeout = timeout
        self.connect_retries = connect_retries
        self._bus: Optional[MessageBus] = None

    @timed("connect")
    async def connect(self) -> None:
        if self._connected:
            return

        @with_retry(max_attempts=max(1, self.connect_retries))
        async def _connect() -> MessageBus:
            return await MessageBus(bus_type=self.bus_type).connect()

        try:
            self._bus = await _connect()
        except (OSError, EOFError, AuthError, DBusError) as e:
            raise ServiceError(f"Unable to connect to D-Bus: {e}") from e
        self._connected = True
        logger.debug(f"Connected to {self.bus_type.name} bus")

    async def disconnect(self) -> None:
        if self._bus is not None:
            self._bus.disconnect()
            self._bus = None
        self._connected = False

    @timed("call")
    async def call(
        self,
        service: str,
        path: str,
        interface: str,
        method: str,
        signature: str = "",
        *args: Any,
    ) -> list[Any]:
        # Connect on first request so that argument errors never touch the bus
        if self._bus is None:
            await self.connect()
        assert self._bus is not None

        logger.debug(f"Call {service} {path} {interface}.{method}{list(args)}")
        message = Message(
            destination=service,
            path=path,
            interface=interface,
            member=method,
            signature=signature,
            body=list(args),
        )
        try:
            reply = await asyncio.wait_for(self._bus.call(message), self.timeout)
        except asyncio.TimeoutError as e:
            raise ServiceError(f"No reply from {service} for {interface}.{method}") from e
        except DBusError as e:
            raise ServiceError(e.text, e.type) from e
        except (OSError, EOFError) as e:
            raise ServiceError(f"D-Bus connection lost: {e}") from e

        if reply.message_type == MessageType.ERROR:
            text = reply.body[0] if reply.body else "request failed"
            raise ServiceError(str(text), reply.error_name or "")
        return reply.body

    async def get_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
    ) -> Any:
        body = await self.call(
            service, path, objects.PROPERTIES_INTERFACE, "Get", "ss", interface, name
        )
        return unwrap(body[0])

    async def set_property(
        self,
        service: str,
        path: str,
        interface: str,
        name: str,
        value: Any,
        signature: Optional[str] = None,
    ) -> None:
        variant = Variant(signature or infer_signature(value), value)
        await self.call(
            service, path, objects.PROPERTIES_INTERFACE, "Set", "ssv",
            interface, name, variant,
        )

    async def get_managed_objects(self, service: str, path: str) -> ManagedObjects:
        body = await self.call(service, path, objects.OBJMGR_INTERFACE, "GetManagedObjects")
        return unwrap(body[0])
