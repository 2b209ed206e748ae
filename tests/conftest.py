"""Shared fixtures: an in-memory network service."""
from typing import Any, Optional

import pytest

from netconfig.config import Settings
from netconfig.errors import ServiceError
from netconfig.service import NetworkService, objects

ETH0 = objects.eth_object("eth0")


class FakeNetworkService(NetworkService):
    """NetworkService keeping properties in a dict and recording calls."""

    def __init__(self, managed: Optional[dict] = None, syslog: Optional[dict] = None):
        super().__init__()
        self.managed: dict[str, dict[str, dict[str, Any]]] = managed or {}
        self.syslog = syslog
        self.calls: list[tuple] = []
        self.writes: list[tuple] = []
        self.disconnected = False

    async def connect(self) -> None:
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False
        self.disconnected = True

    async def call(self, service, path, interface, method, signature="", *args):
        self.calls.append((service, path, interface, method, signature, *args))
        return []

    async def get_property(self, service, path, interface, name):
        if path == objects.OBJECT_SYSLOG:
            if self.syslog is None:
                raise ServiceError("The name is not activatable",
                                   "org.freedesktop.DBus.Error.ServiceUnknown")
            return self.syslog[name]
        try:
            return self.managed[path][interface][name]
        except KeyError:
            raise ServiceError(f"Unknown property {name}",
                               "org.freedesktop.DBus.Error.UnknownProperty") from None

    async def set_property(self, service, path, interface, name, value, signature=None):
        self.writes.append((service, path, interface, name, value, signature))
        if path == objects.OBJECT_SYSLOG:
            if self.syslog is None:
                self.syslog = {}
            self.syslog[name] = value
            return
        self.managed.setdefault(path, {}).setdefault(interface, {})[name] = value

    async def get_managed_objects(self, service, path):
        return self.managed


def make_managed() -> dict:
    """Managed objects of a host with eth0, one VLAN and two addresses."""
    return {
        objects.OBJECT_CONFIG: {
            objects.SYSCFG_INTERFACE: {
                objects.SYSCFG_HOSTNAME: "bmc",
                objects.SYSCFG_DEFAULT_GW4: "10.0.0.1",
                objects.SYSCFG_DEFAULT_GW6: "",
            },
        },
        objects.OBJECT_DHCP: {
            objects.DHCP_INTERFACE: {
                objects.DHCP_DNS_ENABLED: True,
                objects.DHCP_NTP_ENABLED: False,
            },
        },
        ETH0: {
            objects.ETH_INTERFACE: {
                objects.ETH_NAME: "eth0",
                objects.ETH_LINK_UP: True,
                objects.ETH_SPEED: 1000,
                objects.ETH_DHCP_ENABLED: objects.DHCP_CONF_NONE,
                objects.ETH_DOMAIN_NAME: [],
                objects.ETH_NAME_SERVERS: ["10.0.0.53"],
                objects.ETH_STATIC_NAME_SERVERS: [],
                objects.ETH_NTP_SERVERS: [],
            },
            objects.MAC_INTERFACE: {
                objects.MAC_ADDRESS: "00:11:22:33:44:55",
            },
        },
        f"{ETH0}/ipv4/1a2b": {
            objects.IP_INTERFACE: {
                objects.IP_ADDRESS: "10.0.0.5",
                objects.IP_PREFIX: 24,
                objects.IP_GATEWAY: "10.0.0.1",
            },
        },
        f"{ETH0}/ipv6/3c4d": {
            objects.IP_INTERFACE: {
                objects.IP_ADDRESS: "2001:db8::5",
                objects.IP_PREFIX: 64,
                objects.IP_GATEWAY: "",
            },
        },
        objects.vlan_object("eth0", 100): {
            objects.ETH_INTERFACE: {
                objects.ETH_NAME: "eth0.100",
                objects.ETH_LINK_UP: False,
                objects.ETH_NTP_SERVERS: [],
            },
            objects.VLAN_INTERFACE: {
                objects.VLAN_ID: 100,
            },
        },
    }


@pytest.fixture
def service():
    return FakeNetworkService(make_managed(), syslog={"Address": "", "Port": 0})


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def interfaces(monkeypatch):
    """Pretend the host has lo, eth0 and eth1."""
    monkeypatch.setattr(
        "netconfig.arguments.parser.list_interfaces", lambda: ["lo", "eth0", "eth1"]
    )
