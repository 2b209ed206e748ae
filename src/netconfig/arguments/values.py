"""Typed values produced by the argument parser."""
from dataclasses import dataclass, astuple
from enum import Enum, IntEnum


class IpVer(IntEnum):
    """IP protocol version."""
    V4 = 4
    V6 = 6


class Action(str, Enum):
    """Add or remove an entry."""
    ADD = "add"
    DEL = "del"


class Toggle(str, Enum):
    """Enable or disable a feature."""
    ENABLE = "enable"
    DISABLE = "disable"


class _Unpackable:
    """Let value dataclasses unpack like tuples: ``ver, ip = value``."""

    def __iter__(self):
        return iter(astuple(self))


@dataclass(frozen=True)
class IpAddress(_Unpackable):
    """Canonical IP address with its version."""
    version: IpVer
    address: str


@dataclass(frozen=True)
class IpAddrMask(_Unpackable):
    """Canonical IP address with prefix length in bits."""
    version: IpVer
    address: str
    prefix: int


@dataclass(frozen=True)
class Endpoint(_Unpackable):
    """Remote service target: host name or address plus port."""
    host: str
    port: int
