"""Clients of the network management service."""
from .base import IpObject, ManagedObjects, NetworkService, addresses_from_objects
from .dbus import DbusNetworkService

__all__ = [
    "NetworkService",
    "DbusNetworkService",
    "IpObject",
    "ManagedObjects",
    "addresses_from_objects",
    "create_service",
]


def create_service(settings) -> NetworkService:
    """Factory for the service client described by settings."""
    return DbusNetworkService(
        timeout=settings.timeout,
        connect_retries=settings.connect_retries,
    )
