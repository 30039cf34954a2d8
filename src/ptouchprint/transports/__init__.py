"""Transports for delivering finished print jobs."""

from ptouchprint.config import Settings
from ptouchprint.errors import PrintEnvironmentError, TransportError
from ptouchprint.models.printer import ConnectionConfig, SpoolerConnection, TCPConnection
from ptouchprint.transports.base import BaseTransport
from ptouchprint.transports.network import NetworkTransport
from ptouchprint.transports.spooler import SpoolerTransport

__all__ = [
    "BaseTransport",
    "NetworkTransport",
    "PrintEnvironmentError",
    "SpoolerTransport",
    "TransportError",
    "create_transport",
]


def create_transport(connection: ConnectionConfig, settings: Settings | None = None) -> BaseTransport:
    """Factory function to create a transport from a connection config."""
    settings = settings or Settings()
    if isinstance(connection, TCPConnection):
        return NetworkTransport(connection.host, connection.port, timeout=settings.connect_timeout)
    if isinstance(connection, SpoolerConnection):
        return SpoolerTransport(
            connection.destination,
            lpr_path=settings.lpr_path,
            timeout=settings.spooler_timeout,
        )
    raise ValueError(f"Unknown connection type: {type(connection).__name__}")
