"""Raw TCP (JetDirect style) transport."""

import logging
import socket

from ptouchprint.errors import TransportError
from ptouchprint.transports.base import BaseTransport

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9100
DEFAULT_CONNECT_TIMEOUT = 30.0


class NetworkTransport(BaseTransport):
    """Pushes job bytes to a printer listening on a raw TCP port.

    No response is read back from the printer.
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT, timeout: float = DEFAULT_CONNECT_TIMEOUT) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    def send(self, data: bytes) -> None:
        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except TimeoutError as e:
            raise TransportError(
                f"Timeout connecting to printer at {self.target}", errno=e.errno, reason=str(e)
            ) from e
        except OSError as e:
            reason = e.strerror or str(e)
            raise TransportError(
                f"Failed to connect to printer at {self.target}: {reason} ({e.errno})",
                errno=e.errno,
                reason=reason,
            ) from e

        with sock:
            try:
                sock.sendall(data)
            except OSError as e:
                reason = e.strerror or str(e)
                raise TransportError(
                    f"Failed to send job to {self.target}: {reason}", errno=e.errno, reason=reason
                ) from e
        logger.debug(f"Sent {len(data)} bytes to {self.target}")
