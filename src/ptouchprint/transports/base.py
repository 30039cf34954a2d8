"""Abstract base class for job transports."""

from abc import ABC, abstractmethod


class BaseTransport(ABC):
    """Delivers a finished job binary to a printer in a single attempt."""

    @property
    @abstractmethod
    def target(self) -> str:
        """Human-readable description of where data is sent."""
        pass

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send the complete job binary.

        Args:
            data: Finalized printer command data.

        Raises:
            PrintEnvironmentError: If a required host resource is missing.
            TransportError: If the data could not be delivered.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target})"
