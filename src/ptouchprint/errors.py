"""Exceptions raised while building and sending print jobs."""


class PrintJobError(Exception):
    """Base exception for all print job errors."""

    pass


class InvalidStateError(PrintJobError):
    """Raised when a job operation is called in the wrong lifecycle state."""

    pass


class PrintEnvironmentError(PrintJobError):
    """Raised when a required executable or resource is missing on the host."""

    pass


class TransportError(PrintJobError):
    """Raised when the job could not be delivered to the printer.

    Attributes:
        errno: Underlying OS error number, if any.
        reason: Underlying failure message.
    """

    def __init__(self, message: str, errno: int | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.errno = errno
        self.reason = reason
