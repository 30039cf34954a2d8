"""Pydantic models for ptouchprint."""

from ptouchprint.models.job import JobState, PrintJobConfig
from ptouchprint.models.printer import ConnectionType, PrinterConfig, SpoolerConnection, TCPConnection

__all__ = [
    "ConnectionType",
    "JobState",
    "PrinterConfig",
    "PrintJobConfig",
    "SpoolerConnection",
    "TCPConnection",
]
