"""Printer configuration models."""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from ptouchprint.models.job import PrintJobConfig


class ConnectionType(StrEnum):
    """Supported connection types."""

    TCP = "tcp"
    SPOOLER = "spooler"


class TCPConnection(BaseModel):
    """Raw TCP/IP (port 9100) connection configuration."""

    type: Literal["tcp"] = "tcp"
    host: str
    port: int = Field(default=9100, gt=0, le=65535)


class SpoolerConnection(BaseModel):
    """Local print spooler (lpr) queue configuration."""

    type: Literal["spooler"] = "spooler"
    destination: str


ConnectionConfig = Annotated[
    TCPConnection | SpoolerConnection,
    Field(discriminator="type"),
]


class PrinterConfig(BaseModel):
    """Configuration for a single printer."""

    name: str
    connection: ConnectionConfig
    enabled: bool = True
    job: PrintJobConfig = PrintJobConfig()
