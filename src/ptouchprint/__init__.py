"""Build and send raster print jobs to Brother P-touch label printers."""

from ptouchprint.errors import InvalidStateError, PrintEnvironmentError, PrintJobError, TransportError
from ptouchprint.job import PrintJob
from ptouchprint.models.job import JobState, PrintJobConfig
from ptouchprint.protocol.raster import RasterImage

__all__ = [
    "InvalidStateError",
    "JobState",
    "PrintEnvironmentError",
    "PrintJob",
    "PrintJobConfig",
    "PrintJobError",
    "RasterImage",
    "TransportError",
]
