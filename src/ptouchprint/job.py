"""Print job lifecycle: configure, add pages, finalize, transmit."""

import logging
import subprocess
import sys
from collections.abc import Callable, Iterable
from typing import BinaryIO, Protocol, TextIO

from ptouchprint.errors import InvalidStateError
from ptouchprint.models.job import JobState, PrintJobConfig
from ptouchprint.protocol.builder import PTouchJobBinary
from ptouchprint.protocol.raster import RasterImage
from ptouchprint.transports.base import BaseTransport
from ptouchprint.transports.network import DEFAULT_CONNECT_TIMEOUT, DEFAULT_PORT, NetworkTransport
from ptouchprint.transports.spooler import DEFAULT_LPR_PATH, DEFAULT_SPOOLER_TIMEOUT, Launcher, SpoolerTransport

logger = logging.getLogger(__name__)


class JobBinaryBuilder(Protocol):
    """Operations PrintJob needs from a job binary builder."""

    def print_info(self, tape_size: int) -> None: ...

    def mode(self, auto_cut: bool) -> None: ...

    def cut_each(self, pages: int) -> None: ...

    def advanced_mode(self, half_cut: bool, chain_printing: bool) -> None: ...

    def margin(self, dots: int) -> None: ...

    def compression_mode(self) -> None: ...

    def raster_image(self, image: RasterImage) -> None: ...

    def print_page(self) -> None: ...

    def print_and_feed(self) -> None: ...

    def get_data(self) -> bytes: ...

    def display_hex(self, stream: TextIO | None = None) -> None: ...


class PrintJob:
    """A single print job for a P-touch printer.

    Jobs move strictly forward through three states:

    - NONE: created, nothing written yet. Only start_job() is valid.
    - CONFIGURING: start_job() has written the configuration commands.
      Images may be added; end_job() finalizes once at least one page exists.
    - READY: finalized. The job can no longer change but may be transmitted
      any number of times.

    Mutating methods return the job so calls can be chained:

        PrintJob().start_job().add_image(image).end_job().to_bytes()
    """

    def __init__(
        self,
        tape_size: int = 12,
        margin_size: int = 14,
        auto_cut: int = 1,
        half_cut: bool = True,
        chain_printing: bool = False,
        *,
        config: PrintJobConfig | None = None,
        builder_factory: Callable[[], JobBinaryBuilder] = PTouchJobBinary,
        spooler_launcher: Launcher = subprocess.Popen,
    ) -> None:
        """Create a new print job.

        Args:
            tape_size: Tape width in mm.
            margin_size: Feed margin in dots.
            auto_cut: Cut after this many pages, 0 to disable.
            half_cut: Use half-cutting.
            chain_printing: Use chain printing (no feed/cut after the job).
            config: Complete job configuration; overrides the individual arguments.
            builder_factory: Creates the job binary builder on start_job().
            spooler_launcher: Spawns the local spooler client process.

        Raises:
            pydantic.ValidationError: If the configuration values are invalid.
        """
        if config is None:
            config = PrintJobConfig(
                tape_size=tape_size,
                margin_size=margin_size,
                auto_cut=auto_cut,
                half_cut=half_cut,
                chain_printing=chain_printing,
            )
        self._config = config
        self._builder_factory = builder_factory
        self._spooler_launcher = spooler_launcher
        self._builder: JobBinaryBuilder | None = None
        self._state = JobState.NONE
        self._has_pages = False

    @property
    def config(self) -> PrintJobConfig:
        return self._config

    @property
    def state(self) -> JobState:
        return self._state

    @property
    def has_pages(self) -> bool:
        """Whether at least one image has been added since the last start_job()."""
        return self._has_pages

    @property
    def builder(self) -> JobBinaryBuilder | None:
        """The builder for the current job, None before start_job()."""
        return self._builder

    def start_job(self) -> "PrintJob":
        """Start a new job, discarding any previous builder and pages.

        Calling this again before end_job() resets the job.

        Returns:
            This job, for chaining.

        Raises:
            InvalidStateError: If the job has already been finalized.
        """
        if self._state == JobState.READY:
            raise InvalidStateError("a finalized job cannot be restarted")
        if self._has_pages:
            logger.warning("Restarting print job; previously added pages are discarded")

        config = self._config
        builder = self._builder_factory()
        builder.print_info(config.tape_size)
        builder.mode(config.auto_cut_enabled)
        if config.auto_cut_enabled:
            builder.cut_each(config.auto_cut)
        builder.advanced_mode(config.half_cut, config.chain_printing)
        builder.margin(config.margin_size)
        builder.compression_mode()

        self._builder = builder
        self._has_pages = False
        self._state = JobState.CONFIGURING
        logger.info(
            f"Started print job: tape={config.tape_size}mm margin={config.margin_size} "
            f"auto_cut={config.auto_cut} half_cut={config.half_cut} chain={config.chain_printing}"
        )
        return self

    def add_images(self, images: Iterable[RasterImage]) -> "PrintJob":
        """Add images to the job in order.

        Stops at the first failure; images added before it stay in the job.

        Raises:
            InvalidStateError: If the job is not accepting images.
        """
        for image in images:
            self.add_image(image)
        return self

    def add_image(self, image: RasterImage) -> "PrintJob":
        """Add a single page to the job.

        A page break is written before every page except the first.

        Raises:
            InvalidStateError: If the job is finalized or not yet started.
        """
        if self._state == JobState.READY:
            raise InvalidStateError("no more images may be added to a finalized job")
        if self._state != JobState.CONFIGURING or self._builder is None:
            raise InvalidStateError("start_job must precede adding images")

        if self._has_pages:
            self._builder.print_page()
        self._builder.raster_image(image)
        self._has_pages = True
        logger.debug(f"Added image to print job: {image!r}")
        return self

    def end_job(self) -> "PrintJob":
        """Finalize the job so it can be transmitted.

        Raises:
            InvalidStateError: If the job is already finalized or no image has been added.
        """
        if self._state == JobState.READY:
            raise InvalidStateError("job is already finalized")
        if not self._has_pages or self._builder is None:
            raise InvalidStateError("at least one image is required")

        self._builder.print_and_feed()
        self._state = JobState.READY
        logger.info("Print job finalized")
        return self

    def _ready_builder(self) -> JobBinaryBuilder:
        if self._state != JobState.READY or self._builder is None:
            raise InvalidStateError("job is not complete")
        return self._builder

    def transmit(self, transport: BaseTransport) -> None:
        """Send the finalized job through a transport.

        Raises:
            InvalidStateError: If the job has not been finalized.
            PrintEnvironmentError: If the transport's host requirements are missing.
            TransportError: If delivery fails.
        """
        data = self._ready_builder().get_data()
        logger.info(f"Sending {len(data)} byte job to {transport.target}")
        transport.send(data)
        logger.info(f"Job sent to {transport.target}")

    def transmit_to_address(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        """Send the job to a network printer's raw port."""
        self._ready_builder()
        self.transmit(NetworkTransport(host, port, timeout=timeout))

    def transmit_to_local_spooler(
        self,
        destination: str,
        lpr_path: str = DEFAULT_LPR_PATH,
        timeout: float | None = DEFAULT_SPOOLER_TIMEOUT,
    ) -> None:
        """Send the job to a local print queue via lpr."""
        self._ready_builder()
        transport = SpoolerTransport(destination, lpr_path=lpr_path, timeout=timeout, launcher=self._spooler_launcher)
        self.transmit(transport)

    def to_bytes(self) -> bytes:
        """Return the finalized job binary."""
        return self._ready_builder().get_data()

    def to_hex_dump(self, stream: TextIO | None = None) -> None:
        """Write a hexdump of the job to stream (default stdout) for debugging."""
        self._ready_builder().display_hex(stream if stream is not None else sys.stdout)

    def write_to(self, stream: BinaryIO | None = None) -> None:
        """Write the raw job binary to a binary stream (default stdout)."""
        data = self.to_bytes()
        out = stream if stream is not None else sys.stdout.buffer
        out.write(data)
        out.flush()
