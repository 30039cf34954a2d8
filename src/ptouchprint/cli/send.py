"""CLI tool for building a P-touch job from images and sending it."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from ptouchprint.config import Settings, load_config
from ptouchprint.errors import PrintJobError
from ptouchprint.job import PrintJob
from ptouchprint.models.job import PrintJobConfig
from ptouchprint.models.printer import SpoolerConnection, TCPConnection
from ptouchprint.protocol.raster import RasterImage
from ptouchprint.transports import create_transport

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print images on a Brother P-touch label printer.",
        prog="ptouchprint",
    )
    parser.add_argument(
        "images",
        type=Path,
        nargs="+",
        metavar="IMAGE",
        help="Image files to print, one label per image",
    )

    destination = parser.add_mutually_exclusive_group()
    destination.add_argument("--printer", help="Named printer from the config file")
    destination.add_argument("--host", help="Send to a network printer at this address")
    destination.add_argument("--queue", help="Send to this local lpr queue")
    destination.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the raw job to a file",
    )
    destination.add_argument(
        "--hex",
        action="store_true",
        help="Print a hexdump of the job instead of sending it",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port for --host (default: 9100); only valid with --host",
    )

    job = parser.add_argument_group("job options")
    job.add_argument("--tape-size", type=int, help="Tape width in mm (default: 12)")
    job.add_argument("--margin", type=int, dest="margin_size", help="Feed margin in dots (default: 14)")
    job.add_argument("--auto-cut", type=int, help="Cut after every N labels, 0 disables (default: 1)")
    job.add_argument(
        "--no-half-cut",
        action="store_false",
        dest="half_cut",
        default=None,
        help="Disable half-cutting",
    )
    job.add_argument(
        "--chain",
        action="store_true",
        dest="chain_printing",
        default=None,
        help="Enable chain printing",
    )
    job.add_argument("--threshold", type=int, default=128, help="Grey level below which pixels print (default: 128)")

    parser.add_argument("--config", type=Path, dest="config_file", help="Path to config YAML file")
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")
    return parser


def _job_config(args: argparse.Namespace, base: PrintJobConfig) -> PrintJobConfig:
    """Apply command line overrides to a job config."""
    overrides = {
        name: getattr(args, name)
        for name in ("tape_size", "margin_size", "auto_cut", "half_cut", "chain_printing")
        if getattr(args, name) is not None
    }
    return PrintJobConfig.model_validate({**base.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ptouchprint CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.port is not None and not args.host:
        parser.error("--port requires --host")
    settings = Settings()
    if args.config_file is not None:
        settings.config_file = args.config_file
    if args.debug is not None:
        settings.debug = args.debug

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    base_config = PrintJobConfig()
    connection = None
    if args.printer:
        try:
            app_config = load_config(settings.config_file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error loading config {settings.config_file}: {e}", file=sys.stderr)
            return 1
        printer = app_config.get_printer(args.printer)
        if printer is None:
            print(f"Error: Unknown printer '{args.printer}'", file=sys.stderr)
            return 1
        if not printer.enabled:
            print(f"Error: Printer '{args.printer}' is disabled", file=sys.stderr)
            return 1
        base_config = printer.job
        connection = printer.connection
    elif args.host:
        connection = TCPConnection(host=args.host, port=args.port or 9100)
    elif args.queue:
        connection = SpoolerConnection(destination=args.queue)

    try:
        job_config = _job_config(args, base_config)
    except ValidationError as e:
        print(f"Error: Invalid job options: {e}", file=sys.stderr)
        return 1

    images: list[RasterImage] = []
    for path in args.images:
        try:
            images.append(RasterImage.from_file(path, threshold=args.threshold))
        except (OSError, ValueError) as e:
            print(f"Error reading image {path}: {e}", file=sys.stderr)
            return 1

    try:
        job = PrintJob(config=job_config).start_job().add_images(images).end_job()

        if connection is not None:
            job.transmit(create_transport(connection, settings))
        elif args.hex:
            job.to_hex_dump(sys.stdout)
        elif args.output:
            with open(args.output, "wb") as f:
                job.write_to(f)
            print(f"Wrote job to {args.output}", file=sys.stderr)
        else:
            job.write_to(sys.stdout.buffer)
    except PrintJobError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
