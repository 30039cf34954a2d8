"""Local print spooler (lpr) transport."""

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ptouchprint.errors import PrintEnvironmentError, TransportError
from ptouchprint.transports.base import BaseTransport

logger = logging.getLogger(__name__)

DEFAULT_LPR_PATH = "/usr/bin/lpr"
DEFAULT_SPOOLER_TIMEOUT = 60.0

# Anything with the subprocess.Popen call signature
Launcher = Callable[..., Any]


class SpoolerTransport(BaseTransport):
    """Pipes job bytes into `lpr -P <destination>`.

    The spooler's output is only logged; a non-zero exit status does not
    fail the transmission.
    """

    def __init__(
        self,
        destination: str,
        lpr_path: str | Path = DEFAULT_LPR_PATH,
        timeout: float | None = DEFAULT_SPOOLER_TIMEOUT,
        launcher: Launcher = subprocess.Popen,
    ) -> None:
        self.destination = destination
        self.lpr_path = Path(lpr_path)
        self.timeout = timeout
        self._launcher = launcher

    @property
    def target(self) -> str:
        return f"lpr queue {self.destination}"

    def send(self, data: bytes) -> None:
        if not self.lpr_path.exists():
            raise PrintEnvironmentError(f"Printing to a local spooler requires {self.lpr_path} to exist")

        cmd = [str(self.lpr_path), "-P", self.destination]
        try:
            proc = self._launcher(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            reason = e.strerror or str(e)
            raise TransportError(f"Error starting {self.lpr_path}: {reason}", errno=e.errno, reason=reason) from e

        # Exiting the with block closes all pipes and reaps the process
        with proc:
            try:
                _stdout, stderr = proc.communicate(input=data, timeout=self.timeout)
            except subprocess.TimeoutExpired as e:
                proc.kill()
                proc.communicate()
                raise TransportError(
                    f"{self.lpr_path} did not finish within {self.timeout}s", reason="timeout"
                ) from e

        if proc.returncode:
            message = stderr.decode("utf-8", errors="replace").strip() if stderr else ""
            logger.warning(f"lpr exited with status {proc.returncode} for {self.destination}: {message}")
        logger.debug(f"Spooled {len(data)} bytes to {self.destination}")
