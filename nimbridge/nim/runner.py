"""Run nim commands synchronously."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import ProcessInvocationError
from .resolver import get_nim_path

logger = logging.getLogger(__name__)


class NimRunner:
    """Run nim and capture its combined output.

    Args:
        nim_path: Executable to run. When None, the conventional location is
            resolved again on every call to :meth:`run`.
    """

    def __init__(self, nim_path: Path | None = None) -> None:
        self.nim_path = nim_path

    def resolve(self) -> Path:
        """Get the executable this runner invokes."""
        if self.nim_path is not None:
            return Path(self.nim_path)
        return get_nim_path()

    def run(self, args: Sequence[str]) -> str:
        """Run nim with the given arguments and wait for it to exit.

        Args:
            args: Arguments following the executable

        Returns:
            Combined stdout and stderr text

        Raises:
            HomeDirectoryUnavailableError: If the executable cannot be located.
            ProcessInvocationError: If nim cannot be started or exits non-zero.
        """
        nim = self.resolve()
        cmd = [str(nim), *args]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            logger.error("Failed to start %s: %s", nim, e)
            raise ProcessInvocationError(args, cause=e) from e

        if result.returncode != 0:
            logger.error(
                "nim %s exited with status %d", " ".join(args), result.returncode
            )
            raise ProcessInvocationError(
                args, output=result.stdout, returncode=result.returncode
            )

        return result.stdout
