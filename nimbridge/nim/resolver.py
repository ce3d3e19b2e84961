"""Locate the nim executable.

nim is expected in a private installation under ``~/.nimbella/cli`` so it
can be found on every OS without being on PATH.
"""

from pathlib import Path

from ..core.exceptions import HomeDirectoryUnavailableError

NIM_RELATIVE_PATH = Path(".nimbella", "cli", "bin", "nim")


def get_nim_path(home: Path | None = None) -> Path:
    """Return the path of the nim executable.

    Args:
        home: Home directory to resolve against. Defaults to the current
            user's home directory, looked up on every call.

    Returns:
        ``<home>/.nimbella/cli/bin/nim``

    Raises:
        HomeDirectoryUnavailableError: If the home directory cannot be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryUnavailableError(e) from e

    return Path(home) / NIM_RELATIVE_PATH
