"""Runs the Go toolchain to check for and install packages."""

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console

from gosearch.config import Config
from gosearch.errors import InstallFailed, ToolNotFound

logger = logging.getLogger(__name__)


def find_go_binary() -> str:
    """Locates the Go executable on PATH.

    Returns:
        Absolute path to the executable.

    Raises:
        ToolNotFound: If the executable is not on PATH.
    """
    go_binary = shutil.which(Config.GO_BINARY)
    if go_binary is None:
        raise ToolNotFound(Config.GO_BINARY)
    return go_binary


def build_install_command(
    import_path: str, get_flags: Sequence[str] | None = None
) -> list[str]:
    """Composes the arguments for ``go get``, excluding the executable.

    Args:
        import_path: Import path of the package to install.
        get_flags: Extra arguments for ``go get``. Defaults to
            Config.DEFAULT_GET_FLAGS when None.

    Returns:
        The subcommand, the extra arguments, then the import path.
    """
    flags = Config.DEFAULT_GET_FLAGS if get_flags is None else get_flags
    return [Config.INSTALL_SUBCOMMAND, *flags, import_path]


def is_installed(import_path: str) -> bool:
    """Reports whether ``go list`` can resolve the package locally.

    This check only decorates the results table, so it never raises: a
    missing toolchain, a spawn failure, or a non-zero exit all count as
    not installed.

    Args:
        import_path: Import path to check.

    Returns:
        True only if ``go list`` exits with status 0.
    """
    try:
        result = subprocess.run(
            [Config.GO_BINARY, Config.LIST_SUBCOMMAND, import_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Installed check for %s failed: %s", import_path, e)
        return False
    return result.returncode == 0


def install_package(
    import_path: str,
    get_flags: Sequence[str] | None,
    stream: TextIO,
    console: Console,
) -> None:
    """Installs a package with ``go get`` after the user confirms.

    The composed command line is printed and one line is read from
    ``stream`` before the subprocess starts. The subprocess writes straight
    to the terminal.

    Args:
        import_path: Import path of the package to install.
        get_flags: Extra arguments for ``go get``; None uses the defaults.
        stream: Input stream the confirmation is read from.
        console: Console for user-facing messages.

    Raises:
        ToolNotFound: If the Go executable is not on PATH.
        InstallFailed: If the subprocess cannot start or exits non-zero.
    """
    console.print(f"Installing {import_path}", markup=False, highlight=False)

    go_binary = find_go_binary()
    args = build_install_command(import_path, get_flags)

    console.print(
        f"Install command: {go_binary} {shlex.join(args)}",
        markup=False,
        highlight=False,
    )
    console.print("Press enter to continue...")
    try:
        stream.readline()
    except OSError as e:
        logger.warning("Error reading confirmation: %s", e)

    logger.info("Running %s %s", go_binary, args)
    try:
        completed = subprocess.run([go_binary, *args], check=False)
    except OSError as e:
        raise InstallFailed(str(e)) from e

    if completed.returncode != 0:
        raise InstallFailed(f"exit status {completed.returncode}")
