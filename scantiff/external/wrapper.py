# scantiff/external/wrapper.py
"""
Command construction and execution for the external tools.

The converter is ImageMagick; the parameters for both conversions are
fixed in scantiff.config. Every command runs synchronously in the user's
terminal so that any output or GUI window of the tool is visible.
"""

import logging
import subprocess
from pathlib import Path

from scantiff.config import (
    BILEVEL_COMPRESSION,
    BILEVEL_MAX_DIMENSION,
    BILEVEL_THRESHOLD_PERCENT,
    COMMAND_NOT_STARTED_STATUS,
    GRAYSCALE_COMPRESSION,
    GRAYSCALE_MAX_DIMENSION,
    GRAYSCALE_METHOD,
)

from .exceptions import CommandFailure

logger = logging.getLogger(__name__)


def _shrink_only(max_dimension: int) -> str:
    # ImageMagick geometry: fit inside the box, only ever shrink
    return f"{max_dimension}x{max_dimension}>"


def build_bilevel_command(converter: tuple[str, ...], source: Path, output: Path) -> list[str]:
    """Black & white conversion: threshold, shrink, 1-bit, CCITT Group 4."""
    return [
        *converter,
        str(source),
        "-threshold", f"{BILEVEL_THRESHOLD_PERCENT}%",
        "-resize", _shrink_only(BILEVEL_MAX_DIMENSION),
        "-type", "bilevel",
        "-compress", BILEVEL_COMPRESSION,
        str(output),
    ]


def build_grayscale_command(converter: tuple[str, ...], source: Path, output: Path) -> list[str]:
    """Grayscale conversion by channel averaging, shrink, LZW. Overwrites output."""
    return [
        *converter,
        str(source),
        "-grayscale", GRAYSCALE_METHOD,
        "-resize", _shrink_only(GRAYSCALE_MAX_DIMENSION),
        "-compress", GRAYSCALE_COMPRESSION,
        str(output),
    ]


def build_open_command(opener: tuple[str, ...], path: Path) -> list[str]:
    return [*opener, str(path)]


def build_trash_command(trash: tuple[str, ...], path: Path) -> list[str]:
    return [*trash, str(path)]


def run_command(cmd: list[str]) -> None:
    """Run an external command and block until it exits.

    Args:
        cmd: Full argv; never passed through a shell.

    Raises:
        CommandFailure: if the command exits non-zero or cannot be started.
    """
    cmd_str = " ".join(cmd)
    logger.debug(f"Running: {cmd_str}")
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        error_msg = f"Could not start '{cmd[0]}': {e}"
        logger.info(error_msg)
        raise CommandFailure(error_msg, command=cmd_str, returncode=COMMAND_NOT_STARTED_STATUS) from e

    if result.returncode != 0:
        error_msg = f"'{cmd[0]}' exited with status {result.returncode}"
        logger.info(f"{error_msg}: {cmd_str}")
        raise CommandFailure(error_msg, command=cmd_str, returncode=result.returncode)
    logger.debug(f"Finished: {cmd_str}")
