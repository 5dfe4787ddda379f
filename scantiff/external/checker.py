# scantiff/external/checker.py
"""
Pre-flight checks for the external converter, opener and trash tools.
"""

import logging
import shutil

from scantiff.config import CONVERTER_CANDIDATES
from scantiff.models import Toolchain
from scantiff.platform_utils import get_opener_candidates, get_trash_candidates

from .exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


def _first_available(candidates) -> tuple[str, ...] | None:
    """Return the first candidate whose executable is on PATH.

    The executable is replaced by its resolved path; any subcommand
    (e.g. "trash" in ("gio", "trash")) is kept as-is.
    """
    for candidate in candidates:
        resolved = shutil.which(candidate[0])
        if resolved:
            return (resolved, *candidate[1:])
        logger.debug(f"'{candidate[0]}' not found on PATH")
    return None


def _describe(candidates) -> str:
    return ", ".join(" ".join(c) for c in candidates) or "(none supported on this platform)"


def find_converter() -> tuple[str, ...] | None:
    """Locate ImageMagick, preferring the v7 `magick` entry point over v6 `convert`."""
    return _first_available(CONVERTER_CANDIDATES)


def find_opener(platform: str | None = None) -> tuple[str, ...] | None:
    """Locate a tool that shows a file with the desktop's default viewer."""
    return _first_available(get_opener_candidates(platform))


def find_trash(platform: str | None = None) -> tuple[str, ...] | None:
    """Locate a tool that moves files to a recoverable trash location."""
    return _first_available(get_trash_candidates(platform))


def check_dependencies(platform: str | None = None) -> Toolchain:
    """Run the pre-flight checks once, before any file is touched.

    Args:
        platform: Override for sys.platform (tests)

    Returns:
        The resolved Toolchain.

    Raises:
        MissingDependencyError: for the first capability with no tool on PATH.
    """
    converter = find_converter()
    if converter is None:
        error_msg = (
            "Image converter not found. Install ImageMagick "
            f"(looked for: {_describe(CONVERTER_CANDIDATES)})."
        )
        logger.info(error_msg)
        raise MissingDependencyError(error_msg, capability="converter", searched=list(CONVERTER_CANDIDATES))

    opener = find_opener(platform)
    if opener is None:
        candidates = get_opener_candidates(platform)
        error_msg = f"File opener not found (looked for: {_describe(candidates)})."
        logger.info(error_msg)
        raise MissingDependencyError(error_msg, capability="opener", searched=list(candidates))

    trash = find_trash(platform)
    if trash is None:
        candidates = get_trash_candidates(platform)
        error_msg = (
            "Trash tool not found; originals are only ever moved to the trash "
            f"(looked for: {_describe(candidates)})."
        )
        logger.info(error_msg)
        raise MissingDependencyError(error_msg, capability="trash", searched=list(candidates))

    logger.info(f"Converter: {' '.join(converter)}")
    logger.info(f"Opener: {' '.join(opener)}")
    logger.info(f"Trash: {' '.join(trash)}")
    return Toolchain(converter=converter, opener=opener, trash=trash)
