# scantiff/platform_utils.py
"""Platform-specific utilities for choosing the opener and trash tools."""

import sys

from scantiff.config import OPENER_CANDIDATES, TRASH_CANDIDATES


# --- Host Detection ---


def get_platform_key(platform: str | None = None) -> str:
    """Map sys.platform onto the keys used by the tool candidate tables.

    Args:
        platform: Override for sys.platform (tests)

    Returns:
        "darwin", "win32" or "default"
    """
    platform = platform or sys.platform
    if platform in ("darwin", "win32"):
        return platform
    return "default"


def get_opener_candidates(platform: str | None = None) -> tuple[tuple[str, ...], ...]:
    """Opener commands to try for the host, in order of preference.

    macOS has a GUI opener (`open`); other desktops go through the generic
    default-handler tools instead.
    """
    return OPENER_CANDIDATES[get_platform_key(platform)]


def get_trash_candidates(platform: str | None = None) -> tuple[tuple[str, ...], ...]:
    """Trash commands to try for the host, in order of preference."""
    return TRASH_CANDIDATES[get_platform_key(platform)]
