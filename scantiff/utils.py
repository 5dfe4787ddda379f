# scantiff/utils.py
"""
Utility functions for the scantiff converter.
"""

import logging
from typing import Callable

from scantiff.config import AFFIRMATIVE_ANSWERS

logger = logging.getLogger(__name__)


def format_file_size(size_bytes: int | None) -> str:
    """Format a byte count for the per-file size report.

    Args:
        size_bytes: File size in bytes, or None if it could not be read

    Returns:
        String like "3.1 MB" or "312.4 KB", "-" when unknown
    """
    if size_bytes is None or size_bytes < 0:
        return "-"
    if size_bytes < 1024:  # noqa: PLR2004
        return f"{size_bytes} B"
    if size_bytes < 1024**2:
        return f"{size_bytes / 1024:.1f} KB"
    if size_bytes < 1024**3:
        return f"{size_bytes / (1024**2):.1f} MB"
    return f"{size_bytes / (1024**3):.1f} GB"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only (str.capitalize lowers the rest)."""
    return text[:1].upper() + text[1:]


def ask_yes_no(question: str, input_func: Callable[[str], str] = input) -> bool:
    """Ask a [y/n] question on the terminal.

    Only an exact "y" or "Y" counts as yes. End of input counts as no.

    Args:
        question: Prompt text without the "[y/n]" hint
        input_func: Line reader, replaceable for tests

    Returns:
        True if the user answered yes.
    """
    try:
        answer = input_func(f"{question} [y/n] ")
    except EOFError:
        print()
        logger.debug(f"End of input while asking: {question}")
        return False
    logger.debug(f"Prompt '{question}' answered '{answer}'")
    return answer in AFFIRMATIVE_ANSWERS
