# scantiff/conversion_engine/scanner.py
"""
Contains functions to find candidate JPEGs and decide whether each one is skipped.
"""

import logging
import os
from pathlib import Path

from scantiff.config import INPUT_SUFFIXES, OUTPUT_SUFFIX
from scantiff.models import CandidateFile, FileState

logger = logging.getLogger(__name__)


def is_candidate_name(filename: str) -> bool:
    """Case-insensitive .jpg/.jpeg check, independent of any shell globbing."""
    return filename.lower().endswith(INPUT_SUFFIXES)


def derive_output_path(source: Path) -> Path:
    """Same directory and stem as the source, with a .tif suffix.

    The JPEG suffix is stripped whatever its case, so "receipt.JPG" and
    "photo.jpeg" become "receipt.tif" and "photo.tif".
    """
    name = source.name
    lowered = name.lower()
    for suffix in INPUT_SUFFIXES:
        if lowered.endswith(suffix):
            name = name[: -len(suffix)]
            break
    return source.with_name(name + OUTPUT_SUFFIX)


def find_candidate_files(folder_path: str | Path) -> list[CandidateFile]:
    """Find all JPEGs directly inside a folder (no recursion).

    Args:
        folder_path: Folder to scan, usually the current working directory

    Returns:
        Candidates sorted by file name; empty if nothing matches
    """
    folder = Path(folder_path)
    candidates = []
    with os.scandir(folder) as entries:
        for entry in entries:
            if entry.is_file() and is_candidate_name(entry.name):
                source = folder / entry.name
                candidates.append(CandidateFile(source=source, output=derive_output_path(source)))

    candidates.sort(key=lambda c: c.name)
    logger.info(f"Found {len(candidates)} JPEG file(s) in {folder}")
    return candidates


def skip_reason(candidate: CandidateFile) -> FileState | None:
    """Return the skip state for a candidate, or None if it should be converted.

    A name starting with "-" would be read as an option by the converter.
    An existing output is never overwritten.
    """
    if candidate.name.startswith("-"):
        return FileState.SKIPPED_DASH_PREFIX
    if candidate.output.exists():
        return FileState.SKIPPED_OUTPUT_EXISTS
    return None
