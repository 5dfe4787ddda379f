"""
Data models for the scantiff converter.

These dataclasses keep the per-file processing state typed instead of
passing loose tuples between the scanner, the worker and the entry point.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FileState(str, Enum):
    """Terminal outcome of one candidate file.

    Inherits from str so it reads naturally in log lines.
    """

    SKIPPED_DASH_PREFIX = "skipped_dash_prefix"  # Name could be parsed as a flag
    SKIPPED_OUTPUT_EXISTS = "skipped_output_exists"  # Never overwrite an existing .tif
    DONE = "done"  # Converted, original kept
    DELETED = "deleted"  # Converted, original moved to trash

    @property
    def is_skip(self) -> bool:
        return self in (FileState.SKIPPED_DASH_PREFIX, FileState.SKIPPED_OUTPUT_EXISTS)


@dataclass(frozen=True)
class CandidateFile:
    """A JPEG found in the working directory and the TIFF it will become."""

    source: Path
    output: Path

    @property
    def name(self) -> str:
        return self.source.name


@dataclass(frozen=True)
class Toolchain:
    """Resolved argv prefixes for the external tools.

    Each field is the command prefix to which the tool arguments are
    appended, e.g. ``("magick",)`` or ``("gio", "trash")``.
    """

    converter: tuple[str, ...]
    opener: tuple[str, ...]
    trash: tuple[str, ...]


@dataclass
class FileResult:
    """What happened to one candidate during a run."""

    candidate: CandidateFile
    state: FileState
    grayscale_requested: bool = False
    delete_requested: bool = False
    failed_steps: list[str] = field(default_factory=list)


@dataclass
class BatchSummary:
    """Ordered results of a whole run."""

    results: list[FileResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def converted(self) -> int:
        return sum(1 for r in self.results if not r.state.is_skip)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.state.is_skip)

    @property
    def deleted(self) -> int:
        return sum(1 for r in self.results if r.state == FileState.DELETED)

    @property
    def failures(self) -> int:
        return sum(len(r.failed_steps) for r in self.results)

    def describe(self) -> str:
        return (
            f"Processed {self.total} file(s): converted={self.converted}, "
            f"skipped={self.skipped}, deleted={self.deleted}, failed commands={self.failures}"
        )
