# scantiff/conversion_engine/worker.py
"""
Contains the sequential per-file conversion loop and the command failure policy.
"""

import logging
from pathlib import Path
from typing import Callable

from scantiff.config import CONTINUE_PROMPT, DELETE_PROMPT, GRAYSCALE_PROMPT
from scantiff.external.exceptions import CommandFailure, UserAbortError
from scantiff.external.wrapper import (
    build_bilevel_command,
    build_grayscale_command,
    build_open_command,
    build_trash_command,
    run_command,
)
from scantiff.models import BatchSummary, CandidateFile, FileResult, FileState, Toolchain
from scantiff.utils import ask_yes_no, capitalize_first, format_file_size

from .scanner import find_candidate_files, skip_reason

logger = logging.getLogger(__name__)

AskCallback = Callable[[str], bool]
RunCallback = Callable[[list[str]], None]


def handle_command_failure(description: str, failure: CommandFailure, ask: AskCallback) -> None:
    """Report a failed command and ask whether to go on.

    Args:
        description: Lower-case action description, e.g. "open receipt.tif"
        failure: The CommandFailure raised by the runner
        ask: Yes/no prompt callback

    Raises:
        UserAbortError: if the answer is anything but y/Y.
    """
    print(f"{capitalize_first(description)} failed with exit status {failure.returncode}.")
    if not ask(CONTINUE_PROMPT):
        logger.info(f"Aborted by user after failure to {description} (exit status {failure.returncode})")
        raise UserAbortError(
            f"Aborted after failure to {description}", failed_action=description, returncode=failure.returncode
        )
    logger.info(f"Continuing after failure to {description} (exit status {failure.returncode})")


def _run_step(
    description: str, cmd: list[str], result: FileResult, ask: AskCallback, runner: RunCallback
) -> bool:
    """Run one external command under the failure policy. Returns True on success."""
    try:
        runner(cmd)
    except CommandFailure as failure:
        handle_command_failure(description, failure, ask)
        result.failed_steps.append(description)
        return False
    return True


def _report_sizes(source: Path, output: Path) -> None:
    try:
        source_size = source.stat().st_size
        output_size = output.stat().st_size
    except OSError as e:
        logger.debug(f"Could not read sizes for {output.name}: {e}")
        return
    print(f"Wrote {output.name} ({format_file_size(output_size)}, was {format_file_size(source_size)})")
    logger.info(f"{source.name}: {source_size} -> {output_size} bytes")


def process_file(
    candidate: CandidateFile,
    toolchain: Toolchain,
    ask: AskCallback = ask_yes_no,
    runner: RunCallback = run_command,
) -> FileResult:
    """Convert, preview and optionally retry/delete a single JPEG.

    Args:
        candidate: The file to process
        toolchain: Resolved external tools
        ask: Yes/no prompt callback
        runner: Command runner raising CommandFailure on a non-zero exit

    Returns:
        FileResult describing what happened.

    Raises:
        UserAbortError: if the user declines to continue after a failure.
    """
    source, output = candidate.source, candidate.output

    state = skip_reason(candidate)
    if state == FileState.SKIPPED_DASH_PREFIX:
        logger.warning(f"Skipping '{candidate.name}': file names starting with '-' are not supported")
        return FileResult(candidate=candidate, state=state)
    if state == FileState.SKIPPED_OUTPUT_EXISTS:
        logger.warning(f"Skipping '{candidate.name}': '{output.name}' already exists")
        return FileResult(candidate=candidate, state=state)

    result = FileResult(candidate=candidate, state=FileState.DONE)
    print(f"Converting {candidate.name} -> {output.name}")

    if _run_step(
        f"convert {candidate.name} to black & white",
        build_bilevel_command(toolchain.converter, source, output),
        result, ask, runner,
    ):
        _report_sizes(source, output)
    _run_step(f"open {output.name}", build_open_command(toolchain.opener, output), result, ask, runner)

    if ask(GRAYSCALE_PROMPT):
        result.grayscale_requested = True
        if _run_step(
            f"convert {candidate.name} to grayscale",
            build_grayscale_command(toolchain.converter, source, output),
            result, ask, runner,
        ):
            _report_sizes(source, output)
        _run_step(f"open {output.name}", build_open_command(toolchain.opener, output), result, ask, runner)

    if ask(DELETE_PROMPT.format(name=candidate.name)):
        result.delete_requested = True
        # Trash only; the original stays recoverable
        if _run_step(
            f"move {candidate.name} to trash", build_trash_command(toolchain.trash, source), result, ask, runner
        ):
            result.state = FileState.DELETED

    logger.info(f"{candidate.name}: {result.state.value}")
    return result


def run_batch(
    folder_path: str | Path,
    toolchain: Toolchain,
    ask: AskCallback = ask_yes_no,
    runner: RunCallback = run_command,
) -> BatchSummary:
    """Process every JPEG in a folder, one after another.

    UserAbortError propagates immediately; files after the aborted one are
    not looked at and nothing already written is removed.
    """
    summary = BatchSummary()
    candidates = find_candidate_files(folder_path)
    if not candidates:
        print("No .jpg/.jpeg files found.")
        return summary

    for candidate in candidates:
        summary.results.append(process_file(candidate, toolchain, ask=ask, runner=runner))

    logger.info(summary.describe())
    return summary
