# scantiff/main.py
"""
Main application logic module for the scantiff converter.
Defines the main() function to be called by the launcher and the console script.
"""
import logging
import os
import sys

from scantiff.config import EXIT_ABORTED, EXIT_INTERRUPTED, EXIT_MISSING_DEPENDENCY, EXIT_OK
from scantiff.conversion_engine.worker import run_batch
from scantiff.external.checker import check_dependencies
from scantiff.external.exceptions import MissingDependencyError, UserAbortError
from scantiff.logging_setup import setup_logging


def run(argv: list[str] | None = None) -> int:
    """Run one interactive session in the current directory.

    Returns:
        Process exit status.
    """
    argv = sys.argv[1:] if argv is None else argv

    try:
        log_file = setup_logging()
        logging.info("=== Starting scantiff ===")
        if log_file:
            logging.info(f"Log file: {log_file}")
        logging.info(f"System: {sys.platform}, Python: {sys.version}")

        # Works on the current directory only
        if argv:
            print("scantiff takes no arguments; run it inside the folder with the JPEG files.", file=sys.stderr)
            logging.info(f"Attempted run with command line arguments {argv} (not supported). Exiting.")
            return EXIT_ABORTED

        toolchain = check_dependencies()
        summary = run_batch(os.getcwd(), toolchain)
    except MissingDependencyError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_MISSING_DEPENDENCY
    except UserAbortError as e:
        print("Aborted.", file=sys.stderr)
        logging.info(f"Session aborted: {e}")
        return EXIT_ABORTED
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        logging.info("Session interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        logging.critical(f"An unhandled error occurred: {e}", exc_info=True)
        return EXIT_ABORTED

    if summary.total:
        print(summary.describe())
    logging.info("=== scantiff finished ===")
    return EXIT_OK


def main():
    """Console script entry point."""
    sys.exit(run())
