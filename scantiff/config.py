# scantiff/config.py
"""
Central configuration constants for the scantiff converter.
"""

# --- Discovery ---
INPUT_SUFFIXES = (".jpg", ".jpeg")  # Matched case-insensitively
OUTPUT_SUFFIX = ".tif"

# --- Black & White Conversion (primary) ---
BILEVEL_THRESHOLD_PERCENT = 40  # Binarization threshold
BILEVEL_MAX_DIMENSION = 1250  # Longest side in px, never upscaled
BILEVEL_COMPRESSION = "Group4"  # CCITT Group 4

# --- Grayscale Conversion (optional retry) ---
GRAYSCALE_METHOD = "Average"  # Channel averaging
GRAYSCALE_MAX_DIMENSION = 750
GRAYSCALE_COMPRESSION = "LZW"

# --- External Tools ---
# Each candidate is an argv prefix; the first one found on PATH wins.
CONVERTER_CANDIDATES: tuple[tuple[str, ...], ...] = (("magick",), ("convert",))
OPENER_CANDIDATES: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("open",),),
    "win32": (),  # Windows is unsupported
    "default": (("xdg-open",), ("gio", "open")),
}
TRASH_CANDIDATES: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("trash",),),
    "win32": (),
    "default": (("trash-put",), ("gio", "trash"), ("trash",)),
}
COMMAND_NOT_STARTED_STATUS = 127  # Reported when a tool cannot be executed at all

# --- Prompts ---
AFFIRMATIVE_ANSWERS = ("y", "Y")
GRAYSCALE_PROMPT = "Try conversion to grayscale instead?"
DELETE_PROMPT = "Delete old file ({name})?"
CONTINUE_PROMPT = "Continue?"

# --- Exit Codes ---
EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_MISSING_DEPENDENCY = 2
EXIT_INTERRUPTED = 130

# --- Logging ---
LOG_DIR_ENV_VAR = "SCANTIFF_LOG_DIR"
DEFAULT_LOG_SUBDIR = ".scantiff/logs"  # Relative to the user's home directory
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
