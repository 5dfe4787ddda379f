import logging

import pytest

from scantiff.logging_setup import get_default_log_directory, setup_logging
from scantiff.models import FileState
from scantiff.platform_utils import get_opener_candidates, get_platform_key, get_trash_candidates
from scantiff.utils import ask_yes_no, capitalize_first, format_file_size


@pytest.mark.parametrize(
    "answer,expected",
    [("y", True), ("Y", True), ("n", False), ("yes", False), (" y", False), ("", False)],
)
def test_ask_yes_no_only_accepts_exact_y(answer, expected):
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return answer

    assert ask_yes_no("Continue?", input_func=reader) is expected
    assert prompts == ["Continue? [y/n] "]


def test_ask_yes_no_end_of_input_is_no():
    def reader(prompt):
        raise EOFError

    assert ask_yes_no("Continue?", input_func=reader) is False


@pytest.mark.parametrize(
    "size,expected",
    [(None, "-"), (512, "512 B"), (2048, "2.0 KB"), (3 * 1024**2 + 104858, "3.1 MB"), (5 * 1024**3, "5.0 GB")],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_capitalize_first_keeps_rest():
    assert capitalize_first("convert IMG_01.jpg to black & white") == "Convert IMG_01.jpg to black & white"
    assert capitalize_first("") == ""


def test_platform_tables():
    assert get_platform_key("linux") == "default"
    assert get_opener_candidates("darwin") == (("open",),)
    assert get_opener_candidates("freebsd14") == (("xdg-open",), ("gio", "open"))
    assert get_opener_candidates("win32") == ()
    assert get_trash_candidates("win32") == ()


def test_file_state_skip_flags():
    assert FileState.SKIPPED_DASH_PREFIX.is_skip
    assert FileState.SKIPPED_OUTPUT_EXISTS.is_skip
    assert not FileState.DELETED.is_skip


def test_log_directory_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SCANTIFF_LOG_DIR", str(tmp_path))
    assert get_default_log_directory() == str(tmp_path)


def test_setup_logging_writes_file(tmp_path, restore_root_handlers):
    log_file = setup_logging(str(tmp_path))

    logging.getLogger("scantiff.test").info("hello log")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file is not None
    assert log_file.startswith(str(tmp_path))
    with open(log_file, encoding="utf-8") as f:
        assert "hello log" in f.read()
