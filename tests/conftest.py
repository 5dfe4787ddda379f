import logging

import pytest

from scantiff.external.exceptions import CommandFailure
from scantiff.models import Toolchain


class FakeRunner:
    """Records every command; raises CommandFailure when fail_when(cmd) is true."""

    def __init__(self, fail_when=None, returncode=1, on_success=None):
        self.calls = []
        self.fail_when = fail_when
        self.returncode = returncode
        self.on_success = on_success

    def __call__(self, cmd):
        self.calls.append(list(cmd))
        if self.fail_when and self.fail_when(cmd):
            raise CommandFailure("failed", command=" ".join(cmd), returncode=self.returncode)
        if self.on_success:
            self.on_success(cmd)


class ScriptedAnswers:
    """Answers prompts by matching the start of the question text."""

    def __init__(self, grayscale=False, delete=False, keep_going=True):
        self.grayscale = grayscale
        self.delete = delete
        self.keep_going = keep_going
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        if question.startswith("Try conversion to grayscale"):
            return self.grayscale
        if question.startswith("Delete old file"):
            return self.delete
        if question.startswith("Continue"):
            return self.keep_going
        raise AssertionError(f"Unexpected prompt: {question}")


@pytest.fixture
def toolchain():
    return Toolchain(converter=("magick",), opener=("xdg-open",), trash=("trash-put",))


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def make_answers():
    return ScriptedAnswers


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
