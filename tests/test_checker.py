import pytest

from scantiff.external import checker
from scantiff.external.exceptions import MissingDependencyError
from scantiff.models import Toolchain


@pytest.fixture
def path_with(monkeypatch):
    """Pretend only the given executables are on PATH."""

    def install(*names):
        available = set(names)
        monkeypatch.setattr(checker.shutil, "which", lambda name: f"/usr/bin/{name}" if name in available else None)

    return install


def test_check_dependencies_linux(path_with):
    path_with("magick", "convert", "xdg-open", "trash-put")
    assert checker.check_dependencies(platform="linux") == Toolchain(
        converter=("/usr/bin/magick",),
        opener=("/usr/bin/xdg-open",),
        trash=("/usr/bin/trash-put",),
    )


def test_converter_falls_back_to_imagemagick6(path_with):
    path_with("convert")
    assert checker.find_converter() == ("/usr/bin/convert",)


def test_gio_covers_opener_and_trash(path_with):
    path_with("magick", "gio")
    toolchain = checker.check_dependencies(platform="linux")
    assert toolchain.opener == ("/usr/bin/gio", "open")
    assert toolchain.trash == ("/usr/bin/gio", "trash")


def test_macos_uses_open_and_trash(path_with):
    path_with("magick", "open", "trash", "xdg-open", "trash-put")
    toolchain = checker.check_dependencies(platform="darwin")
    assert toolchain.opener == ("/usr/bin/open",)
    assert toolchain.trash == ("/usr/bin/trash",)


def test_missing_converter(path_with):
    path_with("xdg-open", "trash-put")
    with pytest.raises(MissingDependencyError) as excinfo:
        checker.check_dependencies(platform="linux")
    assert excinfo.value.capability == "converter"
    assert "ImageMagick" in excinfo.value.message


def test_missing_opener(path_with):
    path_with("magick", "trash-put")
    with pytest.raises(MissingDependencyError) as excinfo:
        checker.check_dependencies(platform="linux")
    assert excinfo.value.capability == "opener"


def test_missing_trash(path_with):
    path_with("magick", "xdg-open")
    with pytest.raises(MissingDependencyError) as excinfo:
        checker.check_dependencies(platform="linux")
    assert excinfo.value.capability == "trash"
    assert excinfo.value.searched == [("trash-put",), ("gio", "trash"), ("trash",)]


def test_windows_fails_preflight(path_with):
    path_with("magick", "explorer", "trash")
    with pytest.raises(MissingDependencyError) as excinfo:
        checker.check_dependencies(platform="win32")
    assert excinfo.value.capability == "opener"
    assert "none supported on this platform" in excinfo.value.message
