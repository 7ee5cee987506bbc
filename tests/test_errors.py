import pytest

from memfs.errors import (
    FileNotFound,
    FileSystemError,
    InvalidPath,
    ReadError,
    WriteError,
)


@pytest.mark.parametrize(
    "cls, detail, expected",
    [
        (FileNotFound, "/log.txt", "File not found: /log.txt"),
        (InvalidPath, "Path cannot be empty", "Invalid path: Path cannot be empty"),
        (
            ReadError,
            "Read operation would cause overflow",
            "Read error: Read operation would cause overflow",
        ),
        (
            WriteError,
            "Write operation would cause overflow",
            "Write error: Write operation would cause overflow",
        ),
    ],
)
def test_message_format(cls, detail, expected):
    assert str(cls(detail)) == expected


@pytest.mark.parametrize("cls", [FileNotFound, InvalidPath, ReadError, WriteError])
def test_subclasses_are_caught_by_base(cls):
    err = cls("x")
    assert issubclass(cls, FileSystemError)
    assert err.detail == "x"
    assert str(err).endswith(": x")


def test_equality_depends_on_kind_and_detail():
    assert FileNotFound("/a") == FileNotFound("/a")
    assert not (FileNotFound("/a") == FileNotFound("/b"))
    assert not (FileNotFound("/a") == InvalidPath("/a"))


def test_equal_errors_hash_alike():
    assert len({ReadError("m"), ReadError("m"), WriteError("m")}) == 2