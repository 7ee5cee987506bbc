"""Exceptions raised by the in-memory file system."""

from __future__ import annotations


class FileSystemError(Exception):
    """Base class for all file system errors."""

    _prefix = "File system error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self._prefix}: {self.detail}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSystemError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.detail))


class FileNotFound(FileSystemError):
    """No file exists at the given path."""

    _prefix = "File not found"


class InvalidPath(FileSystemError):
    """The given path is not usable, for example because it is empty."""

    _prefix = "Invalid path"


class ReadError(FileSystemError):
    """A read operation could not be carried out."""

    _prefix = "Read error"


class WriteError(FileSystemError):
    """A write operation could not be carried out."""

    _prefix = "Write error"