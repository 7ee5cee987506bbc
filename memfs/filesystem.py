"""An asynchronous in-memory file system with flat paths and no directories."""

from __future__ import annotations

import asyncio

from memfs.errors import FileNotFound, InvalidPath, ReadError, WriteError
from memfs.file import File

MAX_SIZE = 2**64 - 1
"""Largest byte position an operation may reach."""


class FileSystem:
    """Files kept as byte arrays in memory, addressed by path strings.

    Safe to share between tasks of one event loop.
    """

    def __init__(self) -> None:
        self._files: dict[str, File] = {}
        self._files_lock = asyncio.Lock()
        self._file_locks: dict[str, asyncio.Lock] = {}

    @staticmethod
    def _check_path(path: str) -> None:
        if not path:
            raise InvalidPath("Path cannot be empty")

    def _get_or_create(self, path: str) -> tuple[File, asyncio.Lock]:
        if path not in self._files:
            self._files[path] = File()
            self._file_locks[path] = asyncio.Lock()
        return self._files[path], self._file_locks[path]

    async def touch(self, path: str) -> None:
        """Create an empty file at ``path`` unless one already exists."""
        self._check_path(path)
        async with self._files_lock:
            self._get_or_create(path)

    async def write(self, path: str, offset: int, data: bytes) -> None:
        """Write ``data`` at ``offset``, creating the file if needed.

        Writing past the end extends the file with zero bytes.
        """
        self._check_path(path)
        if offset < 0:
            raise ValueError("offset must not be negative")
        if offset + len(data) > MAX_SIZE:
            raise WriteError("Write operation would cause overflow")
        async with self._files_lock:
            file, lock = self._get_or_create(path)
        async with lock:
            file.write(offset, data)

    async def read(self, path: str, offset: int, length: int) -> bytes:
        """Read up to ``length`` bytes from ``offset``.

        Returns fewer bytes when the file ends first, and none when
        ``offset`` lies past the end.
        """
        self._check_path(path)
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        if length == 0:
            return b""
        if offset + length > MAX_SIZE:
            raise ReadError("Read operation would cause overflow")
        async with self._files_lock:
            file = self._files.get(path)
            lock = self._file_locks.get(path)
        if file is None or lock is None:
            raise FileNotFound(path)
        async with lock:
            return file.read(offset, length)