"""A single in-memory file holding a growable byte buffer."""

from __future__ import annotations


class File:
    """Byte contents of one file."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def write(self, offset: int, data: bytes) -> None:
        """Write ``data`` at ``offset``, zero-filling any gap before it."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        end = offset + len(data)
        if end > len(self._data):
            self._data.extend(bytes(end - len(self._data)))
        if data:
            self._data[offset:end] = data

    def read(self, offset: int, length: int) -> bytes:
        """Return up to ``length`` bytes starting at ``offset``."""
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        if offset >= len(self._data):
            return b""
        return bytes(self._data[offset : offset + length])