# memfs

A small in-memory file system for asyncio programs. Files are byte arrays
kept under string paths, and there are no directories. One `FileSystem` can
be shared by many tasks running on the same event loop. Locking happens
inside the file system, so callers do not need to coordinate.

The package has no dependencies outside the standard library.

## Usage

```python
import asyncio

from memfs.filesystem import FileSystem


async def main():
    fs = FileSystem()

    await fs.touch("/log.txt")
    await fs.write("/log.txt", 0, b"hello")
    await fs.write("/log.txt", 5, b" world")

    content = await fs.read("/log.txt", 0, 11)
    assert content == b"hello world"


asyncio.run(main())
```

## `memfs.filesystem.FileSystem`

All three methods are coroutines.

- `touch(path)` creates an empty file at `path` if none exists there. If a
  file already exists, it is left unchanged.
- `write(path, offset, data)` writes `data` starting at `offset`. The file is
  created if needed. When `offset` lies past the end of the file, the gap is
  filled with zero bytes. Writing empty data at an offset still extends the
  file to that offset.
- `read(path, offset, length)` returns `bytes` holding at most `length` bytes
  starting at `offset`. The result is shorter when the file ends first. An
  offset at or past the end gives `b""`. A `length` of `0` returns `b""`
  straight away, even when no file exists at `path`.

Locking uses one lock for the table of files and one lock per file. This
means writes to different files do not wait on each other.

## `memfs.file.File`

This is the byte buffer behind each path. It has `write(offset, data)`,
`read(offset, length)` and `len()`, with the same zero-filling and truncation
rules as above. It does no locking of its own.

## Errors

The errors in `memfs.errors` all derive from `FileSystemError`. Each one
keeps its message in `.detail`, and `str()` puts a prefix in front of it.
Two errors are equal when they have the same class and the same detail.

| Exception      | Raised when                                              | `str()` starts with |
|----------------|----------------------------------------------------------|---------------------|
| `InvalidPath`  | the path is the empty string                             | `Invalid path:`     |
| `FileNotFound` | `read` is given a path where no file exists              | `File not found:`   |
| `WriteError`   | `offset + len(data)` would be greater than `2**64 - 1`   | `Write error:`      |
| `ReadError`    | `offset + length` would be greater than `2**64 - 1`      | `Read error:`       |

A negative `offset` or `length` raises the built-in `ValueError`.

```python
from memfs.errors import FileNotFound

try:
    await fs.read("/missing.txt", 0, 10)
except FileNotFound as exc:
    print(exc)  # File not found: /missing.txt
```

## What it does not do

- It has no directories. A path is just a string key, and `/a/b.txt` has no
  relation to `/a`.
- Files cannot be deleted, renamed, truncated or listed.
- Nothing is written to disk. All contents are lost when the `FileSystem`
  object is discarded.
- It is safe to use from asyncio tasks on one event loop. It is not meant for
  sharing between threads or processes.

## Tests

Install the `test` extra, which provides pytest and pytest-asyncio. Then run
pytest from the project root.