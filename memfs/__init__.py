"""An asyncio-safe in-memory file system storing files as byte arrays."""

__version__ = "0.1.0"
__all__ = ["errors", "file", "filesystem"]