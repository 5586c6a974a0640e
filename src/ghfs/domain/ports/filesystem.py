"""Port: generic read-only filesystem capabilities.

Each protocol is one small capability.  Files and filesystems implement the
combination they support, so a plain file never has to pretend it can list
entries, and a directory never pretends it can seek.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from ghfs.domain.entities import FileType


@runtime_checkable
class FileInfo(Protocol):
    """Metadata describing one file or directory."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    @property
    def mode(self) -> int: ...

    @property
    def mod_time(self) -> datetime: ...

    @property
    def sys(self) -> Any: ...

    def is_dir(self) -> bool: ...


@runtime_checkable
class DirEntry(Protocol):
    """One entry read from a directory."""

    @property
    def name(self) -> str: ...

    def is_dir(self) -> bool: ...

    def type(self) -> FileType: ...

    def info(self) -> FileInfo: ...


@runtime_checkable
class File(Protocol):
    def stat(self) -> FileInfo: ...

    def read(self, size: int = -1) -> bytes | None: ...

    def close(self) -> None: ...


@runtime_checkable
class Seekable(Protocol):
    def seek(self, offset: int, whence: int = 0) -> int: ...

    def tell(self) -> int: ...


@runtime_checkable
class ReaderAt(Protocol):
    def read_at(self, b: bytearray | memoryview, offset: int) -> int:
        """Fill *b* from absolute *offset*; a short count means end of data."""
        ...


@runtime_checkable
class ReadDirFile(File, Protocol):
    def read_dir(self, count: int = -1) -> list[DirEntry]:
        """Return up to *count* entries, or all remaining when ``count <= 0``."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    def open(self, name: str) -> File: ...


@runtime_checkable
class ReadFileFS(FileSystem, Protocol):
    def read_file(self, name: str) -> bytes: ...


@runtime_checkable
class ReadDirFS(FileSystem, Protocol):
    def read_dir(self, name: str) -> list[DirEntry]: ...


@runtime_checkable
class StatFS(FileSystem, Protocol):
    def stat(self, name: str) -> FileInfo: ...
