"""Open directory handle with cursor-based enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ghfs.domain.exceptions import IsDirectoryError
from ghfs.services.metadata import DirInfo, EntryInfo


class OpenDir:
    """Directory entries in upstream order, read through a forward-only cursor."""

    def __init__(self, info: DirInfo, entries: Sequence[EntryInfo], path: str | None = None) -> None:
        self._info = info
        self._entries = list(entries)
        self._offset = 0
        self._path = path if path is not None else info.name
        self._closed = False

    @property
    def name(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def stat(self) -> DirInfo:
        return self._info

    def read(self, size: int = -1) -> bytes:
        raise IsDirectoryError("read", self._path)

    def readinto(self, b: bytearray | memoryview) -> int:
        raise IsDirectoryError("read", self._path)

    def read_dir(self, count: int = -1) -> list[EntryInfo]:
        """Return the next entries and advance the cursor past them.

        With ``count > 0`` at most *count* entries come back, and
        :class:`EOFError` is raised once nothing is left.  With
        ``count <= 0`` every remaining entry comes back in one list, which
        is simply empty when the directory has been read to the end.
        """
        n = len(self._entries) - self._offset
        if count > 0 and n > count:
            n = count
        if n == 0:
            if count <= 0:
                return []
            raise EOFError(f"read_dir {self._path}: no more entries")
        batch = self._entries[self._offset : self._offset + n]
        self._offset += n
        return batch

    def close(self) -> None:
        self._closed = True

    def __iter__(self) -> Iterator[EntryInfo]:
        return iter(self.read_dir())

    def __enter__(self) -> OpenDir:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<OpenDir name={self._path!r} offset={self._offset} entries={len(self._entries)}>"
