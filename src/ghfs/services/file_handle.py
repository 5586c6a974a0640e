"""Open file handle over content that has already been fetched and decoded."""

from __future__ import annotations

import io

from ghfs.domain.exceptions import InvalidArgumentError
from ghfs.services.metadata import EntryInfo


class OpenFile(io.RawIOBase):
    """Read-only, seekable view over one file's bytes.

    ``readinto`` is the primitive; ``read``, ``readall``, ``readline`` and
    iteration come from :class:`io.RawIOBase`, so the handle can also be
    wrapped in :class:`io.BufferedReader` or :class:`io.TextIOWrapper`.

    End of data is reported the ``io`` way: ``readinto`` returns ``0`` and
    ``read`` returns ``b""``.  ``read_at`` signals it with a short count.
    The offset is unsynchronized; use one handle from one caller at a time.
    """

    def __init__(self, info: EntryInfo, data: bytes, path: str | None = None) -> None:
        super().__init__()
        self._info = info
        self._data = data
        self._offset = 0
        self._path = path if path is not None else info.name

    @property
    def name(self) -> str:
        return self._path

    def stat(self) -> EntryInfo:
        """Metadata captured at open time; never refetched."""
        return self._info

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, b: bytearray | memoryview) -> int:
        self._check_open()
        if self._offset >= len(self._data):
            return 0
        if self._offset < 0:
            raise InvalidArgumentError("read", self._path)
        view = memoryview(b).cast("B")
        n = min(len(view), len(self._data) - self._offset)
        view[:n] = self._data[self._offset : self._offset + n]
        self._offset += n
        return n

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the offset; it must land within ``[0, len(data)]``.

        On failure the offset is left where it was.
        """
        self._check_open()
        if whence == io.SEEK_SET:
            pos = offset
        elif whence == io.SEEK_CUR:
            pos = self._offset + offset
        elif whence == io.SEEK_END:
            pos = len(self._data) + offset
        else:
            raise InvalidArgumentError("seek", self._path, f"invalid whence {whence!r}")
        if pos < 0 or pos > len(self._data):
            raise InvalidArgumentError("seek", self._path)
        self._offset = pos
        return pos

    def tell(self) -> int:
        self._check_open()
        return self._offset

    def read_at(self, b: bytearray | memoryview, offset: int) -> int:
        """Fill *b* from absolute *offset* without moving the handle's offset.

        Returns the number of bytes copied, which is less than ``len(b)``
        when the data ends first.
        """
        self._check_open()
        if offset < 0 or offset > len(self._data):
            raise InvalidArgumentError("read", self._path)
        view = memoryview(b).cast("B")
        chunk = self._data[offset : offset + len(view)]
        view[: len(chunk)] = chunk
        return len(chunk)

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def __repr__(self) -> str:
        return f"<OpenFile name={self._path!r} offset={self._offset} size={len(self._data)}>"
