"""Metadata adapters — remote entries seen as file info and directory entries."""

from __future__ import annotations

import stat
from datetime import datetime, timezone

from ghfs.domain.entities import FileType, RepoContent

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)

DIR_MODE = stat.S_IFDIR | 0o555
FILE_MODE = stat.S_IFREG | 0o444


def file_type(mode: int) -> FileType:
    """Map the type bits of *mode* onto :class:`FileType`."""
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    return FileType.UNKNOWN


class EntryInfo:
    """A :class:`RepoContent` as both ``FileInfo`` and ``DirEntry``.

    Entry kinds other than ``"file"`` and ``"dir"`` (symlinks, submodules)
    get mode ``0`` and type :attr:`FileType.UNKNOWN` rather than an error.
    The API gives no per-entry timestamps, so ``mod_time`` is the epoch.
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: RepoContent) -> None:
        self._entry = entry

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def size(self) -> int:
        return self._entry.size

    @property
    def mode(self) -> int:
        if self._entry.type == "dir":
            return DIR_MODE
        if self._entry.type == "file":
            return FILE_MODE
        return 0

    @property
    def mod_time(self) -> datetime:
        return EPOCH

    @property
    def sys(self) -> RepoContent:
        return self._entry

    def is_dir(self) -> bool:
        return self._entry.type == "dir"

    def type(self) -> FileType:
        return file_type(self.mode)

    def info(self) -> EntryInfo:
        return self

    def __repr__(self) -> str:
        return f"EntryInfo(name={self.name!r}, type={self._entry.type!r}, size={self.size})"


class DirInfo:
    """Synthetic info for an opened directory, the root included."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return 0

    @property
    def mode(self) -> int:
        return DIR_MODE

    @property
    def mod_time(self) -> datetime:
        return EPOCH

    @property
    def sys(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return True

    def type(self) -> FileType:
        return FileType.DIRECTORY

    def info(self) -> DirInfo:
        return self

    def __repr__(self) -> str:
        return f"DirInfo(name={self._name!r})"
