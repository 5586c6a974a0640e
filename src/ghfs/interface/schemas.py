"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

import stat

from pydantic import BaseModel

from ghfs.domain.entities import FileType
from ghfs.domain.ports.filesystem import DirEntry


class EntrySchema(BaseModel):
    """One file or directory as reported by the filesystem."""

    name: str
    size: int
    mode: str
    type: FileType
    is_dir: bool

    @classmethod
    def from_info(cls, info: DirEntry) -> EntrySchema:
        meta = info.info()
        return cls(
            name=meta.name,
            size=meta.size,
            mode=stat.filemode(meta.mode),
            type=info.type(),
            is_dir=meta.is_dir(),
        )


class DirectoryResponse(BaseModel):
    """Listing returned for ``GET .../contents/{path}`` on a directory."""

    path: str
    entries: list[EntrySchema]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
