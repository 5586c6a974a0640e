"""API routes — thin controllers that delegate to the filesystem."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from ghfs.domain.value_objects import ROOT
from ghfs.interface.dependencies import get_filesystem
from ghfs.interface.schemas import DirectoryResponse, EntrySchema, ErrorResponse
from ghfs.services.dir_handle import OpenDir
from ghfs.services.filesystem import GitHubFS

router = APIRouter(prefix="/repos/{owner}/{repo}")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {"model": ErrorResponse, "description": "Invalid repository or path"},
    403: {"model": ErrorResponse, "description": "Repository is private"},
    404: {"model": ErrorResponse, "description": "Path not found"},
    429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
    502: {"model": ErrorResponse, "description": "GitHub API error"},
}


def _contents(fsys: GitHubFS, path: str) -> Response | DirectoryResponse:
    with fsys.open(path) as handle:
        if isinstance(handle, OpenDir):
            return DirectoryResponse(
                path=path,
                entries=[EntrySchema.from_info(e) for e in handle.read_dir()],
            )
        data = handle.readall()
        return Response(content=data, media_type="application/octet-stream")


@router.get(
    "/contents",
    response_model=None,
    responses={200: {"model": DirectoryResponse}, **_ERROR_RESPONSES},
)
def root_contents(fsys: GitHubFS = Depends(get_filesystem)) -> Response | DirectoryResponse:
    """List the repository root."""
    return _contents(fsys, ROOT)


@router.get(
    "/contents/{path:path}",
    response_model=None,
    responses={200: {"model": DirectoryResponse}, **_ERROR_RESPONSES},
)
def contents(path: str, fsys: GitHubFS = Depends(get_filesystem)) -> Response | DirectoryResponse:
    """Return raw file bytes, or the listing when *path* is a directory."""
    return _contents(fsys, path)


@router.get("/stat", response_model=EntrySchema, responses=_ERROR_RESPONSES)
def root_stat(fsys: GitHubFS = Depends(get_filesystem)) -> EntrySchema:
    return EntrySchema.from_info(fsys.stat(ROOT))


@router.get("/stat/{path:path}", response_model=EntrySchema, responses=_ERROR_RESPONSES)
def stat(path: str, fsys: GitHubFS = Depends(get_filesystem)) -> EntrySchema:
    """Metadata for *path* without transferring the content to the caller."""
    return EntrySchema.from_info(fsys.stat(path))
