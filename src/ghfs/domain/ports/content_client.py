"""Port: content client — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from ghfs.domain.entities import RepoContent


class ContentClient(Protocol):
    """Abstract contract for fetching one path of a repository tree."""

    def get_contents(self, owner: str, repo: str, path: str) -> RepoContent | list[RepoContent]:
        """Return the file at *path*, or the entries of the directory at *path*.

        ``""`` addresses the repository root.  Failures are raised as
        :class:`~ghfs.domain.exceptions.UpstreamError` subclasses.
        """
        ...
