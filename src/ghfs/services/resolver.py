"""Content resolver — one upstream call, classified as a file or a listing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ghfs.domain.entities import RepoContent
from ghfs.domain.ports.content_client import ContentClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SingleFile:
    """The path names one file."""

    entry: RepoContent


@dataclass(frozen=True, slots=True)
class Listing:
    """The path names a directory; entries keep upstream order."""

    entries: tuple[RepoContent, ...]


Resolution = SingleFile | Listing


class ContentResolver:
    """Fetch a validated path and tell files from directories.

    Errors from the client are not caught, retried or reclassified.
    """

    def __init__(self, client: ContentClient, owner: str, repo: str) -> None:
        self._client = client
        self._owner = owner
        self._repo = repo

    def resolve(self, path: str) -> Resolution:
        logger.debug("Resolving %s/%s:%r", self._owner, self._repo, path)
        result = self._client.get_contents(self._owner, self._repo, path)
        if isinstance(result, RepoContent):
            return SingleFile(result)
        return Listing(tuple(result))
