"""GitHub repository filesystem — the entry point of the package.

Every call validates the path, makes exactly one request through the
content client, and builds fresh handles from the answer.  Nothing is
cached, so the facade itself holds no mutable state and may be shared
between threads; the handles it returns may not.
"""

from __future__ import annotations

import httpx

from ghfs.domain.exceptions import NotExistError
from ghfs.domain.ports.content_client import ContentClient
from ghfs.domain.value_objects import ROOT, base_name, clean_path, is_root
from ghfs.infrastructure.github_rest_adapter import GITHUB_API, GitHubRestAdapter
from ghfs.services.dir_handle import OpenDir
from ghfs.services.file_handle import OpenFile
from ghfs.services.metadata import DirInfo, EntryInfo
from ghfs.services.resolver import ContentResolver, Listing, SingleFile


class GitHubFS:
    """Read-only filesystem over one repository's tree.

    Parameters
    ----------
    client:
        Anything implementing :class:`~ghfs.domain.ports.content_client.ContentClient`.
    owner, repo:
        The repository to expose.  Fixed for the lifetime of the instance.
    """

    def __init__(self, client: ContentClient, owner: str, repo: str) -> None:
        self._owner = owner
        self._repo = repo
        self._resolver = ContentResolver(client, owner, repo)

    @classmethod
    def new(
        cls,
        http_client: httpx.Client,
        owner: str,
        repo: str,
        *,
        token: str | None = None,
        ref: str | None = None,
        api_url: str = GITHUB_API,
    ) -> GitHubFS:
        """Build a filesystem backed by the GitHub REST API.

        *http_client* stays owned by the caller, who decides on timeouts and
        closes it.  *ref* selects a branch, tag or commit; the default
        branch is used when omitted.
        """
        adapter = GitHubRestAdapter(http_client, token=token, ref=ref, api_url=api_url)
        return cls(adapter, owner, repo)

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def repo(self) -> str:
        return self._repo

    # ── Filesystem operations ───────────────────────────────────────────

    def open(self, name: str) -> OpenFile | OpenDir:
        """Open *name* as a file or, if it is a directory, as a directory."""
        resolved = self._resolver.resolve(clean_path("open", name))
        if isinstance(resolved, Listing):
            path = ROOT if is_root(name) else name
            return OpenDir(DirInfo(base_name(name)), [EntryInfo(e) for e in resolved.entries], path=path)
        data = resolved.entry.decoded_content()
        return OpenFile(EntryInfo(resolved.entry), data, path=name)

    def read_file(self, name: str) -> bytes:
        """Return the whole content of the file *name*."""
        resolved = self._resolver.resolve(clean_path("open", name))
        if not isinstance(resolved, SingleFile):
            raise NotExistError("open", name)
        return resolved.entry.decoded_content()

    def read_dir(self, name: str) -> list[EntryInfo]:
        """Return the entries of the directory *name* in upstream order."""
        resolved = self._resolver.resolve(clean_path("open", name))
        if not isinstance(resolved, Listing):
            raise NotExistError("open", name)
        return [EntryInfo(e) for e in resolved.entries]

    def stat(self, name: str) -> EntryInfo | DirInfo:
        """Return metadata for *name* without decoding file content."""
        resolved = self._resolver.resolve(clean_path("stat", name))
        if isinstance(resolved, Listing):
            return DirInfo(base_name(name))
        return EntryInfo(resolved.entry)

    def __repr__(self) -> str:
        return f"GitHubFS({self._owner}/{self._repo})"
