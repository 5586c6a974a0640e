"""GitHub REST API adapter — implements the ContentClient port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from ghfs.domain.entities import RepoContent
from ghfs.domain.exceptions import (
    AccessDeniedError,
    ContentNotFoundError,
    RateLimitError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
_USER_AGENT = "ghfs/1.0"


class GitHubRestAdapter:
    """Concrete ContentClient backed by the GitHub v3 "repository contents" API.

    ref: https://docs.github.com/en/rest/repos/contents#get-repository-content
    """

    def __init__(
        self,
        client: httpx.Client,
        token: str | None = None,
        ref: str | None = None,
        api_url: str = GITHUB_API,
    ) -> None:
        self._client = client
        self._ref = ref
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    def get_contents(self, owner: str, repo: str, path: str) -> RepoContent | list[RepoContent]:
        """GET /repos/{owner}/{repo}/contents/{path} → RepoContent | [RepoContent]."""
        endpoint = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents/{quote(path)}"
        params = {"ref": self._ref} if self._ref else None
        resp = self._api_get(endpoint, path, params=params)

        try:
            data = resp.json()
        except ValueError as exc:
            raise UpstreamError(f"Malformed JSON from contents API for {path!r}: {exc}") from exc

        if isinstance(data, list):
            return [_to_content(item) for item in data]
        if isinstance(data, dict):
            return _to_content(data)
        raise UpstreamError(f"Unexpected contents API payload for {path!r}: {type(data).__name__}")

    def _api_get(
        self,
        endpoint: str,
        path: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self._client.get(url, headers=self._api_headers, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise ContentNotFoundError("get", path)

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise RateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise AccessDeniedError("Access denied. The repository may be private.")

        if resp.status_code == 401:
            raise AccessDeniedError("Bad credentials. Check the GitHub token.")

        if resp.status_code == 429:
            raise RateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise UpstreamError(f"GitHub API returned HTTP {resp.status_code} for {url}")


def _to_content(item: Any) -> RepoContent:
    if not isinstance(item, dict):
        raise UpstreamError(f"Unexpected contents API entry: {item!r}")
    return RepoContent(
        name=item.get("name", ""),
        path=item.get("path", ""),
        type=item.get("type", ""),
        size=item.get("size") or 0,
        sha=item.get("sha", ""),
        encoding=item.get("encoding"),
        content=item.get("content"),
    )
