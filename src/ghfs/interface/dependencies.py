"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from ghfs.domain.value_objects import Repository
from ghfs.infrastructure.config import get_settings
from ghfs.services.filesystem import GitHubFS

_http_client: httpx.Client | None = None


def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.Client(timeout=httpx.Timeout(settings.http_timeout))


def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        _http_client.close()
        _http_client = None


def get_filesystem(owner: str, repo: str) -> GitHubFS:
    """Build a filesystem over ``owner/repo`` from the path parameters."""
    settings = get_settings()
    repository = Repository.from_parts(owner, repo)

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    return GitHubFS.new(
        _http_client,
        repository.owner,
        repository.repo,
        token=token,
        ref=settings.github_ref,
        api_url=settings.github_api_url,
    )
