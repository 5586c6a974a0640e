"""Domain exception hierarchy.

Path errors describe what went wrong with a filesystem operation on a given
path.  Upstream errors describe failures of the content client.  The
interface layer maps each one to an HTTP status code.
"""

from __future__ import annotations


class GhfsError(Exception):
    """Base exception for the entire package."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryError(GhfsError):
    """The supplied owner/repo pair is not a valid GitHub repository name."""


# ── Filesystem errors ───────────────────────────────────────────────────────


class PathError(GhfsError):
    """An operation on *path* failed.

    ``str(exc)`` reads ``"<op> <path>: <reason>"``, e.g.
    ``"open ../etc: invalid argument"``.
    """

    reason = "error"

    def __init__(self, op: str, path: str, reason: str | None = None) -> None:
        self.op = op
        self.path = path
        if reason is not None:
            self.reason = reason
        super().__init__(f"{op} {path}: {self.reason}")


class InvalidArgumentError(PathError):
    """Malformed path, out-of-range offset or unknown seek origin."""

    reason = "invalid argument"


class NotExistError(PathError):
    """The path does not exist, or is not the kind of entry the operation needs."""

    reason = "file does not exist"


class IsDirectoryError(PathError):
    """Attempt to read bytes from a directory."""

    reason = "is a directory"


# ── Content client errors ───────────────────────────────────────────────────


class UpstreamError(GhfsError):
    """Any failure of the remote content API (network, status, payload)."""


class ContentNotFoundError(NotExistError, UpstreamError):
    """The content API answered 404 for the path."""

    reason = "not found upstream"


class AccessDeniedError(UpstreamError):
    """Access to the repository was denied (401 / 403)."""


class RateLimitError(UpstreamError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class ContentDecodeError(UpstreamError):
    """File content came back in an encoding that cannot be decoded."""
