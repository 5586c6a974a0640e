"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ghfs.domain.exceptions import InvalidArgumentError, InvalidRepositoryError

ROOT = "."

_NAME_RE = re.compile(r"^[A-Za-z0-9\-_.]+$")


def is_root(name: str) -> bool:
    return name in ("", ROOT)


def valid_path(name: str) -> bool:
    """Report whether *name* is a valid slash-separated relative path.

    The repository root may be spelled ``""`` or ``"."``; both are valid.
    Anything else must be non-empty, with no leading or trailing slash and
    no empty, ``.`` or ``..`` elements.
    """
    if is_root(name):
        return True
    return all(elem not in ("", ".", "..") for elem in name.split("/"))


def clean_path(op: str, name: str) -> str:
    """Validate *name* and return the path to send upstream.

    Both root spellings map to ``""``, which the contents API reads as the
    repository root.
    """
    if not valid_path(name):
        raise InvalidArgumentError(op, name)
    if is_root(name):
        return ""
    return name


def base_name(name: str) -> str:
    """Last element of *name*; ``"."`` for the root."""
    if is_root(name):
        return ROOT
    return name.rsplit("/", 1)[-1]


@dataclass(frozen=True, slots=True)
class Repository:
    """Validated ``owner/repo`` pair, safe to interpolate into an API URL."""

    owner: str
    repo: str

    @classmethod
    def from_parts(cls, owner: str, repo: str) -> Repository:
        for part in (owner, repo):
            if not _NAME_RE.match(part) or part in (".", ".."):
                raise InvalidRepositoryError(f"Invalid repository: '{owner}/{repo}'.")
        return cls(owner=owner, repo=repo)
