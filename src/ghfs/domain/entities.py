"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import Enum

from ghfs.domain.exceptions import ContentDecodeError


class FileType(str, Enum):
    """Coarse type bucket derived from an entry's mode."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class RepoContent:
    """One item returned by the repository contents API.

    Listings carry no ``content``; a single-file response embeds it,
    usually base64-encoded.
    """

    name: str
    path: str
    type: str  # "file", "dir", "symlink", "submodule"
    size: int = 0
    sha: str = ""
    encoding: str | None = None
    content: str | None = None

    def decoded_content(self) -> bytes:
        """Return the raw file bytes, decoding ``content`` per ``encoding``."""
        if self.encoding == "base64":
            if self.content is None:
                raise ContentDecodeError(f"{self.path}: malformed response, base64 encoding of empty content")
            try:
                return base64.b64decode(self.content)
            except (binascii.Error, ValueError) as exc:
                raise ContentDecodeError(f"{self.path}: invalid base64 content: {exc}") from exc

        if not self.encoding:
            if self.content is None:
                return b""
            return self.content.encode("utf-8")

        if self.encoding == "none":
            raise ContentDecodeError(
                f"{self.path}: unsupported content encoding: none, "
                "this may occur when file size > 1 MB"
            )

        raise ContentDecodeError(f"{self.path}: unsupported content encoding: {self.encoding}")
