import base64

import pytest

from ghfs.domain.entities import RepoContent
from ghfs.domain.exceptions import ContentNotFoundError
from ghfs.services.filesystem import GitHubFS

README = (b"# time\n\nThis repository provides supplementary Go time packages.\n" * 32)[:1024]
GO_MOD = b"module golang.org/x/time\n"
RATE_GO = b"package rate\n\n// Limit defines the maximum frequency of some events.\ntype Limit float64\n"


def file_content(path: str, data: bytes, encoding: str | None = "base64") -> RepoContent:
    name = path.rsplit("/", 1)[-1]
    if encoding == "base64":
        # the API wraps base64 at 60 columns
        raw = base64.b64encode(data).decode()
        content = "\n".join(raw[i : i + 60] for i in range(0, len(raw), 60)) + "\n"
    elif encoding:
        content = None
    else:
        content = data.decode()
    return RepoContent(name=name, path=path, type="file", size=len(data), encoding=encoding, content=content)


def entry(path: str, kind: str, size: int = 0) -> RepoContent:
    return RepoContent(name=path.rsplit("/", 1)[-1], path=path, type=kind, size=size)


class FakeContentClient:
    """In-memory ContentClient keyed by upstream path; records every call."""

    def __init__(self, tree: dict[str, RepoContent | list[RepoContent]]) -> None:
        self.tree = tree
        self.calls: list[tuple[str, str, str]] = []

    def get_contents(self, owner: str, repo: str, path: str) -> RepoContent | list[RepoContent]:
        self.calls.append((owner, repo, path))
        try:
            return self.tree[path]
        except KeyError:
            raise ContentNotFoundError("get", path) from None


@pytest.fixture
def tree() -> dict[str, RepoContent | list[RepoContent]]:
    return {
        "": [
            entry("README.md", "file", len(README)),
            entry("go.mod", "file", len(GO_MOD)),
            entry("rate", "dir"),
            entry("third_party", "submodule"),
        ],
        "README.md": file_content("README.md", README),
        "go.mod": file_content("go.mod", GO_MOD),
        "rate": [
            entry("rate/rate.go", "file", len(RATE_GO)),
            entry("rate/testdata", "dir"),
        ],
        "rate/rate.go": file_content("rate/rate.go", RATE_GO),
        "rate/testdata": [],
        "huge.bin": file_content("huge.bin", b"x" * 16, encoding="none"),
    }


@pytest.fixture
def fake_client(tree) -> FakeContentClient:
    return FakeContentClient(tree)


@pytest.fixture
def fsys(fake_client) -> GitHubFS:
    return GitHubFS(fake_client, "golang", "time")
