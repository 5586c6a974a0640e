import pytest

from ghfs.domain.exceptions import ContentNotFoundError, UpstreamError
from ghfs.services.resolver import ContentResolver, Listing, SingleFile


def test_single_file_outcome(fake_client):
    resolved = ContentResolver(fake_client, "golang", "time").resolve("go.mod")
    assert isinstance(resolved, SingleFile)
    assert resolved.entry.name == "go.mod"
    assert fake_client.calls == [("golang", "time", "go.mod")]


def test_listing_outcome_preserves_order(fake_client):
    resolved = ContentResolver(fake_client, "golang", "time").resolve("")
    assert isinstance(resolved, Listing)
    assert [e.name for e in resolved.entries] == ["README.md", "go.mod", "rate", "third_party"]


def test_errors_propagate_unchanged(fake_client):
    with pytest.raises(ContentNotFoundError):
        ContentResolver(fake_client, "golang", "time").resolve("missing.txt")


def test_no_retry_on_failure():
    class Failing:
        calls = 0

        def get_contents(self, owner, repo, path):
            self.calls += 1
            raise UpstreamError("boom")

    client = Failing()
    with pytest.raises(UpstreamError, match="boom"):
        ContentResolver(client, "o", "r").resolve("x")
    assert client.calls == 1
