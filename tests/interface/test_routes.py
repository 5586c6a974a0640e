import pytest
from fastapi.testclient import TestClient

from ghfs.domain.exceptions import AccessDeniedError, RateLimitError, UpstreamError
from ghfs.interface.app import create_app
from ghfs.interface.dependencies import get_filesystem
from ghfs.services.filesystem import GitHubFS


@pytest.fixture
def api(fake_client):
    app = create_app()

    def _filesystem(owner: str, repo: str) -> GitHubFS:
        return GitHubFS(fake_client, owner, repo)

    app.dependency_overrides[get_filesystem] = _filesystem
    return TestClient(app)


def test_health(api):
    assert api.get("/health").json() == {"status": "ok"}


def test_root_listing(api, fake_client):
    resp = api.get("/repos/golang/time/contents")
    assert resp.status_code == 200
    body = resp.json()
    assert body["path"] == "."
    assert [e["name"] for e in body["entries"]] == ["README.md", "go.mod", "rate", "third_party"]
    rate = body["entries"][2]
    assert rate == {"name": "rate", "size": 0, "mode": "dr-xr-xr-x", "type": "directory", "is_dir": True}
    assert body["entries"][3]["type"] == "unknown"
    assert fake_client.calls == [("golang", "time", "")]


def test_file_bytes(api):
    resp = api.get("/repos/golang/time/contents/go.mod")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/octet-stream"
    assert resp.content == b"module golang.org/x/time\n"


def test_nested_directory(api):
    resp = api.get("/repos/golang/time/contents/rate")
    assert [e["name"] for e in resp.json()["entries"]] == ["rate.go", "testdata"]


def test_stat(api):
    body = api.get("/repos/golang/time/stat/README.md").json()
    assert body == {"name": "README.md", "size": 1024, "mode": "-r--r--r--", "type": "regular", "is_dir": False}
    assert api.get("/repos/golang/time/stat").json()["is_dir"] is True


def test_missing_path_is_404(api):
    resp = api.get("/repos/golang/time/contents/nope.txt")
    assert resp.status_code == 404
    assert resp.json()["status"] == "error"


def test_invalid_path_is_422(api):
    resp = api.get("/repos/golang/time/contents/rate/")
    assert resp.status_code == 422
    assert resp.json()["message"] == "open rate/: invalid argument"


def test_undecodable_file_is_502(api):
    assert api.get("/repos/golang/time/contents/huge.bin").status_code == 502


@pytest.mark.parametrize(
    "exc, status",
    [(AccessDeniedError("denied"), 403), (RateLimitError("slow down"), 429), (UpstreamError("boom"), 502)],
)
def test_upstream_errors_map_to_status(exc, status):
    class Failing:
        def get_contents(self, owner, repo, path):
            raise exc

    app = create_app()
    app.dependency_overrides[get_filesystem] = lambda owner, repo: GitHubFS(Failing(), owner, repo)
    resp = TestClient(app).get("/repos/o/r/contents/x")
    assert resp.status_code == status
    assert resp.json() == {"status": "error", "message": str(exc)}


def test_invalid_repository_is_422():
    with TestClient(create_app()) as client:
        resp = client.get("/repos/bad%20owner/time/contents")
    assert resp.status_code == 422


def test_error_envelope_is_documented(api):
    spec = api.get("/openapi.json").json()
    responses = spec["paths"]["/repos/{owner}/{repo}/contents/{path}"]["get"]["responses"]
    for status in ("403", "404", "422", "429", "502"):
        schema = responses[status]["content"]["application/json"]["schema"]
        assert schema == {"$ref": "#/components/schemas/ErrorResponse"}
    assert set(spec["components"]["schemas"]["ErrorResponse"]["properties"]) == {"status", "message"}
