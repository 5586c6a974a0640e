from ghfs.services.walk import join, walk


def test_join():
    assert join(".", "rate") == "rate"
    assert join("", "rate") == "rate"
    assert join("rate", "rate.go") == "rate/rate.go"


def test_walk_visits_every_directory(fsys):
    assert list(walk(fsys)) == [
        (".", ["rate"], ["README.md", "go.mod", "third_party"]),
        ("rate", ["testdata"], ["rate.go"]),
        ("rate/testdata", [], []),
    ]


def test_walk_can_prune(fsys, fake_client):
    visited = []
    for dirpath, dirnames, _ in walk(fsys):
        visited.append(dirpath)
        dirnames[:] = []
    assert visited == ["."]
    assert len(fake_client.calls) == 1


def test_walk_from_subdirectory_reads_files(fsys):
    for dirpath, _, filenames in walk(fsys, "rate"):
        for name in filenames:
            assert fsys.read_file(join(dirpath, name))
