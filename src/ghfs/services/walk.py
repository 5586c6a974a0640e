"""Generic top-down tree walk over any ``ReadDirFS``.

Nothing here knows about GitHub; it only calls ``read_dir``.
"""

from __future__ import annotations

from collections.abc import Iterator

from ghfs.domain.ports.filesystem import ReadDirFS
from ghfs.domain.value_objects import ROOT, is_root


def join(dirpath: str, name: str) -> str:
    if is_root(dirpath):
        return name
    return f"{dirpath}/{name}"


def walk(fsys: ReadDirFS, top: str = ROOT) -> Iterator[tuple[str, list[str], list[str]]]:
    """Yield ``(dirpath, dirnames, filenames)`` for *top* and every directory below.

    Shaped like :func:`os.walk`: the caller may prune ``dirnames`` in place
    to skip subtrees.  Entries of unknown kind are reported as files.
    Errors from ``read_dir`` propagate.
    """
    entries = fsys.read_dir(top)
    dirnames = [e.name for e in entries if e.is_dir()]
    filenames = [e.name for e in entries if not e.is_dir()]
    yield top, dirnames, filenames
    for name in dirnames:
        yield from walk(fsys, join(top, name))
