import builtins
import os
from pathlib import Path

import pytest

from File_Info.core import digest, scanner


T1 = 1_600_000_000
T2 = 1_700_000_000


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    root/
      a.txt     "hello", mtime T1 (+0.5s)
      b/c.txt   "",      mtime T2 (+0.9s)
    """
    root = tmp_path / "root"
    (root / "b").mkdir(parents=True)

    a = root / "a.txt"
    a.write_bytes(b"hello")
    os.utime(a, ns=(T1 * 10**9 + 500_000_000, T1 * 10**9 + 500_000_000))

    c = root / "b" / "c.txt"
    c.write_bytes(b"")
    os.utime(c, ns=(T2 * 10**9 + 900_000_000, T2 * 10**9 + 900_000_000))

    return root.resolve()


@pytest.fixture
def io_spy(monkeypatch):
    """
    Record every directory listed, file stat'ed and file opened
    by the walker, metadata reader and digester.
    """
    seen = {"scandir": [], "stat": [], "open": []}

    real_scandir = os.scandir
    real_stat = os.stat
    real_open = builtins.open

    def spy_scandir(path="."):
        seen["scandir"].append(Path(path))
        return real_scandir(path)

    def spy_stat(path, *args, **kwargs):
        if isinstance(path, (str, os.PathLike)):
            seen["stat"].append(Path(path))
        return real_stat(path, *args, **kwargs)

    def spy_open(file, *args, **kwargs):
        seen["open"].append(Path(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(scanner.os, "scandir", spy_scandir)
    monkeypatch.setattr(os, "stat", spy_stat)
    monkeypatch.setattr(digest, "open", spy_open, raising=False)

    return seen
