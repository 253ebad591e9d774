import hashlib
from pathlib import Path

import pytest

from File_Info.core import digest
from File_Info.core.digest import CHUNK_SIZE, compute_digest, file_md5
from File_Info.core.errors import DigestError


MD5_HELLO = "5d41402abc4b2a76b9719d911017c592"
MD5_EMPTY = "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_of_known_content(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"hello")

    assert file_md5(f) == MD5_HELLO


def test_md5_of_empty_file(tmp_path: Path):
    f = tmp_path / "empty"
    f.write_bytes(b"")

    assert compute_digest(f) == MD5_EMPTY


def test_digest_is_deterministic(tmp_path: Path):
    f = tmp_path / "data.bin"
    f.write_bytes(bytes(range(256)) * 100)

    assert compute_digest(f) == compute_digest(f)


def test_default_chunk_size():
    assert CHUNK_SIZE == 8192


def test_streams_in_fixed_chunks(tmp_path: Path, monkeypatch):
    data = b"0123456789" * 5000
    f = tmp_path / "big.bin"
    f.write_bytes(data)

    reads = []
    real_open = open

    class CountingFile:
        def __init__(self, handle):
            self.handle = handle

        def read(self, size=-1):
            reads.append(size)
            return self.handle.read(size)

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            self.handle.close()

    monkeypatch.setattr(
        digest,
        "open",
        lambda *a, **kw: CountingFile(real_open(*a, **kw)),
        raising=False,
    )

    result = compute_digest(f, chunk_size=1000)

    assert result == hashlib.md5(data).hexdigest()
    assert set(reads) == {1000}
    # 50 full chunks plus the final empty read
    assert len(reads) == 51


def test_missing_file_raises_digest_error(tmp_path: Path):
    missing = tmp_path / "gone.bin"

    with pytest.raises(DigestError) as info:
        compute_digest(missing)

    assert info.value.path == missing
    assert isinstance(info.value.cause, OSError)


def test_read_failure_raises_digest_error(tmp_path: Path, monkeypatch):
    f = tmp_path / "a.txt"
    f.write_bytes(b"hello")

    class BrokenFile:
        def read(self, size=-1):
            raise OSError(5, "Input/output error")

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr(digest, "open", lambda *a, **kw: BrokenFile(), raising=False)

    with pytest.raises(DigestError, match="Input/output error"):
        compute_digest(f)
