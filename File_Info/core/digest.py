import hashlib
from pathlib import Path

from File_Info.core.errors import DigestError


# Bytes read per call; memory use stays bounded by this, not file size
CHUNK_SIZE = 8192


def file_md5(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute the MD5 of a file, streaming it in chunks."""
    h = hashlib.md5(usedforsecurity=False)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()


def compute_digest(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Same as file_md5, but an open or read failure becomes DigestError.
    No partial digest is ever returned.
    """
    try:
        return file_md5(path, chunk_size)
    except OSError as exc:
        raise DigestError(path, exc) from exc
