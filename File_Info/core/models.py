from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """
    A regular file discovered by the walker.

    Only regular files are ever turned into entries, so there is no
    file-type field to check downstream.
    """
    path: Path


@dataclass(frozen=True)
class FileReport:
    """
    Result for one successfully processed file.

    timestamp: last modification, whole seconds since the epoch
    digest: lowercase hex MD5 of the full content
    """
    timestamp: int
    digest: str
    path: Path

    def as_line(self) -> str:
        return f"{self.timestamp}\t{self.digest}\t{self.path}"


@dataclass
class RunSummary:
    files: int = 0
    reports: int = 0
    errors: int = 0
