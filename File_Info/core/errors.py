from pathlib import Path


class ProcessingError(Exception):
    """
    A per-file failure.

    Carries the offending path and the underlying OSError. Never fatal to
    the run; the pipeline hands it to the error sink and moves on.
    """
    kind = "cannot process"

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"{self.kind} {path}: {cause}")
        self.path = path
        self.cause = cause


class MetadataError(ProcessingError):
    kind = "cannot read metadata"


class DigestError(ProcessingError):
    kind = "cannot compute digest"


class StartupError(Exception):
    """Bad arguments, settings or root path. Aborts before any traversal."""
