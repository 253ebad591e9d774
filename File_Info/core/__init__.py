# Auto-generated __init__.py

from . import digest
from .digest import CHUNK_SIZE
from .digest import compute_digest
from .digest import file_md5
from . import errors
from .errors import DigestError
from .errors import MetadataError
from .errors import ProcessingError
from .errors import StartupError
from . import metadata
from .metadata import read_mtime
from .metadata import to_epoch_seconds
from . import models
from .models import FileEntry
from .models import FileReport
from .models import RunSummary
from . import pipeline
from .pipeline import default_workers
from .pipeline import process_entry
from .pipeline import run_pipeline
from .pipeline import run_pipeline_async
from . import scanner
from .scanner import IgnoreRules
from .scanner import normalize_path
from .scanner import should_skip
from .scanner import walk

__all__ = [
    "digest",
    "errors",
    "metadata",
    "models",
    "pipeline",
    "scanner",
    "CHUNK_SIZE",
    "DigestError",
    "FileEntry",
    "FileReport",
    "IgnoreRules",
    "MetadataError",
    "ProcessingError",
    "RunSummary",
    "StartupError",
    "compute_digest",
    "default_workers",
    "file_md5",
    "normalize_path",
    "process_entry",
    "read_mtime",
    "run_pipeline",
    "run_pipeline_async",
    "should_skip",
    "to_epoch_seconds",
    "walk",
]
