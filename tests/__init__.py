# Auto-generated __init__.py

from . import conftest
from .conftest import T1
from .conftest import T2
from .conftest import io_spy
from .conftest import sample_tree
from . import test_cli
from . import test_digest
from . import test_metadata
from . import test_models
from . import test_output
from . import test_pipeline
from . import test_scanner
from . import test_settings

__all__ = [
    "conftest",
    "test_cli",
    "test_digest",
    "test_metadata",
    "test_models",
    "test_output",
    "test_pipeline",
    "test_scanner",
    "test_settings",
    "T1",
    "T2",
    "io_spy",
    "sample_tree",
]
