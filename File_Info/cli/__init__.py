# Auto-generated __init__.py

from . import inventory
from .inventory import build_parser
from .inventory import main
from .inventory import run
from . import output
from .output import LineSink
from .output import print_header
from .output import printable
from . import settings
from .settings import DEFAULT_SETTINGS
from .settings import load_settings

__all__ = [
    "inventory",
    "output",
    "settings",
    "DEFAULT_SETTINGS",
    "LineSink",
    "build_parser",
    "load_settings",
    "main",
    "print_header",
    "printable",
    "run",
]
