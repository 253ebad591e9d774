import sys
import threading
from pathlib import Path
from typing import List, TextIO

from File_Info.core.errors import ProcessingError
from File_Info.core.models import FileReport


SEPARATOR = "-" * 80


def printable(text: str, stream: TextIO) -> str:
    """
    Make ``text`` encodable by ``stream``.

    File names that are not valid in the filesystem encoding arrive as
    surrogate escapes; they are written as backslash escapes instead.
    """
    encoding = getattr(stream, "encoding", None) or "utf-8"
    return text.encode(encoding, "backslashreplace").decode(encoding)


def print_header(root: Path, ignore_paths: List[Path], out: TextIO = sys.stdout):
    print(printable(f"Analyzing path: {root}", out), file=out)

    if ignore_paths:
        print("Ignored paths:", file=out)
        for path in ignore_paths:
            print(printable(f"  - {path}", out), file=out)

    print("\nFiles and modification times:", file=out)
    print(SEPARATOR, file=out)


class LineSink:
    """
    Writes one line per report / error.

    A single lock guards both streams so a line is always written
    whole, whichever thread calls in.
    """

    def __init__(self, out: TextIO = sys.stdout, err: TextIO = sys.stderr):
        self.out = out
        self.err = err
        self._lock = threading.Lock()

    def report(self, report: FileReport) -> None:
        line = printable(report.as_line(), self.out)
        with self._lock:
            self.out.write(line + "\n")
            self.out.flush()

    def error(self, error: ProcessingError) -> None:
        line = printable(str(error), self.err)
        with self._lock:
            self.err.write(line + "\n")
            self.err.flush()
