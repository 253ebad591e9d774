import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Sequence, TextIO

from File_Info.cli.output import LineSink, print_header
from File_Info.cli.settings import load_settings
from File_Info.core.errors import StartupError
from File_Info.core.models import RunSummary
from File_Info.core.pipeline import run_pipeline_async
from File_Info.core.scanner import IgnoreRules, normalize_path


VERSION = "0.1.0"

logger = logging.getLogger(__name__)


# ----------------------------
# Argument parsing
# ----------------------------

def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-info",
        description=(
            "List every file under PATH with its modification time "
            "and MD5 digest."
        ),
    )
    parser.add_argument("path", metavar="PATH", type=Path, help="directory to scan")
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="IGNORE_PATH",
        type=Path,
        action="append",
        default=[],
        help="skip this path and everything below it (repeatable)",
    )
    parser.add_argument(
        "--workers",
        type=positive_int,
        default=None,
        help="hashing threads (default: one per CPU)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON settings file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


# ----------------------------
# CLI Orchestrator
# ----------------------------

async def run(
    root: Path,
    *,
    ignore_paths: Sequence[Path] | None = None,
    settings_path: Path | None = None,
    workers: int | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> RunSummary:
    """
    Print the header, then one line per file as it completes.

    Raises StartupError before touching the tree if the settings or the
    root are unusable. Per-file failures only go to ``err``.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    settings = load_settings(settings_path)

    root = normalize_path(root)
    if not root.exists():
        raise StartupError(f"path does not exist: {root}")

    ignore_list: List[Path] = [Path(p) for p in settings["ignore"]]
    ignore_list.extend(ignore_paths or [])
    ignore = IgnoreRules(ignore_list)

    if workers is None:
        workers = settings["pool"]["workers"]

    print_header(root, ignore.paths, out)

    sink = LineSink(out, err)
    summary = await run_pipeline_async(
        root,
        ignore,
        sink.report,
        sink.error,
        workers=workers,
        chunk_size=settings["digest"]["chunk_size"],
    )

    logger.debug(
        "Run complete: %d files, %d reports, %d errors",
        summary.files,
        summary.reports,
        summary.errors,
    )
    return summary


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        asyncio.run(
            run(
                args.path,
                ignore_paths=args.ignore,
                settings_path=args.settings,
                workers=args.workers,
            )
        )
    except StartupError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
