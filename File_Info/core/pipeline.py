import asyncio
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from File_Info.core.digest import CHUNK_SIZE, compute_digest
from File_Info.core.errors import ProcessingError
from File_Info.core.metadata import read_mtime
from File_Info.core.models import FileEntry, FileReport, RunSummary
from File_Info.core.scanner import IgnoreRules, walk


logger = logging.getLogger(__name__)

ReportSink = Callable[[FileReport], None]
ErrorSink = Callable[[ProcessingError], None]


def default_workers() -> int:
    return os.cpu_count() or 1


# ============================================================
# Unit of work (runs on a worker thread)
# ============================================================

def process_entry(
    entry: FileEntry,
    chunk_size: int = CHUNK_SIZE,
) -> FileReport | ProcessingError:
    """
    Metadata first, then digest. A file whose metadata cannot be read
    is never opened.
    """
    try:
        timestamp = read_mtime(entry.path)
        digest = compute_digest(entry.path, chunk_size)
    except ProcessingError as exc:
        return exc

    return FileReport(timestamp=timestamp, digest=digest, path=entry.path)


# ============================================================
# ASYNC IMPLEMENTATION (single source of truth)
# ============================================================

async def run_pipeline_async(
    root: Path,
    exclusions: IgnoreRules | Iterable | None,
    sink: ReportSink,
    error_sink: ErrorSink,
    *,
    workers: int | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> RunSummary:
    """
    Inventory every regular file under ``root``.

    - Walks the tree once and collects the entries up front
    - Hashes on a thread pool of ``workers`` threads
    - Hands each outcome to ``sink`` / ``error_sink`` as it completes,
      in no particular order, always from the event loop thread
    """
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    if not isinstance(exclusions, IgnoreRules):
        exclusions = IgnoreRules(exclusions)

    loop = asyncio.get_running_loop()

    # traversal runs off the loop thread
    entries = await loop.run_in_executor(None, lambda: list(walk(root, exclusions)))
    summary = RunSummary(files=len(entries))

    logger.info(
        "Processing %d files under %s with %d workers",
        len(entries),
        root,
        workers,
    )

    if not entries:
        return summary

    with ThreadPoolExecutor(
        max_workers=workers,
        thread_name_prefix="file-info",
    ) as executor:
        pending = [
            loop.run_in_executor(executor, process_entry, entry, chunk_size)
            for entry in entries
        ]

        for next_done in asyncio.as_completed(pending):
            outcome = await next_done

            if isinstance(outcome, FileReport):
                summary.reports += 1
                sink(outcome)
            else:
                summary.errors += 1
                error_sink(outcome)

    logger.info(
        "Finished %s: %d reports, %d errors",
        root,
        summary.reports,
        summary.errors,
    )

    return summary


# ============================================================
# SYNC WRAPPER
# ============================================================

def run_pipeline(
    root: Path,
    exclusions=None,
    sink: ReportSink | None = None,
    error_sink: ErrorSink | None = None,
    *,
    workers: int | None = None,
    chunk_size: int = CHUNK_SIZE,
):
    """
    Sync wrapper for run_pipeline_async.
    Under a running loop this returns a task instead of a summary.
    """
    sink = sink or (lambda report: None)
    error_sink = error_sink or (lambda error: None)

    coro = run_pipeline_async(
        root,
        exclusions,
        sink,
        error_sink,
        workers=workers,
        chunk_size=chunk_size,
    )

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        return loop.create_task(coro)
