import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List

from File_Info.core.models import FileEntry


logger = logging.getLogger(__name__)


# ============================================================
# Ignore rules
# ============================================================

def normalize_path(path) -> Path:
    return Path(path).expanduser().resolve()


def should_skip(path: Path, exclusions: Iterable[Path]) -> bool:
    """
    True if ``path`` is one of ``exclusions`` or lies below one of them.

    Matching is per path component, so ``/foo2`` is not under ``/foo``.
    """
    for excluded in exclusions:
        if path.is_relative_to(excluded):
            return True
    return False


class IgnoreRules:
    def __init__(self, paths: Iterable | None = None):
        self.paths: List[Path] = [normalize_path(p) for p in (paths or [])]

    def should_ignore(self, path: Path) -> bool:
        return should_skip(path, self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)


# ============================================================
# Walker
# ============================================================

def walk(root: Path, ignore: IgnoreRules | None = None) -> Iterator[FileEntry]:
    """
    Yield every regular file under ``root``, depth first, names sorted.
    ``root`` is resolved first so it compares against resolved exclusions.

    - Excluded directories are pruned: they are never listed
    - Symlinks and special files are dropped, never followed
    - A node that cannot be read is skipped, the walk continues
    """
    ignore = ignore or IgnoreRules()
    root = normalize_path(root)

    if ignore.should_ignore(root):
        logger.debug("Root %s is excluded", root)
        return

    try:
        if root.is_file():
            yield FileEntry(path=root)
            return
    except OSError as exc:
        logger.debug("Cannot stat root %s: %s", root, exc)
        return

    stack = [root]
    while stack:
        current = stack.pop()

        try:
            with os.scandir(current) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Skipping directory %s: %s", current, exc)
            continue

        subdirs = []
        for child in children:
            path = Path(child.path)

            if ignore.should_ignore(path):
                logger.debug("Pruned %s", path)
                continue

            try:
                if child.is_dir(follow_symlinks=False):
                    subdirs.append(path)
                elif child.is_file(follow_symlinks=False):
                    yield FileEntry(path=path)
            except OSError as exc:
                logger.debug("Skipping entry %s: %s", path, exc)

        # reversed so the first name is popped first
        stack.extend(reversed(subdirs))
