import json
from pathlib import Path
from typing import Any, Dict

from File_Info.core.digest import CHUNK_SIZE
from File_Info.core.errors import StartupError


# ----------------------------
# Settings
# ----------------------------

DEFAULT_SETTINGS = {
    "digest": {"chunk_size": CHUNK_SIZE},
    "pool": {"workers": None},  # None = one per CPU
    "ignore": [],
}


def load_settings(settings_path: Path | None = None) -> Dict[str, Any]:
    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if settings_path is None or not settings_path.exists():
        return merged

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            user_settings = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise StartupError(f"cannot load settings {settings_path}: {exc}") from exc

    if not isinstance(user_settings, dict):
        raise StartupError(f"settings {settings_path} must be a JSON object")

    for k, v in user_settings.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k].update(v)
        else:
            merged[k] = v

    validate_settings(merged)
    return merged


def validate_settings(settings: Dict[str, Any]) -> None:
    for section in ("digest", "pool"):
        if not isinstance(settings[section], dict):
            raise StartupError(f"{section} must be a JSON object, got {settings[section]!r}")

    chunk_size = settings["digest"]["chunk_size"]
    if not isinstance(chunk_size, int) or chunk_size < 1:
        raise StartupError(f"digest.chunk_size must be a positive integer, got {chunk_size!r}")

    workers = settings["pool"]["workers"]
    if workers is not None and (not isinstance(workers, int) or workers < 1):
        raise StartupError(f"pool.workers must be a positive integer, got {workers!r}")

    ignore = settings["ignore"]
    if not isinstance(ignore, list) or not all(isinstance(p, str) for p in ignore):
        raise StartupError(f"ignore must be a list of path strings, got {ignore!r}")
