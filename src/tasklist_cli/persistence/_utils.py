"""Shared persistence utilities."""

import json
from pathlib import Path
from typing import Any


def _dumps(data: Any, indent: int | None) -> bytes:
    # Encoding to bytes up front keeps encoding errors away from the file
    return json.dumps(data, indent=indent, ensure_ascii=False).encode("utf-8")


def write_json(path: Path, data: Any, indent: int | None = 2) -> None:
    """Write JSON data to a file in place.

    The file is truncated before writing; a crash mid-write leaves it
    truncated.
    """
    content = _dumps(data, indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(content)


def atomic_write_json(path: Path, data: Any, indent: int | None = 2) -> None:
    """Write JSON data to a file atomically.

    Writes to a temporary file first, then renames to the target path.
    The temporary file is removed if either step fails.
    """
    content = _dumps(data, indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_bytes(content)
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
