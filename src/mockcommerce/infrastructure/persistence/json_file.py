"""File helpers shared by the JSON repositories.

Writes go to a temporary file in the same directory which then replaces
the target in one ``os.replace`` call, so a reader sees either the old or
the new document, never a truncated one.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


def ensure_json_file(file_path: Path) -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        write_json_atomic(file_path, [])


def read_json(file_path: Path) -> list[dict]:
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_json_atomic(file_path: Path, data: list[dict]) -> None:
    fd, tmp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(data, indent=2) + "\n")
        os.replace(tmp_name, file_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
