"""File exercises: appending, binary copying, substitution and timestamps."""

from __future__ import annotations

import os
import time
from datetime import datetime, timezone

from drillbook.text import replace_all

_CHUNK_SIZE = 4096
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"

PathLike = "str | os.PathLike[str]"


def append_and_read(path: str | os.PathLike[str], line: str) -> str:
    """Append ``line`` and a newline to ``path``, then return the whole file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def copy_binary(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> int:
    """Copy ``src`` to ``dst`` byte for byte and return the number of bytes copied."""
    copied = 0
    with open(src, "rb") as source:
        with open(dst, "wb") as target:
            while chunk := source.read(_CHUNK_SIZE):
                target.write(chunk)
                copied += len(chunk)
    return copied


def replace_in_file(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    old: str,
    new: str,
) -> int:
    """Write ``src`` to ``dst`` with every ``old`` replaced; return the count replaced."""
    if not old:
        raise ValueError("search string must not be empty")
    replaced = 0
    with open(src, encoding="utf-8", newline="") as source:
        with open(dst, "w", encoding="utf-8", newline="") as target:
            for line in source:
                replaced += line.count(old)
                target.write(replace_all(line, old, new))
    return replaced


def format_local_time(timestamp: float) -> str:
    """Format a Unix timestamp as local 'YYYY-MM-DD HH:MM:SS +hhmm'."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone()
    return moment.strftime(_TIME_FORMAT)


def current_time() -> tuple[int, str]:
    """Return the current Unix timestamp and its local-time rendering."""
    now = int(time.time())
    return now, format_local_time(now)