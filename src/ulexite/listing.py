"""Immediate children of a directory. No recursion."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    name: str
    is_dir: bool


def list_entries(directory) -> list[Entry]:
    """Unreadable or missing directories list as empty."""
    try:
        with os.scandir(directory) as it:
            return [Entry(d.name, d.is_dir(follow_symlinks=False)) for d in it]
    except OSError:
        return []
