"""A directory listing used for file navigation."""

from __future__ import annotations

import os
from typing import List, NamedTuple


class EnterResult(NamedTuple):
    """Outcome of activating an explorer entry.

    When ``load_file`` is true, ``target`` names a file to open; when ``is_dir``
    is true the explorer has already moved into the directory.
    """

    target: str
    is_dir: bool
    load_file: bool


_NOTHING = EnterResult("", False, False)
_DESCENDED = EnterResult("", True, False)


class Explorer:
    """Lists a directory with ``..`` first, then directories, then files."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        self.entries: List[str] = []
        self.cursor = 0
        self.refresh()

    def refresh(self) -> None:
        """Reload the listing of the current directory."""
        if self.path in ("", "."):
            self.path = os.getcwd()

        try:
            with os.scandir(self.path) as iterator:
                names = [
                    entry.name + "/" if entry.is_dir(follow_symlinks=False) else entry.name
                    for entry in iterator
                    if entry.name != "."
                ]
        except OSError:
            self.entries = [".."]
            self.cursor = 0
            return

        names.sort(key=lambda name: (not name.endswith("/"), name))
        self.entries = ["..", *names]
        self.cursor = max(0, min(self.cursor, len(self.entries) - 1))

    def lines(self) -> List[str]:
        return list(self.entries)

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < len(self.entries) - 1:
            self.cursor += 1

    def enter(self) -> EnterResult:
        """Activate the selected entry: descend into directories, report files."""
        if not self.entries:
            return _NOTHING

        name = self.entries[self.cursor]

        if name == "..":
            current = os.path.normpath(self.path)
            parent = os.path.dirname(current) or "."
            if parent == current:
                return _NOTHING
            self.path = parent
            self.refresh()
            return _DESCENDED

        target = os.path.normpath(os.path.join(self.path, name))
        if name.endswith("/") or os.path.isdir(target):
            self.path = target
            self.refresh()
            return _DESCENDED

        if not os.path.exists(target):
            return _NOTHING

        return EnterResult(target, False, True)