"""A command palette that searches commands, file names and file contents."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

MAX_FILE_RESULTS = 500
MAX_CONTENT_RESULTS = 200
MAX_CONTENT_FILE_SIZE = 256 * 1024
SNIPPET_LIMIT = 60

_SKIPPED_DIRS = frozenset({".git", "node_modules", "vendor"})
_BINARY_EXTENSIONS = frozenset(
    {".png", ".jpg", ".jpeg", ".gif", ".ico", ".pdf", ".woff", ".woff2"}
)


class PaletteKind(str, Enum):
    COMMAND = "command"
    FILE = "file"
    CONTENT = "content"


_PREFIXES = {
    PaletteKind.COMMAND: "› ",
    PaletteKind.FILE: "▸ ",
    PaletteKind.CONTENT: "· ",
}


@dataclass(frozen=True)
class PaletteItem:
    """One palette entry: what it is, what is shown and what it activates."""

    kind: PaletteKind
    label: str
    value: str

    @property
    def display(self) -> str:
        return _PREFIXES.get(self.kind, "  ") + self.label


def palette_commands() -> List[PaletteItem]:
    """The editor commands the palette always offers."""
    command = PaletteKind.COMMAND
    return [
        PaletteItem(command, "chat – open AI chat", "chat"),
        PaletteItem(command, "implement – AI implement mode", "implement"),
        PaletteItem(command, "team – activate dev team (alias for implement)", "team"),
        PaletteItem(command, "board – view kanban (IMPLEMENT mode)", "board"),
        PaletteItem(command, "e <file> – edit file", "e"),
        PaletteItem(command, "E, Ex – file explorer", "E"),
        PaletteItem(command, "q – quit", "q"),
        PaletteItem(command, "wq – write and quit", "wq"),
        PaletteItem(command, "w – write", "w"),
        PaletteItem(command, "q! – quit without saving", "q!"),
    ]


def looks_textual(data: bytes) -> bool:
    """True when ``data`` holds no control bytes other than tab, newline and CR."""
    return all(byte >= 0x20 or byte in (0x09, 0x0A, 0x0D) for byte in data)


def _walk(root: str) -> Iterator[Tuple[str, os.stat_result]]:
    """Yield paths under ``root`` in lexical order, skipping excluded directories."""
    try:
        info = os.lstat(root)
    except OSError:
        return
    yield from _visit(root, info)


def _visit(path: str, info: os.stat_result) -> Iterator[Tuple[str, os.stat_result]]:
    is_dir = stat.S_ISDIR(info.st_mode)
    if is_dir and os.path.basename(path) in _SKIPPED_DIRS:
        return
    yield path, info
    if not is_dir:
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return
    for name in names:
        child = os.path.join(path, name)
        try:
            child_info = os.lstat(child)
        except OSError:
            continue
        yield from _visit(child, child_info)


class Palette:
    """Search overlay state: query, filtered results and selection cursor."""

    def __init__(self, root: str = ".") -> None:
        self.root = root or "."
        self.max_files = MAX_FILE_RESULTS
        self.max_content = MAX_CONTENT_RESULTS
        self.items: List[PaletteItem] = palette_commands()
        self.cursor = 0
        self._query = ""

    @property
    def query(self) -> str:
        return self._query

    def results(self) -> List[str]:
        """The filtered results as display lines."""
        return [item.display for item in self.items]

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < len(self.items) - 1:
            self.cursor += 1

    def selected(self) -> Optional[PaletteItem]:
        """The item under the cursor, or None when there are no results."""
        if 0 <= self.cursor < len(self.items):
            return self.items[self.cursor]
        return None

    def append(self, char: str) -> None:
        self._query += char
        self.refresh()

    def backspace(self) -> None:
        if self._query:
            self._query = self._query[:-1]
            self.refresh()

    def refresh(self) -> None:
        """Recompute the results for the current query."""
        needle = self._query.lower()
        candidates = [
            *palette_commands(),
            *self._search_files(needle),
            *self._search_content(needle),
        ]
        self.items = [
            item for item in candidates if not needle or needle in item.label.lower()
        ]
        self.cursor = max(0, min(self.cursor, len(self.items) - 1))

    def _search_files(self, needle: str) -> List[PaletteItem]:
        if not needle:
            return []
        root = os.path.abspath(self.root)
        items: List[PaletteItem] = []
        for path, info in _walk(root):
            if len(items) >= self.max_files:
                break
            rel = os.path.relpath(path, root)
            if needle not in rel.lower():
                continue
            label = rel + "/" if stat.S_ISDIR(info.st_mode) else rel
            items.append(PaletteItem(PaletteKind.FILE, label, path))
        return items

    def _search_content(self, needle: str) -> List[PaletteItem]:
        if len(needle) < 2:
            return []
        root = os.path.abspath(self.root)
        items: List[PaletteItem] = []
        for path, info in _walk(root):
            if len(items) >= self.max_content:
                break
            if stat.S_ISDIR(info.st_mode):
                continue
            if info.st_size > MAX_CONTENT_FILE_SIZE:
                continue
            if os.path.splitext(path)[1] in _BINARY_EXTENSIONS:
                continue
            try:
                with open(path, "rb") as handle:
                    data = handle.read()
            except OSError:
                continue
            if not looks_textual(data):
                continue

            rel = os.path.relpath(path, root)
            text = data.decode("utf-8", errors="replace")
            for number, line in enumerate(text.split("\n"), start=1):
                if len(items) >= self.max_content:
                    break
                if needle not in line.lower():
                    continue
                snippet = line.strip()
                if len(snippet) > SNIPPET_LIMIT:
                    snippet = snippet[:57] + "..."
                items.append(
                    PaletteItem(
                        PaletteKind.CONTENT,
                        f"{rel}:{number} {snippet}",
                        f"{path}:{number}",
                    )
                )
        return items