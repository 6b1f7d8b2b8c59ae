"""The editor's text content and cursor."""

from __future__ import annotations

import os
from typing import List, Union


class Buffer:
    """Lines of text with a cursor; ``write`` inserts UTF-8 text at the cursor."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.lines: List[str] = [""]
        self.cursor_row = 0
        self.cursor_col = 0
        self.width = width
        self.height = height

    def load_path(self, path: Union[str, os.PathLike]) -> None:
        """Replace the content with the file at ``path``; one empty line if unreadable."""
        self.cursor_row = 0
        self.cursor_col = 0
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            self.lines = [""]
            return
        self.lines = data.decode("utf-8", errors="replace").split("\n")

    def insert_rune(self, char: str) -> None:
        line = self.lines[self.cursor_row]
        col = min(self.cursor_col, len(line))
        self.lines[self.cursor_row] = line[:col] + char + line[col:]
        self.cursor_col += 1

    def delete_before(self) -> None:
        """Remove the character before the cursor, joining lines at column 0."""
        if self.cursor_col > 0:
            line = self.lines[self.cursor_row]
            col = self.cursor_col
            self.lines[self.cursor_row] = line[: col - 1] + line[col:]
            self.cursor_col -= 1
        elif self.cursor_row > 0:
            previous = self.lines[self.cursor_row - 1]
            current = self.lines.pop(self.cursor_row)
            self.cursor_col = len(previous)
            self.lines[self.cursor_row - 1] = previous + current
            self.cursor_row -= 1

    def delete_at(self) -> None:
        """Remove the character under the cursor, joining lines at line end."""
        line = self.lines[self.cursor_row]
        if self.cursor_col < len(line):
            col = self.cursor_col
            self.lines[self.cursor_row] = line[:col] + line[col + 1 :]
        elif self.cursor_row < len(self.lines) - 1:
            following = self.lines.pop(self.cursor_row + 1)
            self.lines[self.cursor_row] = line + following

    def newline(self) -> None:
        """Split the current line at the cursor."""
        line = self.lines[self.cursor_row]
        col = self.cursor_col
        self.lines[self.cursor_row : self.cursor_row + 1] = [line[:col], line[col:]]
        self.cursor_row += 1
        self.cursor_col = 0

    def move_up(self) -> None:
        if self.cursor_row > 0:
            self.cursor_row -= 1
            self._clamp_col()

    def move_down(self) -> None:
        if self.cursor_row < len(self.lines) - 1:
            self.cursor_row += 1
            self._clamp_col()

    def move_left(self) -> None:
        if self.cursor_col > 0:
            self.cursor_col -= 1
        elif self.cursor_row > 0:
            self.cursor_row -= 1
            self.cursor_col = len(self.lines[self.cursor_row])

    def move_right(self) -> None:
        if self.cursor_col < len(self.lines[self.cursor_row]):
            self.cursor_col += 1
        elif self.cursor_row < len(self.lines) - 1:
            self.cursor_row += 1
            self.cursor_col = 0

    def move_line_start(self) -> None:
        self.cursor_col = 0

    def move_line_end(self) -> None:
        self.cursor_col = len(self.lines[self.cursor_row])

    def string_lines(self) -> List[str]:
        """A copy of the content, one string per line."""
        return list(self.lines)

    def write(self, data: bytes) -> int:
        """Insert UTF-8 text at the cursor, stopping at the first invalid byte.

        Returns the number of bytes consumed.
        """
        try:
            text = data.decode("utf-8")
            consumed = len(data)
        except UnicodeDecodeError as exc:
            text = data[: exc.start].decode("utf-8")
            consumed = exc.start
        for char in text:
            self.insert_rune(char)
        return consumed

    def _clamp_col(self) -> None:
        self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_row]))