"""Layout helpers for the editor's chat and explorer windows and its command line."""

from __future__ import annotations

import os
from typing import List, Sequence, Tuple

_BLANKS = " \t"


def wrap_chat_lines(raw: Sequence[str], width: int) -> List[str]:
    """Word-wrap transcript entries to ``width`` columns.

    Entries are separated by a blank line and embedded newlines start new
    lines. A non-positive width leaves the entries untouched.
    """
    if width <= 0:
        return list(raw)

    out: List[str] = []
    for position, entry in enumerate(raw):
        if position > 0:
            out.append("")
        for segment in entry.split("\n"):
            rest = segment.rstrip(_BLANKS)
            while rest:
                if len(rest) <= width:
                    out.append(rest)
                    break
                break_at = width
                for index in range(width - 1, -1, -1):
                    if rest[index] in _BLANKS:
                        break_at = index + 1
                        break
                out.append(rest[:break_at])
                rest = rest[break_at:].lstrip(_BLANKS)
    return out


def chat_window(lines: Sequence[str], height: int, offset: int) -> List[str]:
    """The lines visible above the status line, scrolled ``offset`` lines back."""
    max_lines = height - 1
    max_offset = max(len(lines) - max_lines, 0)
    offset = min(max(offset, 0), max_offset)

    if max_lines > 0 and len(lines) > max_lines:
        start = len(lines) - max_lines - offset
        return list(lines[start : start + max_lines])
    return list(lines)


def explorer_window(
    lines: Sequence[str], cursor: int, height: int
) -> Tuple[List[str], int]:
    """The explorer entries that keep ``cursor`` in view, and its row among them."""
    max_lines = height - 1
    offset = cursor - max_lines + 1 if cursor >= max_lines else 0

    if max_lines > 0 and len(lines) > max_lines:
        end = min(offset + max_lines, len(lines))
        return list(lines[offset:end]), cursor - offset
    return list(lines), cursor


def parse_command(line: str) -> Tuple[str, str]:
    """Split a command line into its command word and the remaining argument."""
    parts = line.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def workspace_root(path: str) -> str:
    """The directory that holds ``path``, or ``path`` itself when it is a directory."""
    if not path:
        return "."
    if os.path.isdir(path):
        return path
    return os.path.dirname(os.path.normpath(path)) or "."