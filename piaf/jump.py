"""Jump-mode labels: short letter codes that move the cursor to visible positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

JUMP_ALPHABET = "asdfghjklqwertyuiopzxcvbnm"

ANSI_INVERSE = "\033[7m"
ANSI_RESET = "\033[0m"


@dataclass(frozen=True)
class JumpTarget:
    """A position the cursor can jump to, with the code that selects it."""

    row: int
    col: int
    code: str = ""


def is_jump_char(char: str) -> bool:
    """True when ``char`` is one of the letters used in jump codes."""
    return len(char) == 1 and char in JUMP_ALPHABET


def jump_code_length(count: int) -> int:
    """The shortest code length that gives ``count`` distinct codes."""
    code_len = 1
    capacity = len(JUMP_ALPHABET)
    while count > capacity:
        code_len += 1
        capacity *= len(JUMP_ALPHABET)
    return code_len


def jump_code(index: int, code_len: int) -> str:
    """The base-N code of ``index``, padded to ``code_len`` letters."""
    base = len(JUMP_ALPHABET)
    letters = []
    for _ in range(code_len):
        index, digit = divmod(index, base)
        letters.append(JUMP_ALPHABET[digit])
    return "".join(reversed(letters))


def visible_jump_targets(lines: Sequence[str], height: int) -> List[JumpTarget]:
    """Targets on the rows that fit above the status line, with codes assigned.

    Each non-empty line yields its first column and every later non-space column.
    """
    max_rows = height - 1
    if max_rows <= 0 or max_rows > len(lines):
        max_rows = len(lines)

    positions = [
        (row, col)
        for row, line in enumerate(lines[:max_rows])
        for col, char in enumerate(line)
        if col == 0 or not char.isspace()
    ]

    code_len = jump_code_length(len(positions))
    return [
        JumpTarget(row, col, jump_code(index, code_len))
        for index, (row, col) in enumerate(positions)
    ]


def filter_jump_targets(targets: Iterable[JumpTarget], prefix: str) -> List[JumpTarget]:
    """The targets whose code starts with ``prefix``."""
    return [target for target in targets if target.code.startswith(prefix)]


def overlay_jump_labels(
    lines: Sequence[str], targets: Iterable[JumpTarget], prefix: str
) -> List[str]:
    """Insert the next code letter after each matching target, in inverse video.

    The original text is kept; labels are inserted right to left so that
    earlier columns stay valid.
    """
    overlaid = list(lines)
    depth = len(prefix)

    for target in reversed(filter_jump_targets(targets, prefix)):
        if target.row >= len(overlaid):
            continue
        line = overlaid[target.row]
        if target.col >= len(line) or len(target.code) <= depth:
            continue
        label = target.code[depth]
        split = target.col + 1
        overlaid[target.row] = (
            line[:split] + ANSI_INVERSE + label + ANSI_RESET + line[split:]
        )

    return overlaid