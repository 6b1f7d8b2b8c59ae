"""ANSI styling for chat, explorer and palette views."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from piaf.palette import Palette

STYLE_RESET = "\033[0m"
STYLE_BOLD = "\033[1m"
STYLE_DIM = "\033[2m"
STYLE_FG_RED = "\033[31m"
STYLE_FG_GREEN = "\033[32m"
STYLE_FG_YELLOW = "\033[33m"
STYLE_FG_BLUE = "\033[34m"
STYLE_FG_MAGENTA = "\033[35m"
STYLE_FG_CYAN = "\033[36m"
STYLE_FG_GRAY = "\033[90m"

STYLE_FG_BRAND = "\033[38;2;108;80;255m"
STYLE_FG_HIGHLIGHT = "\033[38;2;254;135;255m"
STYLE_BG_BRAND = "\033[48;2;108;80;255m"

SEPARATOR_CHAR = "\u2500"

BOX_TOP_LEFT = "\u256D"
BOX_TOP_RIGHT = "\u256E"
BOX_BOTTOM_LEFT = "\u2570"
BOX_BOTTOM_RIGHT = "\u256F"
BOX_HORIZONTAL = "\u2500"
BOX_VERTICAL = "\u2502"

STYLE_BG_POPUP = "\033[48;2;18;14;38m"
STYLE_BG_SELECTED = "\033[48;2;38;28;78m"
STYLE_FG_DIM = "\033[38;2;80;70;100m"
STYLE_FG_BORDER = "\033[38;2;60;50;120m"
STYLE_FG_SEARCH_BOX = "\033[38;2;200;190;230m"

_ROLE_STYLES = (
    ("Discussion ", STYLE_FG_BRAND),
    ("PM Summary", STYLE_FG_BRAND),
    ("Project Manager", STYLE_FG_BRAND),
    ("Architect", STYLE_FG_HIGHLIGHT),
    ("Team Lead", STYLE_FG_BRAND),
    ("Developer", STYLE_FG_GREEN),
    ("QA", STYLE_FG_YELLOW),
    ("Review", STYLE_FG_HIGHLIGHT),
)

_PREFIX_STYLES = (
    (("You:",), STYLE_BOLD + STYLE_FG_BRAND),
    (("System:",), STYLE_FG_YELLOW),
    (("Pipeline:", "Team:"), STYLE_DIM + STYLE_FG_HIGHLIGHT),
    (("Progress:",), STYLE_FG_GREEN),
    (("Assignment:",), STYLE_FG_BRAND),
    (("Channel coordination:",), STYLE_DIM),
    (("Review:",), STYLE_BOLD + STYLE_FG_HIGHLIGHT),
    (("Project board:",), STYLE_BOLD + STYLE_FG_BRAND),
    (("Implementation complete.",), STYLE_BOLD + STYLE_FG_GREEN),
    (
        (
            "Discussion window",
            "Implementation window",
            "Press i to",
            "Use prompts",
            "Use :accept",
        ),
        STYLE_DIM,
    ),
)


def style_chat_line(line: str, width: int) -> str:
    """Colour one already-wrapped chat line by what it starts with."""
    trimmed = line.strip()
    if not trimmed:
        return line

    if trimmed == "---":
        separator_width = width if width > 0 else 40
        return STYLE_FG_BRAND + STYLE_DIM + SEPARATOR_CHAR * separator_width + STYLE_RESET

    for prefixes, style in _PREFIX_STYLES:
        if trimmed.startswith(prefixes):
            return style + line + STYLE_RESET

    for prefix, color in _ROLE_STYLES:
        if trimmed.startswith(prefix):
            colon = line.find(":")
            if colon > 0:
                label, body = line[: colon + 1], line[colon + 1 :]
                return STYLE_BOLD + color + label + STYLE_RESET + body
            return STYLE_BOLD + color + line + STYLE_RESET

    return line


def style_chat_lines(lines: List[str], width: int) -> List[str]:
    return [style_chat_line(line, width) for line in lines]


def style_explorer_lines(lines: List[str]) -> List[str]:
    """Directories bold brand colour, the parent entry dim, files unchanged."""
    styled = []
    for line in lines:
        if line.endswith("/"):
            styled.append(STYLE_BOLD + STYLE_FG_BRAND + line + STYLE_RESET)
        elif line == "..":
            styled.append(STYLE_DIM + line + STYLE_RESET)
        else:
            styled.append(line)
    return styled


def _side(background: str) -> str:
    return background + STYLE_FG_BORDER + BOX_VERTICAL + STYLE_RESET


def style_palette_overlay(
    bg_lines: List[str], palette: "Palette", width: int, height: int
) -> List[str]:
    """Draw the palette as a centred box over dimmed background lines."""
    popup_width = max(width * 3 // 5, 40)
    if popup_width > width - 4:
        popup_width = width - 4

    max_results = max(height // 3, 4)
    results = palette.results()[:max_results]

    popup_height = len(results) + 4
    start_row = max((height - popup_height) // 2 - 1, 0)
    left_pad = (width - popup_width) // 2
    inner_width = popup_width - 2

    background = list(bg_lines)
    background.extend([""] * max(0, height - 1 - len(background)))

    margin = " " * max(left_pad, 0)
    out: List[str] = []

    for row, bg_line in enumerate(background):
        rel = row - start_row
        if rel < 0 or rel >= popup_height:
            out.append(STYLE_DIM + bg_line + STYLE_RESET)
            continue

        if rel == 0:
            body = (
                STYLE_FG_BORDER + BOX_TOP_LEFT + BOX_HORIZONTAL * inner_width
                + BOX_TOP_RIGHT + STYLE_RESET
            )
        elif rel == 1:
            query = palette.query
            prompt = (
                STYLE_FG_BRAND + STYLE_BOLD + " / " + STYLE_RESET
                + STYLE_BG_POPUP + STYLE_FG_SEARCH_BOX + query
            )
            pad = max(inner_width - 3 - len(query), 0)
            body = (
                _side(STYLE_BG_POPUP) + STYLE_BG_POPUP + prompt + " " * pad
                + STYLE_RESET + _side(STYLE_BG_POPUP)
            )
        elif rel == 2:
            body = (
                STYLE_FG_BORDER + BOX_VERTICAL + STYLE_DIM
                + BOX_HORIZONTAL * inner_width + STYLE_RESET
                + STYLE_FG_BORDER + BOX_VERTICAL + STYLE_RESET
            )
        elif rel == popup_height - 1:
            body = (
                STYLE_FG_BORDER + BOX_BOTTOM_LEFT + BOX_HORIZONTAL * inner_width
                + BOX_BOTTOM_RIGHT + STYLE_RESET
            )
        else:
            index = rel - 3
            if 0 <= index < len(results):
                text = results[index][: max(inner_width - 1, 0)]
                pad = max(inner_width - 1 - len(text), 0)
                selected = index == palette.cursor
                row_bg = STYLE_BG_SELECTED if selected else STYLE_BG_POPUP
                fg = STYLE_FG_HIGHLIGHT if selected else STYLE_FG_DIM
                body = (
                    _side(row_bg) + row_bg + fg + " " + text + " " * pad
                    + STYLE_RESET + _side(row_bg)
                )
            else:
                body = (
                    _side(STYLE_BG_POPUP) + STYLE_BG_POPUP + " " * inner_width
                    + STYLE_RESET + _side(STYLE_BG_POPUP)
                )

        out.append(margin + body)

    return out