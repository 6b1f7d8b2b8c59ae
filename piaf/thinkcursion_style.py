"""Terminal rendering for the multi-persona discussion transcript."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Sequence

TC_RESET = "\033[0m"
TC_BOLD = "\033[1m"
TC_DIM = "\033[2m"
TC_FG_BRAND = "\033[38;2;108;80;255m"
TC_FG_HIGH = "\033[38;2;254;135;255m"
TC_FG_GRAY = "\033[90m"
TC_FG_WHITE = "\033[97m"
TC_FG_GREEN = "\033[32m"
TC_FG_YELLOW = "\033[33m"
TC_FG_CYAN = "\033[36m"
TC_BG_SUBTLE = "\033[48;2;22;18;48m"
TC_DASH = "\u2500"
TC_DOT_SEP = "\u2022"
TC_ARROW_R = "\u25B8"

RULE_WIDTH = 60
BANNER_WIDTH = 30


def format_timestamp(moment: datetime) -> str:
    """RFC 3339 to the second, with ``Z`` for UTC."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _rule() -> str:
    return TC_FG_BRAND + TC_DIM + TC_DASH * RULE_WIDTH + TC_RESET


def header(prompt: str, names: Sequence[str], started: datetime) -> str:
    """The branded block printed when a discussion starts."""
    rule = _rule()
    title = TC_BG_SUBTLE + TC_FG_HIGH + TC_BOLD + " thinkcursion " + TC_RESET
    separator = TC_FG_BRAND + TC_DIM + " " + TC_DOT_SEP + " " + TC_RESET + TC_FG_GRAY
    personas = TC_FG_GRAY + separator.join(names) + TC_RESET
    prompt_line = TC_FG_WHITE + prompt + TC_RESET
    time_line = TC_FG_GRAY + TC_DIM + format_timestamp(started) + TC_RESET

    return (
        f"\n{rule}\n{title}\n\n\n"
        f"  {TC_FG_HIGH}{TC_ARROW_R} {prompt_line}\n"
        f"  {TC_FG_BRAND + TC_DIM}{TC_ARROW_R} {personas}\n"
        f"  {TC_FG_GRAY + TC_DIM}{TC_ARROW_R} {time_line}\n"
        f"{rule}\n\n"
    )


def round_banner(round_number: int) -> str:
    """A centred separator naming the round."""
    label = f" round {round_number} "
    pad = max(BANNER_WIDTH - len(label), 2)
    left = TC_DASH * (pad // 2)
    right = TC_DASH * (pad - pad // 2)
    return (
        "\n" + TC_FG_BRAND + TC_DIM + left + TC_RESET
        + TC_BG_SUBTLE + TC_FG_BRAND + label + TC_RESET
        + TC_FG_BRAND + TC_DIM + right + TC_RESET + "\n"
    )


def persona_turn(name: str) -> str:
    """The label printed before a persona speaks."""
    return (
        TC_FG_HIGH + TC_BOLD + name + TC_RESET
        + TC_FG_GRAY + TC_DIM + " " + TC_DASH * 3 + TC_RESET + "\n"
    )


def response(name: str, text: str) -> str:
    """A persona's reply body."""
    return TC_FG_WHITE + text + TC_RESET + "\n"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def tool_call(persona: str, tool: str, args: Mapping[str, Any]) -> str:
    """A dim notice that a persona used a tool."""
    arg_text = " ".join(f"{key}={_format_value(value)}" for key, value in args.items())
    return (
        TC_FG_GRAY + TC_DIM + "  " + TC_ARROW_R + " " + persona + " "
        + TC_FG_CYAN + tool + TC_RESET
        + TC_FG_GRAY + TC_DIM + " " + arg_text + TC_RESET + "\n"
    )


def error_line(name: str, err: BaseException) -> str:
    """A failed persona turn."""
    return TC_FG_YELLOW + TC_DIM + "  " + name + ": " + str(err) + TC_RESET + "\n"


def ended(round_number: int) -> str:
    """The marker printed when the discussion stops."""
    rule = _rule()
    label = TC_FG_HIGH + TC_DIM + f"  ended at round {round_number}" + TC_RESET
    return "\n" + rule + "\n" + label + "\n" + rule + "\n"