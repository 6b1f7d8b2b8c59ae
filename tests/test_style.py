from piaf.palette import Palette
from piaf.style import (
    BOX_BOTTOM_LEFT,
    BOX_TOP_LEFT,
    SEPARATOR_CHAR,
    STYLE_BG_SELECTED,
    STYLE_BOLD,
    STYLE_DIM,
    STYLE_FG_BRAND,
    STYLE_FG_GREEN,
    STYLE_FG_HIGHLIGHT,
    STYLE_FG_YELLOW,
    STYLE_RESET,
    style_chat_line,
    style_chat_lines,
    style_explorer_lines,
    style_palette_overlay,
)


def test_user_messages_bold_brand():
    line = style_chat_lines(["You: hello"], 80)[0]
    assert line.startswith(STYLE_BOLD + STYLE_FG_BRAND)
    assert line.endswith(STYLE_RESET)
    assert "You: hello" in line


def test_system_messages_yellow():
    line = style_chat_lines(["System: engaged."], 80)[0]
    assert line.startswith(STYLE_FG_YELLOW)
    assert line.endswith(STYLE_RESET)


def test_pipeline_dim_highlight():
    line = style_chat_lines(["Pipeline: A -> B -> C"], 80)[0]
    assert line.startswith(STYLE_DIM + STYLE_FG_HIGHLIGHT)
    assert line.endswith(STYLE_RESET)


def test_role_label_coloured_body_reset():
    line = style_chat_lines(["Discussion OpenAI: response text"], 80)[0]
    assert line.startswith(STYLE_BOLD + STYLE_FG_BRAND)
    assert STYLE_RESET + " response text" in line


def test_separator_rule():
    line = style_chat_lines(["---"], 60)[0]
    assert line.startswith(STYLE_FG_BRAND + STYLE_DIM)
    assert SEPARATOR_CHAR in line
    assert line.endswith(STYLE_RESET)


def test_progress_green():
    line = style_chat_lines(["Progress: done"], 80)[0]
    assert line.startswith(STYLE_FG_GREEN)
    assert line.endswith(STYLE_RESET)


def test_plain_and_empty_unchanged():
    assert style_chat_lines(["just regular text"], 80) == ["just regular text"]
    assert style_chat_lines([""], 80) == [""]


def test_welcome_text_dim():
    line = style_chat_lines(["Discussion window ready."], 80)[0]
    assert line.startswith(STYLE_DIM)
    assert line.endswith(STYLE_RESET)


def test_implementation_complete_bold_green():
    line = style_chat_lines(["Implementation complete. Review the summary."], 80)[0]
    assert line.startswith(STYLE_BOLD + STYLE_FG_GREEN)
    assert line.endswith(STYLE_RESET)


def test_multiple_roles_distinct_colours():
    lines = style_chat_lines(
        [
            "Project Manager [Claude]: board ready",
            "Architect [OpenAI]: plan ready",
            "Team Lead [Gemini]: team assigned",
            "Developer 1 [Claude]: code done",
            "QA [OpenAI]: Decision: PASS",
            "Review [Gemini]: accept",
        ],
        80,
    )
    assert STYLE_FG_BRAND in lines[0]
    assert STYLE_FG_HIGHLIGHT in lines[1]
    assert STYLE_FG_BRAND in lines[2]
    assert STYLE_FG_GREEN in lines[3]
    assert STYLE_FG_YELLOW in lines[4]
    assert STYLE_FG_HIGHLIGHT in lines[5]


def test_explorer_lines():
    lines = style_explorer_lines(["docs/", "src/", "main.go", ".."])
    assert lines[0].startswith(STYLE_BOLD + STYLE_FG_BRAND)
    assert lines[0].endswith(STYLE_RESET)
    assert lines[1].startswith(STYLE_BOLD + STYLE_FG_BRAND)
    assert lines[2] == "main.go"
    assert lines[3].startswith(STYLE_DIM)
    assert lines[3].endswith(STYLE_RESET)


def _separator_inner(line):
    inner = line[len(STYLE_FG_BRAND + STYLE_DIM):]
    return inner[: -len(STYLE_RESET)]


def test_separator_width():
    assert len(_separator_inner(style_chat_line("---", 50))) == 50


def test_separator_default_width():
    assert len(_separator_inner(style_chat_line("---", 0))) == 40


def test_palette_overlay_pads_and_draws_box():
    palette = Palette(".")
    out = style_palette_overlay(["background"], palette, 80, 24)
    assert len(out) == 23
    joined = "\n".join(out)
    assert BOX_TOP_LEFT in joined
    assert BOX_BOTTOM_LEFT in joined
    assert out[0] == STYLE_DIM + "background" + STYLE_RESET
    assert palette.results()[0] in joined


def test_palette_overlay_highlights_selection_and_does_not_mutate():
    palette = Palette(".")
    palette.move_down()
    background = ["a", "b"]
    out = style_palette_overlay(background, palette, 80, 24)
    assert background == ["a", "b"]
    selected_rows = [line for line in out if STYLE_BG_SELECTED in line]
    assert len(selected_rows) == 1
    assert palette.results()[1] in selected_rows[0]


def test_palette_overlay_limits_results():
    palette = Palette(".")
    out = style_palette_overlay([], palette, 80, 12)
    joined = "\n".join(out)
    shown = [result for result in palette.results() if result in joined]
    assert shown == palette.results()[:4]