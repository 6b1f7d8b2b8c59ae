import os

from piaf.palette import (
    Palette,
    PaletteItem,
    PaletteKind,
    looks_textual,
    palette_commands,
)


def _type(palette, text):
    for char in text:
        palette.append(char)


def test_palette_commands_values():
    values = [item.value for item in palette_commands()]
    assert values == ["chat", "implement", "team", "board", "e", "E", "q", "wq", "w", "q!"]
    assert all(item.kind is PaletteKind.COMMAND for item in palette_commands())


def test_new_palette_lists_commands():
    palette = Palette(".")
    assert palette.query == ""
    assert palette.results() == ["› " + item.label for item in palette_commands()]
    assert palette.cursor == 0


def test_item_display_prefixes():
    assert PaletteItem(PaletteKind.FILE, "a.txt", "/x/a.txt").display == "▸ a.txt"
    assert PaletteItem(PaletteKind.CONTENT, "a.txt:1 x", "/x/a.txt:1").display == "· a.txt:1 x"


def test_query_filters_commands(tmp_path):
    palette = Palette(str(tmp_path))
    _type(palette, "chat")
    assert palette.query == "chat"
    assert palette.items
    assert all("chat" in item.label.lower() for item in palette.items)
    assert palette.selected().value == "chat"


def test_file_search_finds_matching_names(tmp_path):
    (tmp_path / "notes.txt").write_text("nothing relevant")
    palette = Palette(str(tmp_path))
    _type(palette, "notes")
    files = [item for item in palette.items if item.kind is PaletteKind.FILE]
    assert files == [
        PaletteItem(PaletteKind.FILE, "notes.txt", os.path.join(str(tmp_path), "notes.txt"))
    ]


def test_file_search_marks_directories(tmp_path):
    (tmp_path / "widgets").mkdir()
    palette = Palette(str(tmp_path))
    _type(palette, "widgets")
    labels = [item.label for item in palette.items if item.kind is PaletteKind.FILE]
    assert labels == ["widgets/"]


def test_excluded_directories_are_skipped(tmp_path):
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "zebra.txt").write_text("zebra")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "zebra.cfg").write_text("zebra")
    palette = Palette(str(tmp_path))
    _type(palette, "zebra")
    assert palette.items == []


def test_content_search_reports_line(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("first\n  hello world  \nlast")
    palette = Palette(str(tmp_path))
    _type(palette, "hello")
    content = [item for item in palette.items if item.kind is PaletteKind.CONTENT]
    assert content == [
        PaletteItem(PaletteKind.CONTENT, "a.txt:2 hello world", f"{target}:2")
    ]


def test_single_character_query_skips_content(tmp_path):
    (tmp_path / "a.txt").write_text("qqq")
    palette = Palette(str(tmp_path))
    palette.append("q")
    assert palette.query == "q"
    content = [item for item in palette.items if item.kind is PaletteKind.CONTENT]
    assert content == []
    assert "q" in [item.value for item in palette.items]


def test_binary_and_image_files_are_not_searched(tmp_path):
    (tmp_path / "blob.dat").write_bytes(b"needle\x00\x01")
    (tmp_path / "pic.png").write_text("needle")
    palette = Palette(str(tmp_path))
    _type(palette, "needle")
    assert [item for item in palette.items if item.kind is PaletteKind.CONTENT] == []


def test_long_snippet_is_truncated(tmp_path):
    (tmp_path / "a.txt").write_text("marker " + "x" * 100)
    palette = Palette(str(tmp_path))
    _type(palette, "marker")
    content = [item for item in palette.items if item.kind is PaletteKind.CONTENT]
    assert len(content) == 1
    snippet = content[0].label.split(" ", 1)[1]
    assert snippet.endswith("...")
    assert len(snippet) == 60


def test_backspace_restores_results(tmp_path):
    palette = Palette(str(tmp_path))
    _type(palette, "quit")
    narrowed = len(palette.items)
    palette.backspace()
    palette.backspace()
    palette.backspace()
    palette.backspace()
    assert palette.query == ""
    assert len(palette.items) >= narrowed
    assert [item.value for item in palette.items] == [item.value for item in palette_commands()]


def test_backspace_on_empty_query_is_noop():
    palette = Palette(".")
    before = list(palette.items)
    palette.backspace()
    assert palette.query == ""
    assert palette.items == before


def test_cursor_moves_within_bounds():
    palette = Palette(".")
    palette.move_up()
    assert palette.cursor == 0
    for _ in range(len(palette.items) + 5):
        palette.move_down()
    assert palette.cursor == len(palette.items) - 1
    assert palette.selected() == palette.items[-1]


def test_selected_is_none_without_results(tmp_path):
    palette = Palette(str(tmp_path))
    _type(palette, "zzzzqqqq")
    assert palette.items == []
    assert palette.cursor == 0
    assert palette.selected() is None


def test_looks_textual():
    assert looks_textual(b"plain\ttext\r\n") is True
    assert looks_textual(b"bad\x00byte") is False
    assert looks_textual(b"") is True