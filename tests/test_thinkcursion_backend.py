import subprocess
from unittest import mock

import pytest

from piaf.thinkcursion_backend import BLOCKED, ThinkcursionBackend


@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "b.txt").write_text("bee")
    (tmp_path / "a.txt").write_text("one\ntwo\nthree")
    return tmp_path


@pytest.fixture
def backend(workspace):
    return ThinkcursionBackend(str(workspace))


def _completed(code, output):
    return subprocess.CompletedProcess(args=[], returncode=code, stdout=output.encode())


def test_browse_lists_directories_and_files(backend):
    assert backend.browse(".") == "Directories: [docs/]\nFiles: [a.txt b.txt]"


def test_browse_empty_directory(backend):
    assert backend.browse("docs") == "Directories: []\nFiles: []"


def test_browse_blocks_escape(backend):
    assert backend.browse("../") == BLOCKED


def test_browse_missing_directory_reports_error(backend):
    assert "no such file or directory" in backend.browse("missing")


def test_read_range(backend):
    assert backend.read("a.txt", 1, 2) == "one\ntwo"


def test_read_whole_file(backend):
    assert backend.read("a.txt", 0, 0) == "one\ntwo\nthree"


def test_read_from_line(backend):
    assert backend.read("a.txt", 2, 0) == "two\nthree"


def test_read_absolute_target_stays_in_workspace(backend):
    assert backend.read("/a.txt", 0, 0) == "one\ntwo\nthree"


@pytest.mark.parametrize("start,end", [(5, 0), (3, 2)])
def test_read_invalid_range(backend, start, end):
    assert backend.read("a.txt", start, end) == "Invalid line range"


def test_read_blocks_escape(backend):
    assert backend.read("../secret.txt", 0, 0) == BLOCKED


def test_read_missing_file(backend):
    assert "no such file or directory" in backend.read("nope.txt", 0, 0)


def test_memory_remember_and_recall(backend):
    assert backend.remember("Keep tests focused") == "Memory stored."
    backend.remember("other note")
    assert backend.recall("FOCUSED") == "Memory recall:\nKeep tests focused"


def test_memory_recall_no_matches(backend):
    assert backend.recall("anything") == "Memory recall: no matches."


def test_memory_forget(backend):
    backend.remember("alpha")
    backend.remember("beta")
    assert backend.forget("ALP") == "System: Memory items matching 'ALP' erased."
    assert backend.memory == ["beta"]


def test_search_blocks_escape(backend):
    assert backend.search("x", "../") == BLOCKED


def test_search_uses_git_grep_output(backend):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run") as run:
        run.return_value = _completed(0, "a.txt:1:one\n")
        assert backend.search("one", ".") == "a.txt:1:one\n"
    assert run.call_args_list[0].args[0] == ["git", "grep", "-I", "-n", "one"]


def test_search_truncates_long_output(backend):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run") as run:
        run.return_value = _completed(0, "x" * 5000)
        result = backend.search("x", ".")
    assert result == "x" * 4000 + "\n... (truncated to 4000 characters)"


def test_search_empty_git_output(backend):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run") as run:
        run.return_value = _completed(0, "")
        assert backend.search("x", ".") == "Search returned 0 results."


def test_search_falls_back_to_grep(backend, workspace):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run") as run:
        run.side_effect = [_completed(128, "fatal"), _completed(0, "hit\n")]
        assert backend.search("bee", ".") == "hit\n"
    assert run.call_args_list[1].args[0] == ["grep", "-rn", "bee", str(workspace)]


def test_search_nothing_found(backend):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run") as run:
        run.side_effect = [_completed(1, ""), _completed(1, "")]
        assert backend.search("zzz", ".") == "Search found nothing or failed."


def test_search_missing_tools(backend):
    with mock.patch("piaf.thinkcursion_backend.subprocess.run", side_effect=FileNotFoundError()):
        assert backend.search("zzz", ".") == "Search found nothing or failed."