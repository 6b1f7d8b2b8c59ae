"""Workspace tools for discussion agents: browsing, reading, searching and memory."""

from __future__ import annotations

import os
import subprocess
import threading
from typing import List, Optional, Tuple

SEARCH_LIMIT = 4000
BLOCKED = "Blocked: path escapes workspace."


def _os_error(op: str, path: str, exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    if reason:
        reason = reason[0].lower() + reason[1:]
    return f"{op} {path}: {reason}"


def _bracketed(items: List[str]) -> str:
    return "[" + " ".join(items) + "]"


def _limit(text: str) -> str:
    if len(text) > SEARCH_LIMIT:
        text = text[:SEARCH_LIMIT] + "\n... (truncated to 4000 characters)"
    if not text:
        return "Search returned 0 results."
    return text


def _run(args: List[str], cwd: Optional[str] = None) -> Tuple[bool, str]:
    """Run a command, returning whether it succeeded and its combined output."""
    try:
        completed = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError:
        return False, ""
    output = completed.stdout.decode("utf-8", errors="replace") if completed.stdout else ""
    return completed.returncode == 0, output


class ThinkcursionBackend:
    """Tools scoped to one workspace root, with a memory shared by all agents."""

    def __init__(self, root: str = ".") -> None:
        self.root = os.path.abspath(root)
        self.memory: List[str] = []
        self._lock = threading.Lock()

    def _resolve(self, target: str) -> Optional[str]:
        resolved = os.path.normpath(self.root + os.sep + (target or "."))
        if not resolved.startswith(self.root):
            return None
        return resolved

    def browse(self, target: str) -> str:
        """List the directories and files at ``target``."""
        resolved = self._resolve(target)
        if resolved is None:
            return BLOCKED
        try:
            with os.scandir(resolved) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            return _os_error("open", resolved, exc)

        dirs = [entry.name + "/" for entry in entries if entry.is_dir(follow_symlinks=False)]
        files = [entry.name for entry in entries if not entry.is_dir(follow_symlinks=False)]
        return f"Directories: {_bracketed(dirs)}\nFiles: {_bracketed(files)}"

    def read(self, target: str, start: int = 0, end: int = 0) -> str:
        """Lines ``start`` to ``end`` (1-based, inclusive) of a file; 0 means unbounded."""
        resolved = self._resolve(target)
        if resolved is None:
            return BLOCKED
        try:
            with open(resolved, "rb") as handle:
                data = handle.read()
        except IsADirectoryError as exc:
            return _os_error("read", resolved, exc)
        except OSError as exc:
            return _os_error("open", resolved, exc)

        lines = data.decode("utf-8", errors="replace").split("\n")
        if start > 0:
            start -= 1
        if end <= 0 or end > len(lines):
            end = len(lines)
        if start < 0 or start >= len(lines) or start >= end:
            return "Invalid line range"
        return "\n".join(lines[start:end])

    def remember(self, content: str) -> str:
        with self._lock:
            self.memory.append(content)
        return "Memory stored."

    def recall(self, filter_text: str) -> str:
        """Memory entries containing ``filter_text``, ignoring case."""
        needle = filter_text.lower()
        with self._lock:
            matches = [entry for entry in self.memory if needle in entry.lower()]
        if not matches:
            return "Memory recall: no matches."
        return "Memory recall:\n" + "\n".join(matches)

    def forget(self, filter_text: str) -> str:
        """Drop memory entries containing ``filter_text``, ignoring case."""
        needle = filter_text.lower()
        with self._lock:
            self.memory = [entry for entry in self.memory if needle not in entry.lower()]
        return f"System: Memory items matching '{filter_text}' erased."

    def search(self, query: str, target: str) -> str:
        """Search the workspace with ``git grep``, falling back to ``grep -rn``."""
        resolved = self._resolve(target)
        if resolved is None:
            return BLOCKED

        succeeded, output = _run(["git", "grep", "-I", "-n", query], cwd=resolved)
        if succeeded:
            return _limit(output)

        succeeded, output = _run(["grep", "-rn", query, resolved])
        if not succeeded and not output:
            return "Search found nothing or failed."
        return _limit(output)