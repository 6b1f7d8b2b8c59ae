"""Shared and per-agent memory, persisted under ``<root>/.piaf/memory.json``."""

from __future__ import annotations

import json
import os
import threading
from typing import Dict, List


def _matches(entry: str, needle: str) -> bool:
    return not needle or needle in entry.lower()


class AgentMemory:
    """Remembers entries for the whole team and for individual agents."""

    def __init__(self, root: str = "") -> None:
        self.root = root
        self.shared: List[str] = []
        self.agents: Dict[str, List[str]] = {}
        self._lock = threading.RLock()
        self.load()

    @property
    def path(self) -> str:
        return os.path.join(self.root, ".piaf", "memory.json")

    def save(self) -> None:
        """Write the memory to disk; failures are ignored."""
        if not self.root:
            return
        with self._lock:
            state = {"shared": list(self.shared), "agents": {k: list(v) for k, v in self.agents.items()}}
        try:
            os.makedirs(os.path.dirname(self.path), exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as handle:
                json.dump(state, handle, indent=2)
        except OSError:
            pass

    def load(self) -> None:
        """Read the memory from disk when a saved state exists and parses."""
        if not self.root:
            return
        try:
            with open(self.path, encoding="utf-8") as handle:
                state = json.load(handle)
        except (OSError, ValueError):
            return
        if not isinstance(state, dict):
            return
        with self._lock:
            shared = state.get("shared")
            self.shared = [str(entry) for entry in shared] if isinstance(shared, list) else []
            agents = state.get("agents")
            if isinstance(agents, dict):
                self.agents = {
                    str(name): [str(entry) for entry in entries]
                    for name, entries in agents.items()
                    if isinstance(entries, list)
                }

    def remember_shared(self, entry: str) -> None:
        """Store ``entry`` in team memory unless it is blank or already known."""
        entry = entry.strip()
        if not entry:
            return
        with self._lock:
            if entry in self.shared:
                return
            self.shared.append(entry)
            self.save()

    def remember_agent(self, agent: str, entry: str) -> None:
        """Store ``entry`` in the memory of ``agent`` unless blank or duplicate."""
        agent = agent.strip()
        entry = entry.strip()
        if not agent or not entry:
            return
        with self._lock:
            current = self.agents.setdefault(agent, [])
            if entry in current:
                return
            current.append(entry)
            self.save()

    def recall(self, filter_text: str = "") -> List[str]:
        """Entries containing ``filter_text`` (case-insensitive), labelled by owner."""
        needle = filter_text.strip().lower()
        with self._lock:
            lines = [f"Shared: {entry}" for entry in self.shared if _matches(entry, needle)]
            for agent, entries in self.agents.items():
                lines.extend(f"{agent}: {entry}" for entry in entries if _matches(entry, needle))
        return lines

    def forget(self, filter_text: str) -> int:
        """Drop entries containing ``filter_text``; returns how many were removed."""
        needle = filter_text.strip().lower()
        if not needle:
            return 0
        with self._lock:
            kept_shared = [entry for entry in self.shared if needle not in entry.lower()]
            removed = len(self.shared) - len(kept_shared)
            self.shared = kept_shared

            for agent in list(self.agents):
                entries = self.agents[agent]
                kept = [entry for entry in entries if needle not in entry.lower()]
                removed += len(entries) - len(kept)
                if kept:
                    self.agents[agent] = kept
                else:
                    del self.agents[agent]
        return removed

    def snapshot(self, agent: str) -> List[str]:
        """Shared memory followed by the memory of ``agent``, as context lines."""
        with self._lock:
            lines: List[str] = []
            if self.shared:
                lines.append("Shared memory:")
                lines.extend(f"- {entry}" for entry in self.shared)
            entries = self.agents.get(agent, [])
            if entries:
                lines.append(f"{agent} memory:")
                lines.extend(f"- {entry}" for entry in entries)
        return lines