"""Board, assignment and status lines for the implementation workflow."""

from __future__ import annotations

from typing import Iterable, List, Tuple

MAX_ASSIGNED_DEVELOPERS = 2

TEAM_BOARD_ITEMS = (
    "Coordinate developer intents and unblock overlapping changes",
    "Write unit and integration coverage",
    "Prepare the implementation review for :accept or :reject",
)

_USER_PREFIX = "You: "


def last_user_message(history: Iterable[str]) -> str:
    """The text of the most recent ``You: `` line, or an empty string."""
    for line in reversed(list(history)):
        line = line.strip()
        if line.startswith(_USER_PREFIX):
            return line[len(_USER_PREFIX):]
    return ""


def split_workflow_message(message: str) -> List[str]:
    """Split a request into distinct parts on newlines, commas, semicolons and ' and '."""
    normalised = message.strip()
    for separator in ("\n", ";", " and "):
        normalised = normalised.replace(separator, ",")

    seen = set()
    tasks: List[str] = []
    for part in normalised.split(","):
        part = part.strip()
        if part.endswith("."):
            part = part[:-1]
        if not part:
            continue
        key = part.lower()
        if key in seen:
            continue
        seen.add(key)
        tasks.append(part)

    return tasks or ["the requested implementation work"]


def workflow_board(message: str) -> List[str]:
    """A fallback project board built from the user's request."""
    return [f"Implement {part}" for part in split_workflow_message(message)] + list(TEAM_BOARD_ITEMS)


def workflow_developer_tasks(board: Iterable[str]) -> List[str]:
    """Up to two board items that developers should own."""
    tasks: List[str] = []
    for item in board:
        lower = item.lower()
        if "write unit and integration coverage" in lower:
            continue
        if "prepare the implementation review" in lower:
            continue
        tasks.append(item)
        if len(tasks) == MAX_ASSIGNED_DEVELOPERS:
            break
    return tasks or ["Implement the requested change"]


def assign_developer(index: int, task: str) -> str:
    return f"Assignment: Developer {index} owns {task}."


def announce_intent(index: int, task: str) -> Tuple[str, str]:
    """The developer's intent line and the team lead's confirmation."""
    intent = f"Channel coordination: Developer {index} intends to change {task}."
    confirm = (
        f"Channel coordination: Team Lead confirms Developer {index} "
        "is clear to proceed without blocking the rest of the team."
    )
    return intent, confirm


def progress_line(agent: str, status: str) -> str:
    if status.endswith("."):
        status = status[:-1]
    return f"Progress: {agent} {status.strip()}."


def review_line(decision: str) -> str:
    """The final QA decision line; a blank decision counts as PASS."""
    review = decision.strip().upper() or "PASS"
    return f"Review: QA final decision {review}."