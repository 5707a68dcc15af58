"""Todo list rendering.

Rendering is split in two: the domain side decides *which* emphasis a task
gets (``Emphasis``), a target turns that into concrete output. ``AnsiTarget``
emits terminal escape sequences, ``PlainTarget`` leaves text untouched for
consumers that are not terminals.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from .models import TodoCounts, TodoItem, TodoStatus

HEADER = "📋 Todo List"
EMPTY_DISPLAY = f"{HEADER}\n└── No todos currently tracked."

BRANCH = "├──"
LAST_BRANCH = "└──"
UNCHECKED = "☐"
CHECKED = "☑"


class Emphasis(Enum):
    PLAIN = "plain"
    ACTIVE = "active"
    STRUCK = "struck"
    STRUCK_HIGHLIGHTED = "struck+highlighted"


class RenderTarget(Protocol):
    def style(self, text: str, emphasis: Emphasis) -> str: ...


class PlainTarget:
    """No styling at all."""

    def style(self, text: str, emphasis: Emphasis) -> str:
        return text


class AnsiTarget:
    """Terminal styling: blue for active, strike-through for done, green
    strike-through for the task that was just finished."""

    RESET = "\x1b[0m"
    CODES = {
        Emphasis.ACTIVE: "\x1b[34m",
        Emphasis.STRUCK: "\x1b[9m",
        Emphasis.STRUCK_HIGHLIGHTED: "\x1b[32;9m",
    }

    def style(self, text: str, emphasis: Emphasis) -> str:
        code = self.CODES.get(emphasis)
        if code is None:
            return text
        return f"{code}{text}{self.RESET}"


def _ansi_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    return force or sys.stdout.isatty()


def get_target(name: str = "auto") -> RenderTarget:
    """Resolve a target by name: ``ansi``, ``plain`` or ``auto``.

    ``auto`` picks ANSI unless NO_COLOR is set, or stdout is not a TTY and
    FORCE_COLOR is not set.
    """
    if name == "ansi":
        return AnsiTarget()
    if name == "plain":
        return PlainTarget()
    if name == "auto":
        return AnsiTarget() if _ansi_enabled() else PlainTarget()
    raise ValueError(f"Unknown display style: {name}")


def emphasis_for(todo: TodoItem, recently_completed_id: str | None) -> Emphasis:
    if todo.status == TodoStatus.IN_PROGRESS:
        return Emphasis.ACTIVE
    if todo.status == TodoStatus.COMPLETED:
        if recently_completed_id is not None and todo.id == recently_completed_id:
            return Emphasis.STRUCK_HIGHLIGHTED
        return Emphasis.STRUCK
    return Emphasis.PLAIN


def render_display(
    todos: Sequence[TodoItem],
    recently_completed_id: str | None = None,
    target: RenderTarget | None = None,
) -> str:
    """Render the list as a tree, one line per task, in list order."""
    if not todos:
        return EMPTY_DISPLAY

    target = target or AnsiTarget()
    lines = [HEADER]
    last = len(todos) - 1
    for index, todo in enumerate(todos):
        prefix = LAST_BRANCH if index == last else BRANCH
        icon = CHECKED if todo.status == TodoStatus.COMPLETED else UNCHECKED
        content = target.style(todo.content, emphasis_for(todo, recently_completed_id))
        lines.append(f"{prefix} {icon} {content}")

    return "\n".join(lines).strip()


def summary_counts(todos: Iterable[TodoItem]) -> TodoCounts:
    total = completed = in_progress = pending = 0
    for todo in todos:
        total += 1
        if todo.status == TodoStatus.COMPLETED:
            completed += 1
        elif todo.status == TodoStatus.IN_PROGRESS:
            in_progress += 1
        else:
            pending += 1
    return TodoCounts(
        total=total, completed=completed, in_progress=in_progress, pending=pending
    )


def render_summary(counts: TodoCounts) -> str:
    return (
        f"{counts.total} total tasks: {counts.completed} completed, "
        f"{counts.in_progress} in progress, {counts.pending} pending"
    )


def render_description(todos: Iterable[TodoItem]) -> str:
    """One-line progress indicator shown before the update runs."""
    counts = summary_counts(todos)
    return (
        f"📋 Managing {counts.total} tasks: {counts.in_progress} in progress, "
        f"{counts.pending} pending, {counts.completed} completed"
    )
