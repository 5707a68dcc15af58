"""Session-scoped todo list state.

The store does not own a global: it wraps the host session's state mapping
(ADK ``tool_context.state`` or a plain dict) and keeps only plain dicts in it.
Every write assigns a fresh list so the host records a state delta.

Callers are expected to serialize invocations; ``replace`` reads the prior
list, diffs it and writes the new one without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any

from .models import TodoItem, TodoStatus

logger = logging.getLogger(__name__)

TODO_LIST_KEY = "_todo_list"
RECENTLY_COMPLETED_KEY = "_todo_recently_completed"


@dataclass(frozen=True)
class TodoSnapshot:
    todos: tuple[TodoItem, ...]
    recently_completed_id: str | None = None


def compute_recency_marker(
    prior: Iterable[TodoItem],
    candidate: Iterable[TodoItem],
) -> str | None:
    """Return the id of the task that just moved from in_progress to completed.

    Only the item that was in progress in ``prior`` can qualify; it must be
    present in ``candidate`` with the same id and status completed.
    """
    previously_in_progress = next(
        (t for t in prior if t.status == TodoStatus.IN_PROGRESS), None
    )
    if previously_in_progress is None:
        return None

    for todo in candidate:
        if (
            todo.id == previously_in_progress.id
            and todo.status == TodoStatus.COMPLETED
        ):
            return todo.id
    return None


class TodoStore:
    """Todo list plus the "most recently completed" marker for one session."""

    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state

    def snapshot(self) -> tuple[TodoItem, ...]:
        """Return an immutable copy of the stored list."""
        raw = self._state.get(TODO_LIST_KEY) or []
        return tuple(TodoItem.model_validate(dict(item)) for item in raw)

    @property
    def recently_completed_id(self) -> str | None:
        return self._state.get(RECENTLY_COMPLETED_KEY)

    def replace(self, candidate: Iterable[TodoItem]) -> TodoSnapshot:
        """Replace the whole list with ``candidate``.

        ``candidate`` must already be validated. The recency marker is computed
        against the list being replaced, so it has to happen before the write.
        """
        candidate = tuple(candidate)
        marker = compute_recency_marker(self.snapshot(), candidate)

        stored = [todo.to_dict() for todo in candidate]

        self._state[TODO_LIST_KEY] = stored
        self._state[RECENTLY_COMPLETED_KEY] = marker

        if marker:
            logger.debug("Todo %s marked as just completed", marker)
        return TodoSnapshot(todos=candidate, recently_completed_id=marker)

    def clear(self) -> None:
        """Drop all tasks and the recency marker."""
        self._state[TODO_LIST_KEY] = []
        self._state[RECENTLY_COMPLETED_KEY] = None
