"""todo_write invocation: validate, update the store, render."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any

from .models import TodoItem, ToolResult
from .rendering import (
    RenderTarget,
    render_description,
    render_display,
    render_summary,
    summary_counts,
)
from .store import TodoStore
from .validation import TodoValidationError, validate_params

logger = logging.getLogger(__name__)


def failure_result(error: str, display: str) -> ToolResult:
    return ToolResult(
        llm_content={"success": False, "error": error},
        return_display=display,
    )


class TodoWriteInvocation:
    """A validated todo_write call, ready to execute against a store."""

    def __init__(
        self,
        todos: Sequence[TodoItem],
        store: TodoStore,
        target: RenderTarget | None = None,
    ):
        self.todos = tuple(todos)
        self._store = store
        self._target = target

    def get_description(self) -> str:
        return render_description(self.todos)

    def execute(self, signal: threading.Event | None = None) -> ToolResult:
        """Replace the stored list and render the result.

        ``signal`` is accepted for parity with other tools; the work is
        in-memory and never waits on it.
        """
        try:
            snapshot = self._store.replace(self.todos)
            display = render_display(
                snapshot.todos, snapshot.recently_completed_id, self._target
            )
            summary = render_summary(summary_counts(snapshot.todos))

            return ToolResult(
                llm_content={
                    "success": True,
                    "message": "Todo list updated successfully",
                    "todos": [todo.to_dict() for todo in snapshot.todos],
                    "summary": summary,
                },
                return_display=display,
            )
        except Exception as e:
            logger.error("Error updating todos: %s", e)
            return failure_result(
                f"Failed to update todos: {e}", f"Error updating todos: {e}"
            )


def build_invocation(
    params: Any,
    store: TodoStore,
    *,
    allow_empty: bool = False,
    target: RenderTarget | None = None,
) -> TodoWriteInvocation:
    """Validate ``params`` and bind them to ``store``.

    Raises:
        TodoValidationError: If the submitted list is rejected.
    """
    todos = validate_params(params, allow_empty=allow_empty)
    return TodoWriteInvocation(todos, store, target)


def run_todo_write(
    params: Any,
    store: TodoStore,
    *,
    allow_empty: bool = False,
    target: RenderTarget | None = None,
    signal: threading.Event | None = None,
) -> ToolResult:
    """Validate and execute one todo_write call.

    Rejections leave the store untouched and come back as a failure result
    carrying the violation message unchanged.
    """
    try:
        invocation = build_invocation(
            params, store, allow_empty=allow_empty, target=target
        )
    except TodoValidationError as e:
        logger.warning("Rejected todo list (%s): %s", e.violation.kind.value, e)
        return failure_result(str(e), f"Invalid todo list: {e}")

    logger.debug(invocation.get_description())
    return invocation.execute(signal)
