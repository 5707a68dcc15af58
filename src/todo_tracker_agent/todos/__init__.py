"""Session-scoped todo list: validation, state, rendering."""

from .invocation import (
    TodoWriteInvocation,
    build_invocation,
    failure_result,
    run_todo_write,
)
from .models import TodoCounts, TodoItem, TodoStatus, ToolResult
from .rendering import (
    AnsiTarget,
    Emphasis,
    PlainTarget,
    get_target,
    render_description,
    render_display,
    render_summary,
    summary_counts,
)
from .store import TodoSnapshot, TodoStore, compute_recency_marker
from .validation import (
    TodoValidationError,
    Violation,
    ViolationKind,
    check_structure,
    validate,
    validate_params,
)

__all__ = [
    "AnsiTarget",
    "Emphasis",
    "PlainTarget",
    "TodoCounts",
    "TodoItem",
    "TodoSnapshot",
    "TodoStatus",
    "TodoStore",
    "TodoValidationError",
    "TodoWriteInvocation",
    "ToolResult",
    "Violation",
    "ViolationKind",
    "build_invocation",
    "check_structure",
    "compute_recency_marker",
    "failure_result",
    "get_target",
    "render_description",
    "render_display",
    "render_summary",
    "run_todo_write",
    "summary_counts",
    "validate",
    "validate_params",
]
