"""Todo list validation.

Two layers run in order:

- ``check_structure``: shape conformance (mapping with a ``todos`` list of
  objects carrying only ``id``/``content``/``status`` strings). Backed by
  pydantic so the messages match what the rest of the stack reports.
- ``validate``: domain rules, checked in a fixed order so the same bad list
  always yields the same message. Only the first violation is reported.

Neither layer touches session state.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from .models import STATUS_VALUES, TodoItem, TodoStatus


class ViolationKind(str, Enum):
    STRUCTURAL = "structural"
    DOMAIN = "domain"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return self.message


class TodoValidationError(ValueError):
    """Raised when a submitted todo list is rejected."""

    def __init__(self, violation: Violation):
        super().__init__(violation.message)
        self.violation = violation


class _TodoShape(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Missing or empty fields are left to the domain layer.
    id: StrictStr | None = None
    content: StrictStr | None = None
    status: StrictStr | None = None


class _ParamsShape(BaseModel):
    model_config = ConfigDict(extra="forbid")

    todos: list[_TodoShape]


_OBJECT_ERRORS = {"model_type", "model_attributes_type", "dict_type"}


def _format_pydantic_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    # pydantic names the shape class here; keep that out of the message
    msg = "Input should be an object" if err["type"] in _OBJECT_ERRORS else err["msg"]
    if loc:
        return f"Invalid parameters: {loc}: {msg}"
    return f"Invalid parameters: {msg}"


def check_structure(params: Any) -> Violation | None:
    """Return a structural violation for ``params``, or None if well-shaped."""
    try:
        _ParamsShape.model_validate(params)
    except ValidationError as e:
        return Violation(ViolationKind.STRUCTURAL, _format_pydantic_error(e))
    return None


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def validate(
    todos: Sequence[Mapping[str, Any]],
    *,
    allow_empty: bool = False,
) -> Violation | None:
    """Check a candidate list against the domain rules.

    Args:
        todos: Candidate items as plain mappings, in submission order.
        allow_empty: Accept an empty list (meaning "clear all tasks").

    Returns:
        The first violation found, or None when the list is acceptable.
    """
    if isinstance(todos, (str, bytes)) or not isinstance(todos, Sequence):
        return Violation(
            ViolationKind.DOMAIN, 'Parameter "todos" must be a non-empty array.'
        )
    if not todos and not allow_empty:
        return Violation(
            ViolationKind.DOMAIN, 'Parameter "todos" must be a non-empty array.'
        )

    for i, item in enumerate(todos):
        if not isinstance(item, Mapping):
            item = {}
        if _is_blank(item.get("id")):
            return Violation(
                ViolationKind.DOMAIN,
                f'Todo item at index {i} must have a non-empty "id" string.',
            )
        if _is_blank(item.get("content")):
            return Violation(
                ViolationKind.DOMAIN,
                f'Todo item at index {i} must have a non-empty "content" string.',
            )
        if item.get("status") not in STATUS_VALUES:
            return Violation(
                ViolationKind.DOMAIN,
                f'Todo item at index {i} must have a valid "status" '
                "(pending, in_progress, or completed).",
            )

    in_progress = [t for t in todos if t["status"] == TodoStatus.IN_PROGRESS.value]
    if len(in_progress) > 1:
        return Violation(
            ViolationKind.DOMAIN, 'Only one task can be "in_progress" at a time.'
        )

    ids = [t["id"] for t in todos]
    if len(set(ids)) != len(ids):
        return Violation(ViolationKind.DOMAIN, "All todo IDs must be unique.")

    return None


def validate_params(params: Any, *, allow_empty: bool = False) -> list[TodoItem]:
    """Run both validation layers and return the accepted items.

    Raises:
        TodoValidationError: If either layer rejects ``params``.
    """
    violation = check_structure(params)
    if violation is None:
        violation = validate(params["todos"], allow_empty=allow_empty)
    if violation is not None:
        raise TodoValidationError(violation)

    return [TodoItem.model_validate(dict(item)) for item in params["todos"]]
