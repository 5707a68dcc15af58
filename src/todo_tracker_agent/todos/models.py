"""Todo list data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TodoStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in TodoStatus)


class TodoItem(BaseModel):
    """A single tracked task.

    Ids are assigned by the caller and only need to be unique within one list.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    content: str
    status: TodoStatus

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(mode="json")


@dataclass(frozen=True)
class TodoCounts:
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    pending: int = 0


@dataclass
class ToolResult:
    """Outcome of one todo_write call.

    ``llm_content`` goes back to the model; ``return_display`` is for humans.
    """

    llm_content: dict[str, Any] = field(default_factory=dict)
    return_display: str = ""

    @property
    def success(self) -> bool:
        return bool(self.llm_content.get("success"))
