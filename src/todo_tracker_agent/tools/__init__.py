"""Tools module - Function tools for the agent."""

from .todo import todo_read, todo_write

__all__ = [
    "todo_read",
    "todo_write",
]
