"""Callbacks module."""

from .todo_display import log_todo_description, log_todo_display

__all__ = [
    "log_todo_description",
    "log_todo_display",
]
