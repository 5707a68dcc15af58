"""Shared test fixtures for todo-tracker-agent."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from todo_tracker_agent.todos import TodoStore


@pytest.fixture()
def state() -> dict:
    """A bare session state mapping, as a host session would own it."""
    return {}


@pytest.fixture()
def store(state: dict) -> TodoStore:
    return TodoStore(state)


@pytest.fixture()
def tool_context() -> SimpleNamespace:
    """Stand-in for ADK's ToolContext; the tools only touch ``state``."""
    return SimpleNamespace(state={})
