"""Tests for root agent assembly."""
from __future__ import annotations

from todo_tracker_agent.agent import create_root_agent, root_agent
from todo_tracker_agent.callbacks import log_todo_description, log_todo_display
from todo_tracker_agent.tools import todo_read, todo_write


def test_root_agent_registers_todo_tools() -> None:
    assert root_agent.name == "task_tracker"
    assert todo_write in root_agent.tools
    assert todo_read in root_agent.tools


def test_root_agent_callbacks() -> None:
    assert root_agent.before_tool_callback is log_todo_description
    assert root_agent.after_tool_callback is log_todo_display


def test_extra_instructions_appended() -> None:
    agent = create_root_agent(extra_instructions="Answer in French.")
    assert agent.instruction.rstrip().endswith("Answer in French.")
    assert "todo_write" in agent.instruction
