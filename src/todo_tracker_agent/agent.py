"""
Root agent definition — assembles the task tracking tools and callbacks.

adk web src --port 8080 2>&1 | tee logs/agent.log

"""

from __future__ import annotations

import logging

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm

from .prompt import ROOT_AGENT_PROMPT
from .config.settings import settings
from .tools import todo_read, todo_write
from .callbacks import log_todo_description, log_todo_display

logger = logging.getLogger(__name__)


def create_root_agent(extra_instructions: str = "") -> Agent:
    """Create the root agent with the todo tools and display callbacks."""
    tools: list = [
        # Task management
        todo_write,
        todo_read,
    ]

    instruction = ROOT_AGENT_PROMPT.format(extra_instructions=extra_instructions)

    return Agent(
        name="task_tracker",
        model=LiteLlm(model=settings.litellm_model),
        instruction=instruction,
        description="AI assistant that plans work and tracks it in a session task list",
        tools=tools,
        before_tool_callback=log_todo_description,
        after_tool_callback=log_todo_display,
    )


# ADK CLI entry point
root_agent = create_root_agent()
