"""Tool callbacks that surface todo_write progress in the logs."""

import logging
from typing import Any

from google.adk.tools.base_tool import BaseTool
from google.adk.tools.tool_context import ToolContext

from ..config.settings import settings
from ..todos import TodoValidationError, render_description, validate_params
from ..tools.todo import TODO_DISPLAY_KEY

logger = logging.getLogger(__name__)

_TODO_TOOL = "todo_write"


def log_todo_description(
    tool: BaseTool,
    args: dict[str, Any],
    tool_context: ToolContext,
) -> dict | None:
    """Before-tool callback: log a one-line summary of the incoming list.

    Invalid submissions are skipped here; the tool itself reports them.

    Returns:
        None, so the tool always runs.
    """
    if getattr(tool, "name", None) != _TODO_TOOL:
        return None

    try:
        todos = validate_params(args, allow_empty=settings.todo_allow_empty)
    except TodoValidationError:
        return None

    logger.info(render_description(todos))
    return None


def log_todo_display(
    tool: BaseTool,
    args: dict[str, Any],
    tool_context: ToolContext,
    tool_response: dict,
) -> dict | None:
    """After-tool callback: log the rendered todo list.

    Returns:
        None to keep the original response.
    """
    if getattr(tool, "name", None) != _TODO_TOOL:
        return None

    display = tool_context.state.get(TODO_DISPLAY_KEY)
    if display:
        logger.info("\n%s", display)
    return None
