"""Todo list tool — session state-backed task tracking."""

from __future__ import annotations

import logging
from typing import Any

from google.adk.tools.tool_context import ToolContext

from ..config.settings import settings
from ..todos import (
    TodoStore,
    get_target,
    render_summary,
    run_todo_write,
    summary_counts,
)

logger = logging.getLogger(__name__)

TODO_DISPLAY_KEY = "_todo_display"


TODO_WRITE_DESCRIPTION = """\
Use this tool to create and manage a structured task list for your current session. This helps you track progress, organize complex tasks, and demonstrate thoroughness to the user.
It also helps the user understand the progress of the task and overall progress of their requests.

## When to Use This Tool
Use this tool proactively in these scenarios:

1. Complex multi-step tasks - When a task requires 3 or more distinct steps or actions
2. Non-trivial and complex tasks - Tasks that require careful planning or multiple operations
3. User explicitly requests todo list - When the user directly asks you to use the todo list
4. User provides multiple tasks - When users provide a list of things to be done (numbered or comma-separated)
5. After receiving new instructions - Immediately capture user requirements as todos
6. When you start working on a task - Mark it as in_progress BEFORE beginning work. Only one todo may be in_progress at a time
7. After completing a task - Mark it as completed and add any new follow-up tasks discovered during implementation

## When NOT to Use This Tool

Skip using this tool when:
1. There is only a single, straightforward task
2. The task is trivial and tracking it provides no organizational benefit
3. The task can be completed in less than 3 trivial steps
4. The task is purely conversational or informational

## Examples of When to Use the Todo List

<example>
User: I want to add a dark mode toggle to the application settings. Make sure you run the tests and build when you're done!
Assistant: I'll help add a dark mode toggle to your application settings. Let me create a todo list to track this implementation.
*Creates todo list with the following items:*
1. Create dark mode toggle component in Settings page
2. Add dark mode state management (context/store)
3. Implement styles for the dark theme
4. Update existing components to support theme switching
5. Run tests and build process, addressing any failures or errors that occur
*Begins working on the first task*

<reasoning>
The assistant used the todo list because:
1. Adding dark mode is a multi-step feature requiring UI, state management, and styling changes
2. The user explicitly requested tests and build be run afterward
3. Making "tests and build succeed" the final task keeps that requirement visible
</reasoning>
</example>

<example>
User: Help me rename the function get_cwd to get_current_working_directory across my project
Assistant: Let me first search through your codebase to find all occurrences of 'get_cwd'.
*Searches the codebase and finds 15 instances across 8 different files*
Assistant: I've found 15 instances of 'get_cwd' across 8 different files. Let me create a todo list to track these changes.
*Creates todo list with specific items for each file that needs updating*

<reasoning>
The assistant used the todo list because:
1. It first searched to understand the scope of the task
2. Multiple occurrences across different files make this a multi-step task
3. The todo list ensures every instance is tracked and updated systematically
</reasoning>
</example>

## Examples of When NOT to Use the Todo List

<example>
User: How do I print 'Hello World' in Python?
Assistant: Use print("Hello World").

<reasoning>
A single, trivial task that is completed in one step. There is nothing to track.
</reasoning>
</example>

<example>
User: What does the git status command do?
Assistant: It shows the state of your working directory and staging area.

<reasoning>
An informational request with no actual task to perform.
</reasoning>
</example>

## Task States and Management

1. **Task States**: Use these states to track progress:
   - pending: Task not yet started
   - in_progress: Currently working on (limit to ONE task at a time)
   - completed: Task finished successfully

2. **Task Management**:
   - Update task status in real-time as you work
   - Mark tasks complete IMMEDIATELY after finishing (don't batch completions)
   - Only have ONE task in_progress at any time
   - Complete current tasks before starting new ones
   - Remove tasks that are no longer relevant from the list entirely

3. **Task Completion Requirements**:
   - ONLY mark a task as completed when you have FULLY accomplished it
   - If you encounter errors, blockers, or cannot finish, keep the task as in_progress
   - When blocked, create a new task describing what needs to be resolved
   - Never mark a task as completed if:
     - Tests are failing
     - Implementation is partial
     - You encountered unresolved errors
     - You couldn't find necessary files or dependencies

4. **Task Breakdown**:
   - Create specific, actionable items
   - Break complex tasks into smaller, manageable steps
   - Use clear, descriptive task names

## Parameters

- `todos` (array, required): The COMPLETE updated list; it replaces the previous one. Each item has:
  - `id` (string): Unique identifier for the task
  - `content` (string): Description of the task
  - `status` (enum): One of "pending", "in_progress", or "completed"

When in doubt, use this tool. Being proactive with task management demonstrates attentiveness and ensures you complete all requirements successfully."""


async def todo_write(
    todos: list[dict[str, str]],
    tool_context: ToolContext,
) -> dict[str, Any]:
    # Docstring is TODO_WRITE_DESCRIPTION, assigned below; ADK sends it as
    # the tool description.
    store = TodoStore(tool_context.state)
    result = run_todo_write(
        {"todos": todos},
        store,
        allow_empty=settings.todo_allow_empty,
        target=get_target(settings.todo_display_style),
    )

    tool_context.state[TODO_DISPLAY_KEY] = result.return_display
    if result.success:
        logger.info("Todo list updated: %s", result.llm_content["summary"])
    return result.llm_content


todo_write.__doc__ = TODO_WRITE_DESCRIPTION


def todo_read(tool_context: ToolContext) -> dict[str, Any]:
    """Read the current task list of this session.

    Returns:
        Dict with todos, the id of the task that was just completed (if any)
        and a summary line, or an error if the stored list is unreadable
    """
    store = TodoStore(tool_context.state)
    try:
        todos = store.snapshot()
    except (TypeError, ValueError) as e:
        logger.error("Stored todo list is unreadable: %s", e)
        return {"success": False, "error": f"Failed to read todos: {e}"}

    return {
        "success": True,
        "todos": [todo.to_dict() for todo in todos],
        "recently_completed_id": store.recently_completed_id,
        "summary": render_summary(summary_counts(todos)),
    }
