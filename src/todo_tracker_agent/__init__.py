"""Task tracking agent: a session-scoped todo list tool for ADK agents."""
