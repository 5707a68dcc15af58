"""Tests for todo_tracker_agent.todos.store."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from todo_tracker_agent.todos import (
    TodoItem,
    TodoStatus,
    TodoStore,
    compute_recency_marker,
)
from todo_tracker_agent.todos.store import RECENTLY_COMPLETED_KEY, TODO_LIST_KEY


def _todo(id: str, status: str = "pending") -> TodoItem:
    return TodoItem(id=id, content=f"Task {id}", status=TodoStatus(status))


class TestComputeRecencyMarker:
    def test_in_progress_to_completed(self) -> None:
        prior = [_todo("a", "in_progress"), _todo("b")]
        candidate = [_todo("a", "completed"), _todo("b", "in_progress")]
        assert compute_recency_marker(prior, candidate) == "a"

    def test_no_prior_in_progress(self) -> None:
        prior = [_todo("a", "pending")]
        candidate = [_todo("a", "completed")]
        assert compute_recency_marker(prior, candidate) is None

    def test_empty_prior(self) -> None:
        assert compute_recency_marker([], [_todo("a", "completed")]) is None

    def test_prior_in_progress_still_in_progress(self) -> None:
        prior = [_todo("a", "in_progress")]
        assert compute_recency_marker(prior, [_todo("a", "in_progress")]) is None

    def test_prior_in_progress_removed(self) -> None:
        prior = [_todo("a", "in_progress")]
        assert compute_recency_marker(prior, [_todo("b", "completed")]) is None

    def test_completed_to_completed_is_not_recent(self) -> None:
        prior = [_todo("a", "completed"), _todo("b", "in_progress")]
        candidate = [_todo("a", "completed"), _todo("b", "pending")]
        assert compute_recency_marker(prior, candidate) is None


class TestTodoStore:
    def test_starts_empty(self, store: TodoStore) -> None:
        assert store.snapshot() == ()
        assert store.recently_completed_id is None

    def test_replace_stores_list_in_order(self, store: TodoStore) -> None:
        store.replace([_todo("t2"), _todo("t1", "in_progress")])
        assert [t.id for t in store.snapshot()] == ["t2", "t1"]

    def test_replace_returns_snapshot(self, store: TodoStore) -> None:
        store.replace([_todo("a", "in_progress")])
        result = store.replace([_todo("a", "completed")])
        assert result.recently_completed_id == "a"
        assert result.todos[0].status is TodoStatus.COMPLETED

    def test_recency_set_then_cleared(self, store: TodoStore) -> None:
        store.replace([_todo("a", "in_progress")])
        store.replace([_todo("a", "completed")])
        assert store.recently_completed_id == "a"

        store.replace([_todo("a", "pending")])
        assert store.recently_completed_id is None

    def test_same_list_twice_clears_marker(self, store: TodoStore) -> None:
        store.replace([_todo("a", "in_progress"), _todo("b")])
        candidate = [_todo("a", "completed"), _todo("b")]
        store.replace(candidate)
        assert store.recently_completed_id == "a"

        store.replace(candidate)
        assert store.recently_completed_id is None

    def test_state_holds_plain_dicts(self, store: TodoStore, state: dict) -> None:
        store.replace([_todo("a", "in_progress")])
        assert state[TODO_LIST_KEY] == [
            {"id": "a", "content": "Task a", "status": "in_progress"}
        ]
        assert state[RECENTLY_COMPLETED_KEY] is None

    def test_external_mutation_does_not_leak(self, store: TodoStore) -> None:
        candidate = [_todo("a"), _todo("b")]
        store.replace(candidate)
        candidate.append(_todo("c"))
        assert len(store.snapshot()) == 2

    def test_snapshot_is_immutable(self, store: TodoStore, state: dict) -> None:
        store.replace([_todo("a")])
        snap = store.snapshot()
        assert isinstance(snap, tuple)
        with pytest.raises(ValidationError):
            snap[0].status = TodoStatus.COMPLETED  # type: ignore[misc]
        assert state[TODO_LIST_KEY][0]["status"] == "pending"

    def test_clear(self, store: TodoStore) -> None:
        store.replace([_todo("a", "in_progress")])
        store.replace([_todo("a", "completed")])
        store.clear()
        assert store.snapshot() == ()
        assert store.recently_completed_id is None

    def test_sessions_are_independent(self) -> None:
        first, second = TodoStore({}), TodoStore({})
        first.replace([_todo("a", "in_progress")])
        second.replace([_todo("a", "completed")])
        assert second.recently_completed_id is None
        assert [t.status for t in first.snapshot()] == [TodoStatus.IN_PROGRESS]

    def test_failed_copy_leaves_state_unchanged(
        self, store: TodoStore, state: dict
    ) -> None:
        class Uncopyable(TodoItem):
            def to_dict(self) -> dict[str, str]:
                raise RuntimeError("cannot copy")

        store.replace([_todo("a", "completed"), _todo("b", "in_progress")])
        before = dict(state)

        with pytest.raises(RuntimeError, match="cannot copy"):
            store.replace(
                [
                    _todo("a", "completed"),
                    Uncopyable(id="b", content="Task b", status=TodoStatus.COMPLETED),
                ]
            )

        assert state == before
        assert store.recently_completed_id is None
