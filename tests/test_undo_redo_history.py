"""Tests for the bounded undo/redo stacks."""

import pytest
from conftest import shifted_square

from geodraw.config import MAX_HISTORY_SIZE
from geodraw.editor.history import BoundedStack, UndoRedoHistory


class TestBoundedStack:
    """LIFO semantics with oldest-first eviction."""

    def test_push_pop_order(self):
        stack = BoundedStack(max_size=3)
        for item in (1, 2, 3):
            stack.push(item)
        assert stack.pop() == 3
        assert stack.items == [1, 2]
        assert len(stack) == 2

    def test_eviction_drops_oldest(self):
        stack = BoundedStack(max_size=2)
        assert stack.push("a") is None
        assert stack.push("b") is None
        assert stack.push("c") == "a"
        assert stack.items == ["b", "c"]

    def test_empty_stack(self):
        stack = BoundedStack()
        assert not stack
        assert stack.pop() is None
        assert stack.max_size == MAX_HISTORY_SIZE

    def test_clear(self):
        stack = BoundedStack(items=[1, 2])
        stack.clear()
        assert len(stack) == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="at least 1"):
            BoundedStack(max_size=0)


class TestUndoRedoHistory:
    """Snapshot history driven by the draw session."""

    def test_initial_state(self):
        history = UndoRedoHistory()
        assert not history.can_undo
        assert not history.can_redo

    def test_undo_returns_previous_and_fills_redo(self):
        history = UndoRedoHistory()
        first, second = shifted_square(0), shifted_square(1)
        history.record_change(first)

        restored = history.undo(second)

        assert restored == first
        assert history.can_redo
        assert not history.can_undo

    def test_redo_returns_undone_feature(self):
        history = UndoRedoHistory()
        first, second = shifted_square(0), shifted_square(1)
        history.record_change(first)
        restored = history.undo(second)

        assert history.redo(restored) == second
        assert history.can_undo
        assert not history.can_redo

    def test_new_change_clears_redo(self):
        history = UndoRedoHistory()
        history.record_change(shifted_square(0))
        history.undo(shifted_square(1))
        assert history.can_redo

        history.record_change(shifted_square(2))
        assert not history.can_redo

    def test_empty_undo_and_redo_return_none(self, logs):
        history = UndoRedoHistory()
        assert history.undo(shifted_square(0)) is None
        assert history.redo(shifted_square(0)) is None
        assert "DEBUG:Nothing to undo" in logs
        assert "DEBUG:Nothing to redo" in logs

    def test_undo_without_current_feature(self):
        history = UndoRedoHistory()
        history.record_change(shifted_square(0))
        assert history.undo(None) is None
        assert history.can_undo

    def test_bounded_to_max_size(self):
        history = UndoRedoHistory(max_size=3)
        for offset in range(5):
            history.record_change(shifted_square(offset))
        assert len(history.undo_stack) == 3
        # oldest two were evicted
        assert history.undo_stack.items[0] == shifted_square(2)

    def test_snapshots_are_isolated(self):
        history = UndoRedoHistory()
        feature = shifted_square(0)
        history.record_change(feature)
        feature.geometry.coordinates[0][0][0] = 99.0

        restored = history.undo(shifted_square(1))
        assert restored.geometry.coordinates[0][0][0] == 0.0

    def test_clear(self):
        history = UndoRedoHistory()
        history.record_change(shifted_square(0))
        history.undo(shifted_square(1))
        history.clear()
        assert not history.can_undo
        assert not history.can_redo
