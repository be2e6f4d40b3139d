"""Bounded undo/redo history of feature snapshots.

Each history entry is a full snapshot of the feature as it was before a
change, not a diff, so undo simply swaps the current feature for the stored
one. Both stacks are bounded; pushing past the limit evicts the oldest entry.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from loguru import logger

from geodraw.config import MAX_HISTORY_SIZE
from geodraw.geometry.features import DrawFeature

T = TypeVar("T")


@dataclass
class BoundedStack(Generic[T]):
    """LIFO stack that drops its oldest item when it grows past ``max_size``."""

    max_size: int = MAX_HISTORY_SIZE
    items: list[T] = field(default_factory=list)

    def __post_init__(self):
        if self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")

    def push(self, item: T) -> T | None:
        """Push an item.

        Returns:
            The evicted oldest item when the bound was exceeded, else None.
        """
        self.items.append(item)
        if len(self.items) > self.max_size:
            return self.items.pop(0)
        return None

    def pop(self) -> T | None:
        """Remove and return the newest item, or None when empty."""
        if not self.items:
            return None
        return self.items.pop()

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


class UndoRedoHistory:
    """Two bounded stacks of :class:`DrawFeature` snapshots.

    Invariant: every stored entry is a private snapshot, so mutating a
    feature after it was recorded never changes history.
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        self.max_size = max_size
        self.undo_stack: BoundedStack[DrawFeature] = BoundedStack(max_size)
        self.redo_stack: BoundedStack[DrawFeature] = BoundedStack(max_size)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def record_change(self, previous: DrawFeature) -> None:
        """Record the feature as it was before a change; starts a new redo branch."""
        evicted = self.undo_stack.push(previous.snapshot())
        if evicted is not None:
            logger.debug(f"History full ({self.max_size}), evicted oldest snapshot")
        self.redo_stack.clear()

    def undo(self, current: DrawFeature | None) -> DrawFeature | None:
        """Step back one change.

        Args:
            current: The feature currently shown; moved onto the redo stack.

        Returns:
            The restored snapshot, or None when there is nothing to undo.
        """
        if not self.undo_stack or current is None:
            logger.debug("Nothing to undo")
            return None
        restored = self.undo_stack.pop()
        self.redo_stack.push(current.snapshot())
        return restored

    def redo(self, current: DrawFeature | None) -> DrawFeature | None:
        """Re-apply the most recently undone change.

        Returns:
            The restored snapshot, or None when there is nothing to redo.
        """
        if not self.redo_stack or current is None:
            logger.debug("Nothing to redo")
            return None
        restored = self.redo_stack.pop()
        self.undo_stack.push(current.snapshot())
        return restored

    def clear(self) -> None:
        """Drop both stacks."""
        self.undo_stack.clear()
        self.redo_stack.clear()
