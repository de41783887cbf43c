"""Undo/redo log — stacks of inverse operations."""
import logging
from collections import deque
from typing import Optional

from typeahead.operations import Operation, apply_operation, inverse_of
from typeahead.sequence import CharSequence

logger = logging.getLogger(__name__)


class OperationStack:
    """LIFO of operations. With max_size set, the oldest entries fall off."""

    def __init__(self, max_size: Optional[int] = None):
        self._stack: deque[Operation] = deque(maxlen=max_size)

    def push(self, op: Operation):
        self._stack.append(op)

    def pop(self) -> Optional[Operation]:
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self):
        self._stack.clear()

    @property
    def size(self) -> int:
        return len(self._stack)


class OperationLog:
    """Applies operations to a sequence and keeps their inverses for undo/redo."""

    def __init__(self, seq: CharSequence, max_size: Optional[int] = None):
        self._seq = seq
        self._undo = OperationStack(max_size)
        self._redo = OperationStack(max_size)

    @property
    def can_undo(self) -> bool:
        return self._undo.size > 0

    @property
    def can_redo(self) -> bool:
        return self._redo.size > 0

    @property
    def undo_depth(self) -> int:
        return self._undo.size

    @property
    def redo_depth(self) -> int:
        return self._redo.size

    def execute(self, op: Operation) -> Operation:
        """Apply op without touching either history."""
        return apply_operation(op, self._seq)

    def record(self, done: Operation):
        """Store the inverse of an already-applied primary action."""
        self._undo.push(inverse_of(done))
        self._redo.clear()

    def commit(self, op: Operation) -> Operation:
        done = self.execute(op)
        self.record(done)
        return done

    def undo(self) -> Optional[Operation]:
        op = self._undo.pop()
        if op is None:
            return None
        done = self.execute(op)
        self._redo.push(inverse_of(done))
        logger.debug("undo %s (undo=%d redo=%d)", done.kind.value, self._undo.size, self._redo.size)
        return done

    def redo(self) -> Optional[Operation]:
        op = self._redo.pop()
        if op is None:
            return None
        done = self.execute(op)
        self._undo.push(inverse_of(done))
        logger.debug("redo %s (undo=%d redo=%d)", done.kind.value, self._undo.size, self._redo.size)
        return done

    def clear(self):
        self._undo.clear()
        self._redo.clear()
