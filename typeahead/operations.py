"""Reversible edit operations and their apply/inverse dispatch."""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from typeahead.sequence import CharSequence


class OpKind(Enum):
    INSERT = "insert"
    DELETE = "delete"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    NOOP = "noop"


@dataclass(frozen=True)
class Operation:
    """One edit. Outcome fields are filled in by apply_operation.

    char:  INSERT — char to insert; DELETE — char removed (None if nothing was)
    moved: MOVE_LEFT / MOVE_RIGHT — whether the cursor actually moved
    """
    kind: OpKind
    char: Optional[str] = None
    moved: bool = False


def insert(ch: str) -> Operation:
    return Operation(OpKind.INSERT, char=ch)


def delete() -> Operation:
    return Operation(OpKind.DELETE)


def move_left() -> Operation:
    return Operation(OpKind.MOVE_LEFT)


def move_right() -> Operation:
    return Operation(OpKind.MOVE_RIGHT)


NOOP = Operation(OpKind.NOOP)


def apply_operation(op: Operation, seq: CharSequence) -> Operation:
    """Run op against seq and return it with its outcome recorded."""
    if op.kind is OpKind.INSERT:
        seq.insert_at_cursor(op.char)
        return op
    if op.kind is OpKind.DELETE:
        return replace(op, char=seq.delete_before_cursor())
    if op.kind is OpKind.MOVE_LEFT:
        return replace(op, moved=seq.move_left())
    if op.kind is OpKind.MOVE_RIGHT:
        return replace(op, moved=seq.move_right())
    return op


def inverse_of(op: Operation) -> Operation:
    """Operation that undoes an already-applied op."""
    if op.kind is OpKind.INSERT:
        return delete()
    if op.kind is OpKind.DELETE:
        return insert(op.char) if op.char is not None else NOOP
    if op.kind is OpKind.MOVE_LEFT:
        return move_right() if op.moved else NOOP
    if op.kind is OpKind.MOVE_RIGHT:
        return move_left() if op.moved else NOOP
    return NOOP
