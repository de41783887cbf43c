"""Character sequence — cursor-addressed doubly-linked list stored in an arena."""
from typing import List, Optional

NIL = -1  # empty marker: no node / cursor before the first char


class CharSequence:
    """Ordered characters with a cursor sitting between two of them.

    Nodes live in parallel tables (char, prev, next) addressed by slot
    index. The cursor is either NIL (before the first char) or the slot
    of the node immediately to its left. Freed slots are recycled.
    """

    def __init__(self):
        self._chars: List[Optional[str]] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head: int = NIL
        self._tail: int = NIL
        self._cursor: int = NIL
        self._length: int = 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.materialize()

    @property
    def is_empty(self) -> bool:
        return self._length == 0

    @property
    def cursor(self) -> int:
        """Slot left of the cursor, or NIL."""
        return self._cursor

    def char_at(self, node: int) -> Optional[str]:
        if 0 <= node < len(self._chars):
            return self._chars[node]
        return None

    def _alloc(self, ch: str) -> int:
        if self._free:
            node = self._free.pop()
            self._chars[node] = ch
            self._prev[node] = NIL
            self._next[node] = NIL
            return node
        self._chars.append(ch)
        self._prev.append(NIL)
        self._next.append(NIL)
        return len(self._chars) - 1

    def _release(self, node: int):
        self._chars[node] = None
        self._prev[node] = NIL
        self._next[node] = NIL
        self._free.append(node)

    def insert_at_cursor(self, ch: str) -> int:
        """Insert ch right after the cursor and move the cursor onto it."""
        node = self._alloc(ch)
        if self._head == NIL:
            self._head = self._tail = node
        elif self._cursor == NIL:
            self._next[node] = self._head
            self._prev[self._head] = node
            self._head = node
        else:
            after = self._next[self._cursor]
            self._next[self._cursor] = node
            self._prev[node] = self._cursor
            self._next[node] = after
            if after != NIL:
                self._prev[after] = node
            else:
                self._tail = node
        self._cursor = node
        self._length += 1
        return node

    def delete_before_cursor(self) -> Optional[str]:
        """Backspace. Returns the removed char, or None at the start."""
        if self._cursor == NIL:
            return None
        node = self._cursor
        ch = self._chars[node]
        before = self._prev[node]
        after = self._next[node]
        if before != NIL:
            self._next[before] = after
        else:
            self._head = after
        if after != NIL:
            self._prev[after] = before
        else:
            self._tail = before
        self._cursor = before
        self._length -= 1
        self._release(node)
        return ch

    def move_left(self) -> bool:
        if self._cursor == NIL:
            return False
        self._cursor = self._prev[self._cursor]
        return True

    def move_right(self) -> bool:
        if self._cursor == NIL:
            if self._head == NIL:
                return False
            self._cursor = self._head
            return True
        nxt = self._next[self._cursor]
        if nxt == NIL:
            return False
        self._cursor = nxt
        return True

    def _walk(self):
        node = self._head
        while node != NIL:
            yield node
            node = self._next[node]

    def materialize(self) -> str:
        return ''.join(self._chars[node] for node in self._walk())

    def cursor_offset(self) -> int:
        """Number of chars left of the cursor. Linear in the sequence length."""
        if self._cursor == NIL:
            return 0
        offset = 0
        for node in self._walk():
            offset += 1
            if node == self._cursor:
                break
        return offset

    def word_prefix_before_cursor(self) -> str:
        """Letters directly left of the cursor, lower-cased."""
        letters = []
        node = self._cursor
        while node != NIL and self._chars[node].isalpha():
            letters.append(self._chars[node])
            node = self._prev[node]
        return ''.join(reversed(letters)).lower()

    def check_invariants(self):
        """Raise AssertionError if links, length or cursor are inconsistent."""
        count = 0
        prev = NIL
        seen = set()
        for node in self._walk():
            assert node not in seen, f"cycle at slot {node}"
            assert self._prev[node] == prev, f"bad back link at slot {node}"
            seen.add(node)
            prev = node
            count += 1
        assert prev == self._tail, "tail does not match last node"
        assert count == self._length, f"length {self._length} != node count {count}"
        assert self._cursor == NIL or self._cursor in seen, "cursor references a freed slot"
        assert not seen.intersection(self._free), "live slot on the free-list"
