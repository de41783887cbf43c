"""Prefix index — 28-symbol trie for word suggestions."""
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Child slot order is also the suggestion order: a-z, then space, then apostrophe.
ALPHABET = "abcdefghijklmnopqrstuvwxyz '"
_SLOT = {ch: i for i, ch in enumerate(ALPHABET)}


def slot_of(ch: str) -> int:
    """Child slot for ch, or -1 if ch is outside the alphabet."""
    return _SLOT.get(ch, -1)


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: List[Optional["TrieNode"]] = [None] * len(ALPHABET)
        self.is_word = False


class PrefixIndex:
    """Append-only word index with bounded prefix lookup."""

    def __init__(self):
        self._root = TrieNode()
        self._word_count = 0

    def __len__(self) -> int:
        return self._word_count

    @property
    def word_count(self) -> int:
        return self._word_count

    @staticmethod
    def is_indexable(word: str) -> bool:
        """True if every char of the lower-cased word is in the alphabet."""
        return bool(word) and all(ch in _SLOT for ch in word.lower())

    def insert_word(self, word: str):
        """Add word. Chars outside the alphabet are skipped, not rejected."""
        if not word:
            return
        node = self._root
        depth = 0
        for ch in word.lower():
            slot = slot_of(ch)
            if slot < 0:
                continue
            child = node.children[slot]
            if child is None:
                child = node.children[slot] = TrieNode()
            node = child
            depth += 1
        if depth == 0:
            logger.debug("Ignoring word with no indexable chars: %r", word)
            return
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self._root
        for ch in prefix:
            slot = slot_of(ch)
            if slot < 0:
                return None
            node = node.children[slot]
            if node is None:
                return None
        return node

    def suggest(self, prefix: str, k: int) -> List[str]:
        """Up to k indexed words starting with prefix, in alphabet-slot order.

        Any char outside the alphabet in prefix yields no suggestions.
        """
        if k <= 0:
            return []
        prefix = prefix.lower()
        node = self._find(prefix)
        if node is None:
            return []
        out: List[str] = []
        path = list(prefix)
        self._collect(node, path, out, k)
        return out

    def _collect(self, node: TrieNode, path: List[str], out: List[str], k: int):
        if node.is_word:
            out.append(''.join(path))
            if len(out) >= k:
                return
        for slot, child in enumerate(node.children):
            if child is None:
                continue
            path.append(ALPHABET[slot])
            self._collect(child, path, out, k)
            path.pop()
            if len(out) >= k:
                return
