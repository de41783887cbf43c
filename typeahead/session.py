"""Edit session — ties together sequence, prefix index and undo log."""
from typing import List, Optional

from typeahead import operations
from typeahead.prefix_index import PrefixIndex
from typeahead.sequence import CharSequence
from typeahead.undo import OperationLog


class EditSession:
    """Public editing API. Each session owns its own buffer, index and history.

    Moves are always recorded in the history, including moves that hit a
    boundary (they undo as a no-op), so one move call is one undo step.
    Backspace at the start of the text records nothing.
    """

    def __init__(self, history_limit: Optional[int] = None):
        self._seq = CharSequence()
        self._index = PrefixIndex()
        self._log = OperationLog(self._seq, max_size=history_limit)

    @property
    def sequence(self) -> CharSequence:
        return self._seq

    @property
    def index(self) -> PrefixIndex:
        return self._index

    @property
    def history(self) -> OperationLog:
        return self._log

    @property
    def text(self) -> str:
        return self._seq.materialize()

    @property
    def cursor_offset(self) -> int:
        return self._seq.cursor_offset()

    def type_char(self, ch: str):
        """Insert one char. '' is ignored; longer strings are typed char by char."""
        if not ch:
            return
        if len(ch) > 1:
            self.type_text(ch)
            return
        self._log.commit(operations.insert(ch))

    def type_text(self, text: str):
        for ch in text:
            self._log.commit(operations.insert(ch))

    def backspace(self) -> Optional[str]:
        """Delete the char left of the cursor. Returns it, or None if nothing was removed."""
        done = self._log.execute(operations.delete())
        if done.char is not None:
            self._log.record(done)
        return done.char

    def move_left(self) -> bool:
        return self._log.commit(operations.move_left()).moved

    def move_right(self) -> bool:
        return self._log.commit(operations.move_right()).moved

    def undo(self) -> bool:
        return self._log.undo() is not None

    def redo(self) -> bool:
        return self._log.redo() is not None

    def add_dictionary_word(self, word: str):
        self._index.insert_word(word)

    def current_prefix(self) -> str:
        return self._seq.word_prefix_before_cursor()

    def suggestions(self, k: int) -> List[str]:
        prefix = self.current_prefix()
        if not prefix:
            return []
        return self._index.suggest(prefix, k)

    def render(self, marker: str = "|") -> str:
        """Text with marker inserted at the cursor."""
        text = self.text
        offset = min(self.cursor_offset, len(text))
        return text[:offset] + marker + text[offset:]
