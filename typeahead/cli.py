"""Line-oriented editor loop — one command or one chunk of text per line."""
import logging
import sys

from typeahead.prefix_index import PrefixIndex
from typeahead.session import EditSession

logger = logging.getLogger(__name__)

BANNER = ("Simple text editor (type text to insert it). "
          "Commands: LEFT RIGHT BACKSPACE UNDO REDO SUG [k] ADD <word> QUIT")

WORD_BOUNDARIES = (' ', '\n')


class EditorShell:
    """Dispatches input lines to an EditSession and prints the resulting state."""

    def __init__(self, session: EditSession, word_list=None, config=None,
                 stdout=None):
        self.session = session
        self.word_list = word_list
        self.config = config
        self.out = stdout or sys.stdout

    @property
    def default_k(self) -> int:
        return self.config.suggestion_count if self.config else 5

    def _print(self, line: str = ""):
        self.out.write(line + "\n")

    def print_state(self):
        self._print("Text: " + self.session.render())

    def type_line(self, line: str):
        for ch in line:
            if ch in WORD_BOUNDARIES:
                self._learn_current_word()
            self.session.type_char(ch)

    def _learn_current_word(self):
        if self.word_list is None or self.config is None or not self.config.auto_add_words:
            return
        self.word_list.learn(self.session, self.session.current_prefix(),
                             self.config.auto_add_min_length)

    def _parse_k(self, parts) -> int:
        if len(parts) < 2:
            return self.default_k
        try:
            return int(parts[1])
        except ValueError:
            logger.debug("Bad suggestion count %r, using %d", parts[1], self.default_k)
            return self.default_k

    def show_suggestions(self, k: int):
        self._print("Suggestions for prefix: " + self.session.current_prefix())
        for word in self.session.suggestions(k):
            self._print("  " + word)

    def add_word(self, word: str):
        word = word.strip()
        if self.word_list is not None:
            added = self.word_list.add(word)
        else:
            added = (PrefixIndex.is_indexable(word)
                     and self.session.index.suggest(word, 1) != [word.lower()])
        if added:
            self.session.add_dictionary_word(word)
            self._print("Added: " + word.lower())
        else:
            self._print("Already exists or invalid: " + word)

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the loop should stop."""
        line = line.strip()
        command = line.upper()
        if command == "QUIT":
            return False
        if command == "LEFT":
            self.session.move_left()
        elif command == "RIGHT":
            self.session.move_right()
        elif command == "BACKSPACE":
            self.session.backspace()
        elif command == "UNDO":
            self.session.undo()
        elif command == "REDO":
            self.session.redo()
        elif command == "SUG" or command.startswith("SUG "):
            self.show_suggestions(self._parse_k(line.split()))
            return True
        elif command.startswith("ADD "):
            self.add_word(line[4:])
            return True
        else:
            self.type_line(line)
        self.print_state()
        return True

    def run(self, stdin=None):
        stdin = stdin or sys.stdin
        self._print(BANNER)
        self.print_state()
        while True:
            self.out.write("> ")
            self.out.flush()
            line = stdin.readline()
            if not line:
                break
            if not self.handle(line):
                break
        self._print("bye")


def run_cli(session: EditSession, word_list=None, config=None,
            stdin=None, stdout=None) -> int:
    EditorShell(session, word_list, config, stdout=stdout).run(stdin)
    return 0
