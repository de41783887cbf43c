"""Word list — newline-delimited dictionary file feeding the prefix index."""
import logging
import re
from pathlib import Path
from typing import List

from typeahead.prefix_index import PrefixIndex

logger = logging.getLogger(__name__)

_LEARNABLE = re.compile(r"[a-zA-Z]+")

# Starter words used when no word list exists and no language seeding is configured.
SAMPLE_WORDS = (
    "hello", "help", "hell", "helium", "hero", "heron", "heap", "happy", "hack",
    "java", "javascript", "jar", "join", "jog", "world", "word", "work", "wonder",
)


class WordList:
    """Persistent, deduplicated, lower-cased word list."""

    def __init__(self, path):
        self._path = Path(path)
        self._words: List[str] = []
        self._known: set[str] = set()
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def load(self) -> List[str]:
        self._words = []
        self._known = set()
        if not self._path.exists():
            return self.words
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                for line in f:
                    self._remember(line)
        except OSError as e:
            logger.warning("Could not read word list %s: %s", self._path, e)
        logger.debug("Loaded %d words from %s", len(self._words), self._path)
        return self.words

    def save(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            for word in self._words:
                f.write(word + "\n")

    def _remember(self, word: str) -> bool:
        word = word.strip().lower()
        if not word or word in self._known:
            return False
        self._words.append(word)
        self._known.add(word)
        return True

    def contains(self, word: str) -> bool:
        return word.strip().lower() in self._known

    def add(self, word: str) -> bool:
        """Add and persist word. Returns False for blank, duplicate or non-indexable words."""
        word = word.strip().lower()
        if not word or word in self._known:
            return False
        if not PrefixIndex.is_indexable(word):
            logger.warning("Rejecting word with unsupported characters: %r", word)
            return False
        self._remember(word)
        self.save()
        return True

    def populate(self, session) -> int:
        for word in self._words:
            session.add_dictionary_word(word)
        return len(self._words)

    def learn(self, session, word: str, min_length: int = 2) -> bool:
        """Auto-add a just-typed word (ASCII letters only, at least min_length long)."""
        word = word.lower()
        if len(word) < min_length or not _LEARNABLE.fullmatch(word):
            return False
        if not self.add(word):
            return False
        session.add_dictionary_word(word)
        logger.info("Learned word: %s", word)
        return True

    def seed_samples(self) -> int:
        """Fill the list with the built-in sample words."""
        added = sum(1 for word in SAMPLE_WORDS if self._remember(word))
        if added:
            self.save()
        logger.info("Seeded %d sample words into %s", added, self._path)
        return added

    def seed_from_spellchecker(self, language: str = "en", count: int = 2000) -> int:
        """Fill the list with the most frequent words of a pyspellchecker language."""
        from spellchecker import SpellChecker

        spell = SpellChecker(language=language)
        added = 0
        for word, _freq in spell.word_frequency.most_common(count):
            word = word.lower()
            if PrefixIndex.is_indexable(word) and self._remember(word):
                added += 1
        if added:
            self.save()
        logger.info("Seeded %d '%s' words into %s", added, language, self._path)
        return added
