"""Tests for the word list file and its hand-off to the session."""
import sys
import os
import tempfile
from pathlib import Path
from unittest.mock import patch, MagicMock
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from typeahead.dictionary import WordList, SAMPLE_WORDS
from typeahead.session import EditSession


def test_missing_file_is_empty():
    with tempfile.TemporaryDirectory() as tmp:
        words = WordList(Path(tmp) / "nope" / "dictionary.txt")
        assert len(words) == 0
        assert words.words == []


def test_load_normalizes_and_dedups():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "dictionary.txt"
        path.write_text("Hello\nhello\n\n  world  \nJava\n", encoding="utf-8")
        words = WordList(path)
        assert words.words == ["hello", "world", "java"]
        assert "HELLO" in words
        assert words.contains(" java ")
        assert "jar" not in words


def test_add_persists():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "sub" / "dictionary.txt"
        words = WordList(path)
        assert words.add("Apple") is True
        assert words.add("apple") is False
        assert words.add("   ") is False
        assert path.read_text(encoding="utf-8") == "apple\n"
        assert WordList(path).words == ["apple"]


def test_add_rejects_unindexable():
    with tempfile.TemporaryDirectory() as tmp:
        words = WordList(Path(tmp) / "dictionary.txt")
        assert words.add("c4t") is False
        assert words.add("don't") is True
        assert words.words == ["don't"]


def test_populate_session():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "dictionary.txt"
        path.write_text("car\ncat\ndog\n", encoding="utf-8")
        session = EditSession()
        assert WordList(path).populate(session) == 3
        session.type_text("ca")
        assert session.suggestions(5) == ["car", "cat"]


def test_learn_rules():
    with tempfile.TemporaryDirectory() as tmp:
        words = WordList(Path(tmp) / "dictionary.txt")
        session = EditSession()
        assert words.learn(session, "Tree") is True
        assert words.learn(session, "tree") is False
        assert words.learn(session, "a") is False
        assert words.learn(session, "") is False
        assert words.learn(session, "naïve") is False
        assert words.learn(session, "abc", min_length=4) is False
        assert words.words == ["tree"]
        session.type_text("tr")
        assert session.suggestions(5) == ["tree"]


def test_seed_samples():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "dictionary.txt"
        path.write_text("hello\n", encoding="utf-8")
        words = WordList(path)
        assert words.seed_samples() == len(SAMPLE_WORDS) - 1
        assert words.seed_samples() == 0
        assert WordList(path).words[0] == "hello"
        assert len(WordList(path)) == len(SAMPLE_WORDS)


def test_seed_from_spellchecker():
    spell = MagicMock()
    spell.word_frequency.most_common.return_value = [
        ("the", 100), ("Of", 90), ("e-mail", 50), ("the", 10), ("o'clock", 5),
    ]
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "dictionary.txt"
        words = WordList(path)
        with patch("spellchecker.SpellChecker", return_value=spell) as factory:
            added = words.seed_from_spellchecker("en", 5)
        factory.assert_called_once_with(language="en")
        spell.word_frequency.most_common.assert_called_once_with(5)
        assert added == 3
        assert words.words == ["the", "of", "o'clock"]
        assert WordList(path).words == ["the", "of", "o'clock"]


def test_unreadable_file_is_empty():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "dictionary.txt"
        path.mkdir()
        words = WordList(path)
        assert len(words) == 0


if __name__ == '__main__':
    test_missing_file_is_empty()
    test_load_normalizes_and_dedups()
    test_add_persists()
    test_add_rejects_unindexable()
    test_populate_session()
    test_learn_rules()
    test_seed_samples()
    test_seed_from_spellchecker()
    test_unreadable_file_is_empty()
    print("All dictionary tests passed.")
