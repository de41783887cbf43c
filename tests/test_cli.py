"""Tests for the line-oriented editor loop."""
import sys
import os
import io
import tempfile
from pathlib import Path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from typeahead.cli import EditorShell, run_cli
from typeahead.config import Config
from typeahead.dictionary import WordList
from typeahead.session import EditSession


def run(lines, session=None, word_list=None, config=None):
    session = session or EditSession()
    out = io.StringIO()
    run_cli(session, word_list, config, stdin=io.StringIO(lines), stdout=out)
    return session, out.getvalue()


def test_typing_and_commands():
    session, out = run("hello\nLEFT\nleft\nBACKSPACE\nundo\nREDO\nRIGHT\nQUIT\nignored\n")
    assert session.text == "helo"
    assert "Text: |" in out
    assert "Text: hello|" in out
    assert "Text: hel|lo" in out
    assert "Text: he|lo" in out
    assert "Text: hel|o" in out
    assert out.rstrip().endswith("bye")
    assert "ignored" not in session.text


def test_eof_ends_loop():
    session, out = run("ab")
    assert session.text == "ab"
    assert out.rstrip().endswith("bye")


def test_suggestions_default_and_explicit_k():
    session = EditSession()
    for w in ["help", "hell", "hello", "hero"]:
        session.add_dictionary_word(w)
    _, out = run("he\nSUG\nSUG 2\nsug x\n", session=session)
    assert "Suggestions for prefix: he" in out
    assert out.count("  hero") == 2
    assert out.count("  hell\n") == 3
    assert out.count("  hello") == 3


def test_sug_prefix_word_is_typed():
    session, _ = run("sugar\n")
    assert session.text == "sugar"


def test_add_word_without_word_list():
    session, out = run("ADD Cat\nADD c4t\nca\nSUG\n")
    assert "Added: cat" in out
    assert "Already exists or invalid: c4t" in out
    assert "  cat" in out


def test_add_duplicate_without_word_list():
    session, out = run("ADD cat\nADD CAT\nADD ca\nADD cats\n")
    assert "Added: cat" in out
    assert "Already exists or invalid: CAT" in out
    assert "Added: ca\n" in out
    assert "Added: cats" in out
    assert session.index.word_count == 3


def test_learns_words_on_space():
    with tempfile.TemporaryDirectory() as tmp:
        config = Config(Path(tmp) / "config.json")
        words = WordList(Path(tmp) / "dictionary.txt")
        session, out = run("wonderful wo\nSUG\n", word_list=words, config=config)
        assert "wonderful" in words
        assert "wo" not in words
        assert "  wonderful" in out


def test_learning_disabled():
    with tempfile.TemporaryDirectory() as tmp:
        config = Config(Path(tmp) / "config.json")
        config._data["auto_add_words"] = False
        words = WordList(Path(tmp) / "dictionary.txt")
        run("wonderful day\n", word_list=words, config=config)
        assert len(words) == 0


def test_add_word_with_word_list_dedups():
    with tempfile.TemporaryDirectory() as tmp:
        words = WordList(Path(tmp) / "dictionary.txt")
        _, out = run("ADD java\nADD JAVA\n", word_list=words)
        assert "Added: java" in out
        assert "Already exists or invalid: JAVA" in out
        assert words.words == ["java"]


def test_handle_returns_false_on_quit():
    shell = EditorShell(EditSession(), stdout=io.StringIO())
    assert shell.handle("quit") is False
    assert shell.handle("x") is True


if __name__ == '__main__':
    test_typing_and_commands()
    test_eof_ends_loop()
    test_suggestions_default_and_explicit_k()
    test_sug_prefix_word_is_typed()
    test_add_word_without_word_list()
    test_add_duplicate_without_word_list()
    test_learns_words_on_space()
    test_learning_disabled()
    test_add_word_with_word_list_dedups()
    test_handle_returns_false_on_quit()
    print("All CLI tests passed.")
