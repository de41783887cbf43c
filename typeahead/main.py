"""Entry point for Typeahead.

Usage:
    python -m typeahead.main                        # editor window (default)
    python -m typeahead.main --cli                  # line-oriented editor on stdin/stdout
    python -m typeahead.main --dictionary words.txt # use another word list
"""
import sys
import signal
import logging
import argparse


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_session(config, dictionary_path=None):
    """Create a session and its word list, seeding the list if it is empty."""
    from typeahead.dictionary import WordList
    from typeahead.session import EditSession

    logger = logging.getLogger(__name__)

    word_list = WordList(dictionary_path or config.dictionary_file)
    if not len(word_list) and config.seed_language:
        try:
            word_list.seed_from_spellchecker(config.seed_language, config.seed_word_count)
        except Exception as e:
            logger.warning("Dictionary seeding failed (non-fatal): %s", e)
    if not len(word_list):
        word_list.seed_samples()

    session = EditSession(history_limit=config.history_limit)
    count = word_list.populate(session)
    logger.info("Loaded %d dictionary words from %s", count, word_list.path)
    return session, word_list


def run_gui(config, dictionary_path=None):
    """Run the Qt editor window."""
    from PyQt5.QtWidgets import QApplication
    from typeahead.editor_ui import EditorWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Typeahead")

    session, word_list = build_session(config, dictionary_path)
    window = EditorWindow(session, config, word_list)
    window.show()

    exit_code = app.exec_()
    sys.exit(exit_code)


def run_cli(config, dictionary_path=None):
    """Run the line-oriented editor on stdin/stdout."""
    from typeahead import cli

    session, word_list = build_session(config, dictionary_path)
    sys.exit(cli.run_cli(session, word_list, config))


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    parser = argparse.ArgumentParser(description="Typeahead text editor")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--cli", action="store_true",
                       help="Run the line-oriented editor (no GUI)")
    group.add_argument("--gui", action="store_true",
                       help="Run the editor window (default)")
    parser.add_argument("--dictionary", metavar="PATH",
                        help="Word list file (overrides config)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    from typeahead.config import Config
    config = Config()
    setup_logging(args.debug or config.debug_logging)

    if args.cli:
        run_cli(config, args.dictionary)
    else:
        run_gui(config, args.dictionary)


if __name__ == "__main__":
    main()
