"""Configuration management — JSON-based, stored in ~/.config/typeahead/."""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "typeahead"
CONFIG_FILE = CONFIG_DIR / "config.json"
DICTIONARY_FILE = CONFIG_DIR / "dictionary.txt"

DEFAULT_CONFIG = {
    "dictionary_file": str(DICTIONARY_FILE),
    "suggestion_count": 5,
    "auto_add_words": True,
    "auto_add_min_length": 2,
    "seed_language": "",  # e.g. "en"; empty disables seeding
    "seed_word_count": 2000,
    "history_limit": 0,  # 0 = unbounded
    "debug_logging": False,
}


class Config:
    def __init__(self, path: Path = CONFIG_FILE):
        self._path = Path(path)
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self):
        if self._path.exists():
            try:
                with open(self._path, "r") as f:
                    stored = json.load(f)
                self._data.update(stored)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._path, e)

    def save(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def dictionary_file(self) -> Path:
        return Path(self._data["dictionary_file"]).expanduser()

    @property
    def suggestion_count(self) -> int:
        return int(self._data["suggestion_count"])

    @property
    def auto_add_words(self) -> bool:
        return bool(self._data["auto_add_words"])

    @property
    def auto_add_min_length(self) -> int:
        return int(self._data["auto_add_min_length"])

    @property
    def seed_language(self) -> str:
        return self._data.get("seed_language") or ""

    @property
    def seed_word_count(self) -> int:
        return int(self._data["seed_word_count"])

    @property
    def history_limit(self):
        """Max undo depth, or None for unbounded."""
        limit = int(self._data.get("history_limit") or 0)
        return limit if limit > 0 else None

    @property
    def debug_logging(self) -> bool:
        return bool(self._data["debug_logging"])
