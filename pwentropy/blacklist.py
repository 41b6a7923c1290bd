"""
Blacklist of known weak passwords.

A blacklisted password is assumed to fall within the first |blacklist|
guesses of an attacker who tries the list first, so its entropy is capped at
log2(|blacklist|).
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_BLACKLIST_PATH = DATA_DIR / "blacklist.txt"


def _read_words(path: Path) -> list[str]:
    """
    Read a newline-separated word list. Blank lines and lines starting
    with '#' are skipped; surrounding whitespace on each line is kept
    except for the line terminator, since spaces are valid password chars.
    """
    words: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        words.append(line)
    return words


class BlacklistIndex:
    """
    Immutable, case-insensitive set of blacklisted passwords.
    """

    __slots__ = ("_entries",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        entries = set()
        for word in words:
            if not isinstance(word, str):
                raise TypeError(
                    f"Blacklist entries must be strings, got {type(word).__name__}."
                )
            entries.add(word.lower())
        self._entries: frozenset[str] = frozenset(entries)

    # --- constructors ---

    @classmethod
    def from_file(cls, path: str | Path) -> "BlacklistIndex":
        """
        Build an index from a word list on disk. OSError propagates to the
        caller when the file cannot be read.
        """
        path = Path(path)
        words = _read_words(path)
        logger.debug("Loaded %d blacklist words from %s", len(words), path)
        return cls(words)

    def union(self, words: Iterable[str]) -> "BlacklistIndex":
        """Return a new index holding these entries plus ``words``."""
        return BlacklistIndex([*self._entries, *words])

    # --- queries ---

    def contains(self, password: str) -> bool:
        if not self._entries:
            return False
        return password.lower() in self._entries

    def information_content(self) -> float:
        """
        log2 of the number of distinct entries. An empty blacklist carries
        no information and reports 0.0.
        """
        if not self._entries:
            return 0.0
        return math.log2(len(self._entries))

    def __contains__(self, password: object) -> bool:
        return isinstance(password, str) and self.contains(password)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(sorted(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlacklistIndex):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"BlacklistIndex({len(self._entries)} entries)"


def load_default_words() -> list[str]:
    """The bundled word list, in file order."""
    return _read_words(DEFAULT_BLACKLIST_PATH)


DEFAULT_BLACKLIST = BlacklistIndex(load_default_words())
