"""
Character-set analysis: decide which symbol classes a password draws from.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Most common special characters in the RockYou corpus.
COMMON_SPECIALS = "._!- @*#/&"

# Alphabet contribution of each class, in profile field order.
CLASS_SIZES = {
    "lowercase": 26,
    "uppercase": 26,
    "digit": 10,
    "common_special": 10,
    "other_special": 23,
}

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_COMMON_RE = re.compile("[" + re.escape(COMMON_SPECIALS) + "]")
_OTHER_RE = re.compile("[^a-zA-Z0-9" + re.escape(COMMON_SPECIALS) + "]")


@dataclass(frozen=True)
class CharacterSetProfile:
    """
    Which character classes appear at least once in a password.

    Classes are tested independently, so any combination of flags is possible.
    """

    lowercase: bool = False
    uppercase: bool = False
    digit: bool = False
    common_special: bool = False
    other_special: bool = False

    @property
    def alphabet_size(self) -> int:
        return sum(
            size for name, size in CLASS_SIZES.items() if getattr(self, name)
        )

    def classes(self) -> list[str]:
        """Names of the classes that are present, in a stable order."""
        return [name for name in CLASS_SIZES if getattr(self, name)]


def analyze(password: str) -> CharacterSetProfile:
    return CharacterSetProfile(
        lowercase=_LOWER_RE.search(password) is not None,
        uppercase=_UPPER_RE.search(password) is not None,
        digit=_DIGIT_RE.search(password) is not None,
        common_special=_COMMON_RE.search(password) is not None,
        other_special=_OTHER_RE.search(password) is not None,
    )


def alphabet_size(password: str) -> int:
    """Shortcut for ``analyze(password).alphabet_size``."""
    return analyze(password).alphabet_size
