"""
Base entropy: treat the password as if every character were drawn uniformly
at random from the alphabet implied by its character classes.
"""

from __future__ import annotations

import math

from .charset import CharacterSetProfile, analyze


def base_entropy(profile: CharacterSetProfile, length: int) -> float:
    """
    Return log2(alphabet_size ** length) in bits.

    Computed as ``length * log2(size)`` so long passwords stay finite.
    An empty password, or an empty alphabet, has zero entropy.
    """
    size = profile.alphabet_size
    if length <= 0 or size <= 0:
        return 0.0

    return length * math.log2(size)


def password_entropy(password: str) -> float:
    """Base entropy of ``password`` before any penalties are applied."""
    return base_entropy(analyze(password), len(password))
