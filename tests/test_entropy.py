from __future__ import annotations

import math

from pwentropy.charset import CharacterSetProfile, analyze
from pwentropy.entropy import base_entropy, password_entropy


def test_empty_password_is_zero_not_nan() -> None:
    assert password_entropy("") == 0.0
    assert base_entropy(CharacterSetProfile(), 0) == 0.0


def test_zero_alphabet_with_length_is_guarded() -> None:
    value = base_entropy(CharacterSetProfile(), 5)
    assert value == 0.0
    assert math.isfinite(value)


def test_length_times_log2_of_alphabet() -> None:
    assert math.isclose(password_entropy("abcdefgh"), 8 * math.log2(26))
    assert math.isclose(password_entropy("Ab1"), 3 * math.log2(62))


def test_monotonic_in_length_for_fixed_profile() -> None:
    profile = analyze("aB3.")
    values = [base_entropy(profile, n) for n in range(0, 64)]
    assert values == sorted(values)


def test_very_long_password_stays_finite() -> None:
    value = password_entropy("x~" * 5000)
    assert math.isfinite(value)
    assert math.isclose(value, 10000 * math.log2(49))
