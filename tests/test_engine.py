"""End-to-end tests for evaluate / evaluate_with_meta."""
from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from pwentropy import (
    DEFAULT_CONFIG,
    BlacklistPenalty,
    EntropyConfig,
    EntropyEngine,
    FunctionStage,
    PatternPenalty,
    RepetitionPenalty,
    evaluate,
    evaluate_with_meta,
    render,
)

LOG2_504 = math.log2(504)


def test_empty_password() -> None:
    assert evaluate("") == (0.0, 0)
    meta = evaluate_with_meta("")
    assert meta.alphabet_size == 0
    assert meta.label == "Very Weak"


def test_blacklisted_password_takes_blacklist_entropy() -> None:
    meta = evaluate_with_meta("password")
    assert meta.base_entropy > 37
    assert math.isclose(dict(meta.stage_trace)["blacklist"], LOG2_504)
    # "ss" costs a further 3 bits in the repetition stage
    assert math.isclose(meta.entropy, LOG2_504 - 3)
    assert meta.bucket == 0


def test_blacklist_is_case_insensitive_end_to_end() -> None:
    entropy, bucket = evaluate("LetMeIn")
    assert math.isclose(entropy, LOG2_504)
    assert bucket == 0


def test_repetition_costs_nine_bits_for_aaaa() -> None:
    cfg = EntropyConfig(blacklist=())
    aaaa, _ = evaluate("aaaa", cfg)
    abcd, _ = evaluate("abcd", cfg)
    assert math.isclose(abcd - aaaa, 9.0)


def test_pattern_penalty_end_to_end() -> None:
    cfg = EntropyConfig(blacklist=())
    entropy, _ = evaluate("Abcdefgh", cfg)
    assert math.isclose(entropy, 8 * math.log2(52) - 8)


def test_random_looking_password_is_very_strong() -> None:
    entropy, bucket = evaluate("k7#Rq9!vZ2@x")
    assert math.isclose(entropy, 12 * math.log2(72))
    assert bucket == 5
    assert render(bucket) == ("Very Strong", "very-strong")


def test_negative_entropy_falls_to_bucket_zero() -> None:
    # blacklisted, then three repeated pairs
    entropy, bucket = evaluate("aaaa")
    assert math.isclose(entropy, LOG2_504 - 9)
    assert entropy < 0
    assert bucket == 0


def test_stage_order_changes_result_for_blacklisted_password() -> None:
    bonus = FunctionStage(lambda e, p: e + 100, name="bonus")
    after = DEFAULT_CONFIG.extend(stages=[bonus])
    before = EntropyConfig(
        stages=[PatternPenalty(), bonus, BlacklistPenalty(), RepetitionPenalty()]
    )
    after_entropy, after_bucket = evaluate("password", after)
    before_entropy, before_bucket = evaluate("password", before)
    assert math.isclose(after_entropy, LOG2_504 - 3 + 100)
    assert math.isclose(before_entropy, LOG2_504 - 3)
    assert after_bucket == 5
    assert before_bucket == 0


def test_custom_labels_are_rendered() -> None:
    cfg = DEFAULT_CONFIG.extend(
        labels=["z0", "z1", "z2", "z3", "z4", "z5"],
        style_tags=["s0", "s1", "s2", "s3", "s4", "s5"],
    )
    meta = evaluate_with_meta("password", cfg)
    assert (meta.label, meta.style_tag) == ("z0", "s0")


def test_non_string_password_raises_type_error() -> None:
    with pytest.raises(TypeError):
        evaluate(12345)  # type: ignore[arg-type]


def test_meta_to_dict_is_json_friendly() -> None:
    data = evaluate_with_meta("Abc1").to_dict()
    assert data["classes"] == ["lowercase", "uppercase", "digit"]
    assert data["alphabet_size"] == 62
    assert [s["name"] for s in data["stages"]] == ["pattern", "blacklist", "repetition"]
    assert data["bucket"] == 1


def test_engine_is_shareable_between_threads() -> None:
    engine = EntropyEngine()
    passwords = ["password", "k7#Rq9!vZ2@x", "", "aaaa", "Abcdefgh"] * 40
    expected = [evaluate(p) for p in passwords]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(engine.evaluate, passwords))
    assert results == expected
