"""
High-level evaluation: password in, entropy and strength bucket out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .charset import CharacterSetProfile, analyze
from .classifier import classify
from .config import DEFAULT_CONFIG, EntropyConfig
from .entropy import base_entropy
from .penalties import run_stages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationMeta:
    """
    Full result of one password evaluation.
    """
    # Character classes found and the alphabet size they imply
    profile: CharacterSetProfile
    alphabet_size: int
    length: int

    # Entropy before penalties, and after each stage in order
    base_entropy: float
    stage_trace: tuple[tuple[str, float], ...]

    # Final score and its presentation
    entropy: float
    bucket: int
    label: str
    style_tag: str

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "classes": self.profile.classes(),
            "alphabet_size": self.alphabet_size,
            "base_entropy": self.base_entropy,
            "stages": [
                {"name": name, "entropy": value} for name, value in self.stage_trace
            ],
            "entropy": self.entropy,
            "bucket": self.bucket,
            "label": self.label,
            "style_tag": self.style_tag,
        }


def evaluate_with_meta(
    password: str,
    config: EntropyConfig | None = None,
) -> EvaluationMeta:
    """
    Evaluation pipeline with metadata:

    - Detect character classes and the implied alphabet size.
    - Compute base entropy from alphabet size and length.
    - Run the penalty stages in order.
    - Classify the final entropy into a bucket.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be a str, got {type(password).__name__}")

    cfg = config or DEFAULT_CONFIG

    profile = analyze(password)
    base = base_entropy(profile, len(password))
    trace = tuple(run_stages(base, password, cfg.stages, cfg))
    entropy = trace[-1][1] if trace else base
    bucket = classify(entropy)

    logger.debug(
        "Evaluated password of length %d: base %.3f bits, final %.3f bits, bucket %d",
        len(password),
        base,
        entropy,
        bucket,
    )

    label, style_tag = render(bucket, cfg)
    return EvaluationMeta(
        profile=profile,
        alphabet_size=profile.alphabet_size,
        length=len(password),
        base_entropy=base,
        stage_trace=trace,
        entropy=entropy,
        bucket=bucket,
        label=label,
        style_tag=style_tag,
    )


def evaluate(
    password: str,
    config: EntropyConfig | None = None,
) -> tuple[float, int]:
    """
    Return ``(entropy, bucket)`` for ``password``.
    """
    meta = evaluate_with_meta(password, config)
    return meta.entropy, meta.bucket


def render(bucket: int, config: EntropyConfig | None = None) -> tuple[str, str]:
    """Pick the label and style tag a display should show for ``bucket``."""
    cfg = config or DEFAULT_CONFIG
    return cfg.labels[bucket], cfg.style_tags[bucket]


class EntropyEngine:
    """
    Binds one configuration for repeated evaluations. The config is
    immutable, so a single engine can be shared between threads.
    """

    def __init__(self, config: EntropyConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def evaluate(self, password: str) -> tuple[float, int]:
        return evaluate(password, self.config)

    def evaluate_with_meta(self, password: str) -> EvaluationMeta:
        return evaluate_with_meta(password, self.config)

    def render(self, bucket: int) -> tuple[str, str]:
        return render(bucket, self.config)
