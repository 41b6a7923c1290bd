"""
Configuration for the password entropy engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .blacklist import DEFAULT_BLACKLIST, BlacklistIndex
from .classifier import BUCKET_COUNT
from .penalties import DEFAULT_STAGES, PenaltyFunction, PenaltyStage, as_stage

DEFAULT_LABELS: tuple[str, ...] = (
    "Very Weak",
    "Weak",
    "Acceptable",
    "Good",
    "Strong",
    "Very Strong",
)

DEFAULT_STYLE_TAGS: tuple[str, ...] = (
    "very-weak",
    "weak",
    "acceptable",
    "good",
    "strong",
    "very-strong",
)


class ConfigError(ValueError):
    """Raised when an EntropyConfig is malformed."""


@dataclass(frozen=True)
class EntropyConfig:
    # Penalty stages, applied in order after the base entropy is computed.
    # Plain (entropy, password) functions are wrapped into stages.
    stages: Sequence[PenaltyStage | PenaltyFunction] = DEFAULT_STAGES

    # Known weak passwords; a plain iterable of strings is indexed on init.
    blacklist: BlacklistIndex | Iterable[str] = DEFAULT_BLACKLIST

    # One display label and one style tag per strength bucket (0..5).
    labels: Sequence[str] = DEFAULT_LABELS
    style_tags: Sequence[str] = DEFAULT_STYLE_TAGS

    def __post_init__(self) -> None:
        try:
            stages = tuple(as_stage(s) for s in self.stages)
        except TypeError as exc:
            raise ConfigError(f"Invalid penalty stage: {exc}") from exc

        blacklist = self.blacklist
        if not isinstance(blacklist, BlacklistIndex):
            if isinstance(blacklist, str):
                raise ConfigError("blacklist must be a collection of strings, not a string.")
            try:
                blacklist = BlacklistIndex(blacklist)
            except TypeError as exc:
                raise ConfigError(f"Invalid blacklist: {exc}") from exc

        labels = self._check_names("labels", self.labels)
        style_tags = self._check_names("style_tags", self.style_tags)

        object.__setattr__(self, "stages", stages)
        object.__setattr__(self, "blacklist", blacklist)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "style_tags", style_tags)

    @staticmethod
    def _check_names(field_name: str, values: Sequence[str]) -> tuple[str, ...]:
        if isinstance(values, str):
            raise ConfigError(f"{field_name} must be a sequence, not a string.")
        values = tuple(values)
        if len(values) != BUCKET_COUNT:
            raise ConfigError(
                f"{field_name} must have exactly {BUCKET_COUNT} entries, "
                f"got {len(values)}."
            )
        for value in values:
            if not isinstance(value, str):
                raise ConfigError(
                    f"{field_name} entries must be strings, got {value!r}."
                )
        return values

    def extend(
        self,
        stages: Iterable[PenaltyStage | PenaltyFunction] = (),
        blacklist: Iterable[str] = (),
        labels: Sequence[str] | None = None,
        style_tags: Sequence[str] | None = None,
    ) -> "EntropyConfig":
        """
        Merge caller options into a new config.

        Stages are appended after the existing ones and blacklist words are
        added to the existing set. Labels and style tags, when given,
        replace the current ones.
        """
        if isinstance(blacklist, str):
            raise ConfigError("blacklist must be a collection of strings, not a string.")
        try:
            merged_blacklist = self.blacklist.union(blacklist)
        except TypeError as exc:
            raise ConfigError(f"Invalid blacklist: {exc}") from exc

        return EntropyConfig(
            stages=(*self.stages, *stages),
            blacklist=merged_blacklist,
            labels=self.labels if labels is None else labels,
            style_tags=self.style_tags if style_tags is None else style_tags,
        )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = EntropyConfig()
