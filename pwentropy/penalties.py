"""
Penalty pipeline: heuristics that correct the naive base entropy for the
predictable ways humans build passwords.

Stages run strictly in order, each one seeing the entropy produced by the
previous stage. Some of the patterns follow Weir et al., "Testing Metrics
for Password Creation Policies by Attacking Large Sets of Revealed
Passwords".
"""

from __future__ import annotations

import inspect
import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterable, Sequence

if TYPE_CHECKING:
    from .config import EntropyConfig

logger = logging.getLogger(__name__)

PenaltyFunction = Callable[[float, str], float]


class PenaltyStage(ABC):
    """
    One step of the pipeline. Implementations must be pure: the result
    depends only on the arguments, and nothing is stored between calls.
    """

    name: str = "stage"

    @abstractmethod
    def apply(self, entropy: float, password: str, config: "EntropyConfig") -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FunctionStage(PenaltyStage):
    """
    Wrap a plain ``(entropy, password) -> entropy`` function as a stage.
    """

    def __init__(self, func: PenaltyFunction, name: str | None = None) -> None:
        if not callable(func):
            raise TypeError(f"Penalty function must be callable, got {func!r}.")
        try:
            inspect.signature(func).bind(0.0, "")
        except TypeError as exc:
            raise TypeError(
                f"Penalty function {func!r} must accept (entropy, password)."
            ) from exc
        except ValueError:
            # No introspectable signature (some builtins); accept as-is.
            pass
        self.func = func
        self.name = name or getattr(func, "__name__", "function")

    def apply(self, entropy: float, password: str, config: "EntropyConfig") -> float:
        return float(self.func(entropy, password))

    def __repr__(self) -> str:
        return f"FunctionStage({self.name!r})"


class PatternPenalty(PenaltyStage):
    """
    Subtract a fixed number of bits when the password follows one of the
    dominant construction habits:

    - letters followed by 1 to 3 digits ("monkey12")
    - one capital followed by lowercase letters ("Monkey")
    - letters followed by a single special character ("monkey!")
    """

    name = "pattern"

    PATTERNS = (
        re.compile(r"[a-zA-Z]+[0-9]{1,3}"),
        re.compile(r"[A-Z][a-z]+"),
        re.compile(r"[a-zA-Z]+[^a-zA-Z0-9]"),
    )

    def __init__(self, penalty: float = 8.0) -> None:
        self.penalty = penalty

    def matches(self, password: str) -> bool:
        return any(p.fullmatch(password) for p in self.PATTERNS)

    def apply(self, entropy: float, password: str, config: "EntropyConfig") -> float:
        if self.matches(password):
            return entropy - self.penalty
        return entropy


class BlacklistPenalty(PenaltyStage):
    """
    Overwrite the entropy of a blacklisted password with the information
    content of the blacklist itself.
    """

    name = "blacklist"

    def apply(self, entropy: float, password: str, config: "EntropyConfig") -> float:
        blacklist = config.blacklist
        if not blacklist.contains(password):
            return entropy
        return blacklist.information_content()


class RepetitionPenalty(PenaltyStage):
    """
    Subtract bits for every pair of identical adjacent characters; a run of
    k equal characters counts k - 1 times.
    """

    name = "repetition"

    def __init__(self, penalty_per_repeat: float = 3.0) -> None:
        self.penalty_per_repeat = penalty_per_repeat

    @staticmethod
    def count_repeats(password: str) -> int:
        return sum(1 for a, b in zip(password, password[1:]) if a == b)

    def apply(self, entropy: float, password: str, config: "EntropyConfig") -> float:
        return entropy - self.penalty_per_repeat * self.count_repeats(password)


DEFAULT_STAGES: tuple[PenaltyStage, ...] = (
    PatternPenalty(),
    BlacklistPenalty(),
    RepetitionPenalty(),
)


def as_stage(obj: PenaltyStage | PenaltyFunction) -> PenaltyStage:
    """
    Coerce a stage or a plain two-argument function into a PenaltyStage.
    Raises TypeError for anything else.
    """
    if isinstance(obj, PenaltyStage):
        return obj
    if callable(obj):
        return FunctionStage(obj)
    raise TypeError(f"Not a penalty stage or callable: {obj!r}")


def run_stages(
    entropy: float,
    password: str,
    stages: Iterable[PenaltyStage],
    config: "EntropyConfig",
) -> list[tuple[str, float]]:
    """
    Fold ``entropy`` through ``stages`` and return the entropy after each
    stage as ``(stage name, entropy)`` pairs.
    """
    trace: list[tuple[str, float]] = []
    for stage in stages:
        before = entropy
        entropy = stage.apply(entropy, password, config)
        if entropy != before:
            logger.debug("Stage %s: %.3f -> %.3f bits", stage.name, before, entropy)
        trace.append((stage.name, entropy))
    return trace


def apply_stages(
    entropy: float,
    password: str,
    stages: Sequence[PenaltyStage],
    config: "EntropyConfig",
) -> float:
    """Left fold of ``stages`` over ``entropy``; returns the final value."""
    trace = run_stages(entropy, password, stages, config)
    if not trace:
        return entropy
    return trace[-1][1]
