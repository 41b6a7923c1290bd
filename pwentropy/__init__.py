"""
Password entropy estimator with heuristic penalties for human-made passwords.
"""

from .blacklist import DEFAULT_BLACKLIST, BlacklistIndex
from .charset import CharacterSetProfile, analyze
from .classifier import classify
from .config import DEFAULT_CONFIG, ConfigError, EntropyConfig
from .engine import EntropyEngine, EvaluationMeta, evaluate, evaluate_with_meta, render
from .entropy import base_entropy
from .penalties import (
    BlacklistPenalty,
    FunctionStage,
    PatternPenalty,
    PenaltyStage,
    RepetitionPenalty,
    apply_stages,
)

__all__ = [
    "BlacklistIndex",
    "BlacklistPenalty",
    "CharacterSetProfile",
    "ConfigError",
    "DEFAULT_BLACKLIST",
    "DEFAULT_CONFIG",
    "EntropyConfig",
    "EntropyEngine",
    "EvaluationMeta",
    "FunctionStage",
    "PatternPenalty",
    "PenaltyStage",
    "RepetitionPenalty",
    "analyze",
    "apply_stages",
    "base_entropy",
    "classify",
    "evaluate",
    "evaluate_with_meta",
    "render",
]
