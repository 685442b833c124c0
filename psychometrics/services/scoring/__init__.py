"""Per-instrument scoring strategies."""

from psychometrics.services.scoring.base import ScoredItem, ScoringOutcome, ScoringStrategy
from psychometrics.services.scoring.registry import (
    StrategyRegistry,
    get_strategy,
    register_strategy,
)

__all__ = [
    "ScoredItem",
    "ScoringOutcome",
    "ScoringStrategy",
    "StrategyRegistry",
    "get_strategy",
    "register_strategy",
]
