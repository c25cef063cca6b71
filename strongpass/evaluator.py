"""
strongpass.evaluator

Password strength scorer. Additive point system:
- length: +1 each for >= 8, 12, 16, 20 characters
- character classes: +1 each for lowercase, uppercase, digit, symbol
- anti-patterns: +0.5 each for no repeated run, no sequential triad,
  no common weak word
Maximum is 9.5. score_password(password) returns a ScoreResult with the
score, a Tier and the suggestion list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from loguru import logger

from . import patterns
from .suggestions import build_suggestions

LENGTH_THRESHOLDS = (8, 12, 16, 20)
CLASS_POINTS = 1.0
PATTERN_BONUS = 0.5
MAX_SCORE = len(LENGTH_THRESHOLDS) + 4 * CLASS_POINTS + 3 * PATTERN_BONUS


class Tier(Enum):
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"

    @property
    def feedback(self) -> str:
        return _FEEDBACK[self]


_FEEDBACK = {
    Tier.WEAK: "Weak - Needs improvement",
    Tier.FAIR: "Fair - Could be stronger",
    Tier.GOOD: "Good - Well secured",
    Tier.STRONG: "Strong - Excellent security!",
}

# lower bound of each tier, highest first
TIER_FLOORS = (
    (7.0, Tier.STRONG),
    (5.0, Tier.GOOD),
    (3.0, Tier.FAIR),
)


@dataclass(frozen=True)
class ScoreResult:
    score: float
    tier: Tier
    suggestions: Tuple[str, ...]

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "max_score": MAX_SCORE,
            "tier": self.tier.value,
            "feedback": self.tier.feedback,
            "suggestions": list(self.suggestions),
        }


def tier_for_score(score: float) -> Tier:
    for floor, tier in TIER_FLOORS:
        if score >= floor:
            return tier
    return Tier.WEAK


def length_points(password: str) -> float:
    n = len(password)
    return float(sum(1 for threshold in LENGTH_THRESHOLDS if n >= threshold))


def class_points(password: str) -> float:
    present = (
        patterns.has_lower(password),
        patterns.has_upper(password),
        patterns.has_digit(password),
        patterns.has_symbol(password),
    )
    return CLASS_POINTS * sum(present)


def pattern_points(password: str) -> float:
    clean = (
        not patterns.has_repeated_run(password),
        not patterns.has_sequential_run(password),
        not patterns.has_common_pattern(password),
    )
    return PATTERN_BONUS * sum(clean)


def compute_score(password: str) -> float:
    # empty input earns nothing, not even the anti-pattern bonuses
    if not password:
        return 0.0
    return length_points(password) + class_points(password) + pattern_points(password)


def score_password(password: str) -> ScoreResult:
    """
    Score `password`. Never raises; the empty string scores 0 (WEAK).
    """
    score = compute_score(password)
    tier = tier_for_score(score)
    result = ScoreResult(score=score, tier=tier, suggestions=build_suggestions(password))
    logger.debug("scored password of length {}: {} ({})", len(password), score, tier.value)
    return result
