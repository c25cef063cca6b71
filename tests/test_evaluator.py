import dataclasses

import pytest

from strongpass.evaluator import (
    MAX_SCORE,
    ScoreResult,
    Tier,
    score_password,
    tier_for_score,
)
from strongpass.suggestions import ALL_CRITERIA_MET


def test_empty_password():
    result = score_password("")
    assert result.score == 0
    assert result.tier is Tier.WEAK
    assert "use at least 12 characters" in result.suggestions


def test_identical_characters():
    # length 8/12 (+2), lowercase (+1), no sequence (+0.5), no common word (+0.5)
    result = score_password("aaaaaaaaaaaa")
    assert result.score == 4.0
    assert result.tier is Tier.FAIR
    assert "avoid repeated characters" in result.suggestions


def test_strong_mixed_password():
    result = score_password("Tr0ub4dor&3xQ9")
    assert result.score == 7.5
    assert result.tier is Tier.STRONG
    assert result.suggestions == (ALL_CRITERIA_MET,)


def test_common_word_password():
    result = score_password("password123")
    assert result.score == 3.5
    assert result.tier is Tier.FAIR
    assert result.suggestions == (
        "use at least 12 characters",
        "add uppercase letters",
        "add special characters",
        "avoid sequential patterns",
        "avoid common words",
    )


def test_common_word_is_case_insensitive():
    assert "avoid common words" in score_password("MyPASSWORDx!9").suggestions


def test_maximum_score():
    result = score_password("Tr0ub4dor&3xQ9#Kp7Zw")
    assert result.score == MAX_SCORE == 9.5
    assert result.tier is Tier.STRONG


def test_strong_password_scores_high():
    # 18 chars: three length points, all classes, no patterns
    result = score_password("X7f!9Lq@2Vb#tR4sYp")
    assert result.score == 8.5
    assert result.tier is Tier.STRONG


def test_non_ascii_and_whitespace():
    # lowercase + non-ASCII symbol + all three pattern bonuses
    assert score_password("ñandú").score == 3.5
    # symbol (+1), repeated run, no sequence or common word (+1)
    result = score_password("   ")
    assert result.score == 2.0
    assert result.tier is Tier.WEAK


@pytest.mark.parametrize(
    "score, tier",
    [
        (0, Tier.WEAK),
        (2.5, Tier.WEAK),
        (3, Tier.FAIR),
        (4.5, Tier.FAIR),
        (5, Tier.GOOD),
        (6.5, Tier.GOOD),
        (7, Tier.STRONG),
        (9.5, Tier.STRONG),
    ],
)
def test_tier_boundaries(score, tier):
    assert tier_for_score(score) is tier


def test_tier_feedback():
    assert Tier.WEAK.feedback == "Weak - Needs improvement"
    assert Tier.STRONG.feedback == "Strong - Excellent security!"


def test_deterministic_and_immutable():
    a = score_password("Summer2024!")
    b = score_password("Summer2024!")
    assert a == b
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.score = 9.5


def test_to_dict():
    d = score_password("Tr0ub4dor&3xQ9").to_dict()
    assert d == {
        "score": 7.5,
        "max_score": 9.5,
        "tier": "strong",
        "feedback": "Strong - Excellent security!",
        "suggestions": [ALL_CRITERIA_MET],
    }
    assert isinstance(score_password("x"), ScoreResult)
