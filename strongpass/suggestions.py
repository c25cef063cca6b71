"""
strongpass.suggestions

Turn the scorer's predicates into an ordered list of improvement hints.
Each hint appears at most once; the list is never empty.
"""

from typing import Callable, Tuple

from . import patterns

RECOMMENDED_LENGTH = 12
ALL_CRITERIA_MET = "meets all criteria"

# (applies?, message) in display order
RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (lambda pw: len(pw) < RECOMMENDED_LENGTH, "use at least 12 characters"),
    (lambda pw: not patterns.has_lower(pw), "add lowercase letters"),
    (lambda pw: not patterns.has_upper(pw), "add uppercase letters"),
    (lambda pw: not patterns.has_digit(pw), "add numbers"),
    (lambda pw: not patterns.has_symbol(pw), "add special characters"),
    (patterns.has_repeated_run, "avoid repeated characters"),
    (patterns.has_sequential_run, "avoid sequential patterns"),
    (patterns.has_common_pattern, "avoid common words"),
)


def build_suggestions(password: str) -> Tuple[str, ...]:
    suggestions = tuple(message for applies, message in RULES if applies(password))
    return suggestions or (ALL_CRITERIA_MET,)
