"""
strongpass.patterns

Predicates shared by the scorer and the suggestion builder:
- character class presence (ASCII only)
- repeated runs like 'aaa'
- ascending sequential triads like 'abc' or '789' (case-insensitive)
- common weak-password substrings (case-insensitive)

The sequences and weak words are plain data tables so they can be extended
without touching the matching code.
"""

import string
from typing import List, Tuple

ASCII_LETTERS_DIGITS = frozenset(string.ascii_letters + string.digits)


def _ascending_triads(alphabet: str) -> Tuple[str, ...]:
    return tuple(alphabet[i:i + 3] for i in range(len(alphabet) - 2))


# abc, bcd, ..., xyz, 012, ..., 789
SEQUENTIAL_TRIADS: Tuple[str, ...] = (
    _ascending_triads(string.ascii_lowercase) + _ascending_triads(string.digits)
)

COMMON_PATTERNS: Tuple[str, ...] = (
    "password", "123456", "qwerty", "abc123", "admin", "welcome", "login",
)

REPEAT_RUN_LENGTH = 3


def has_lower(password: str) -> bool:
    return any(c in string.ascii_lowercase for c in password)


def has_upper(password: str) -> bool:
    return any(c in string.ascii_uppercase for c in password)


def has_digit(password: str) -> bool:
    return any(c in string.digits for c in password)


def has_symbol(password: str) -> bool:
    """Anything that is not an ASCII letter or digit counts, spaces and non-ASCII included."""
    return any(c not in ASCII_LETTERS_DIGITS for c in password)


def find_repeated_runs(password: str, run: int = REPEAT_RUN_LENGTH) -> List[str]:
    """Return maximal runs of one character repeated `run` or more times, in order."""
    found = []
    i = 0
    n = len(password)
    while i < n:
        j = i
        while j + 1 < n and password[j + 1] == password[i]:
            j += 1
        if j - i + 1 >= run:
            found.append(password[i:j + 1])
        i = j + 1
    return found


def has_repeated_run(password: str, run: int = REPEAT_RUN_LENGTH) -> bool:
    return bool(find_repeated_runs(password, run))


def find_sequential_runs(password: str) -> List[str]:
    """Return the SEQUENTIAL_TRIADS entries that occur in `password`, in table order."""
    lower = password.lower()
    return [triad for triad in SEQUENTIAL_TRIADS if triad in lower]


def has_sequential_run(password: str) -> bool:
    return bool(find_sequential_runs(password))


def find_common_patterns(password: str) -> List[str]:
    """Return the COMMON_PATTERNS entries contained in `password`, in table order."""
    lower = password.lower()
    return [word for word in COMMON_PATTERNS if word in lower]


def has_common_pattern(password: str) -> bool:
    return bool(find_common_patterns(password))
