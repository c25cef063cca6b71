"""
strongpass.charset

Character classes and alphabet construction for the generator.
- CharacterClass: the four selectable classes, each with a fixed alphabet
- GenerationConfig: length + enabled classes + exclude-ambiguous flag
- build_charset(config): concatenated alphabet, ambiguous chars removed on request
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable

from loguru import logger

from .errors import EmptyAlphabetError, InvalidLengthError


class CharacterClass(Enum):
    UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWER = "abcdefghijklmnopqrstuvwxyz"
    DIGIT = "0123456789"
    SYMBOL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

    @property
    def alphabet(self) -> str:
        return self.value


# concatenation order; keeps build_charset deterministic
CANONICAL_ORDER = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

# characters that are easy to misread (i/l/1/L, o/0/O)
AMBIGUOUS_CHARS: FrozenSet[str] = frozenset("il1Lo0O")


@dataclass(frozen=True)
class GenerationConfig:
    length: int = 16
    enabled_classes: FrozenSet[CharacterClass] = field(
        default_factory=lambda: frozenset(CharacterClass)
    )
    exclude_ambiguous: bool = False

    def __post_init__(self):
        if self.length < 1:
            raise InvalidLengthError(f"length must be >= 1, got {self.length}")
        # accept any iterable of classes, store as frozenset
        object.__setattr__(self, "enabled_classes", frozenset(self.enabled_classes))

    @classmethod
    def from_flags(
        cls,
        length: int = 16,
        upper: bool = True,
        lower: bool = True,
        digits: bool = True,
        symbols: bool = True,
        exclude_ambiguous: bool = False,
    ) -> "GenerationConfig":
        """Build a config from the four checkbox-style flags of a form."""
        flags = {
            CharacterClass.UPPER: upper,
            CharacterClass.LOWER: lower,
            CharacterClass.DIGIT: digits,
            CharacterClass.SYMBOL: symbols,
        }
        enabled = frozenset(c for c, on in flags.items() if on)
        return cls(length=length, enabled_classes=enabled, exclude_ambiguous=exclude_ambiguous)


def strip_ambiguous(chars: str) -> str:
    """Remove every occurrence of an ambiguous character."""
    return "".join(c for c in chars if c not in AMBIGUOUS_CHARS)


def concat_classes(classes: Iterable[CharacterClass]) -> str:
    enabled = set(classes)
    return "".join(c.alphabet for c in CANONICAL_ORDER if c in enabled)


def build_charset(config: GenerationConfig) -> str:
    """
    Return the alphabet for `config`.
    Raises EmptyAlphabetError when no class is enabled or when removing
    ambiguous characters leaves nothing.
    """
    if not config.enabled_classes:
        raise EmptyAlphabetError("no character class enabled")

    charset = concat_classes(config.enabled_classes)
    if config.exclude_ambiguous:
        charset = strip_ambiguous(charset)
    if not charset:
        raise EmptyAlphabetError("alphabet is empty after excluding ambiguous characters")

    logger.debug(
        "built charset: {} chars from {} class(es), exclude_ambiguous={}",
        len(charset), len(config.enabled_classes), config.exclude_ambiguous,
    )
    return charset
