"""
strongpass.generator
Random password sampling over an alphabet built by strongpass.charset.
"""

from random import SystemRandom
from typing import Optional, Protocol

from loguru import logger

from .charset import GenerationConfig, build_charset
from .errors import EmptyAlphabetError, InvalidLengthError


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


# OS-backed CSPRNG; tests pass a seeded random.Random instead
_sysrand = SystemRandom()


def generate(alphabet: str, length: int, rng: Optional[RandomSource] = None) -> str:
    """
    Draw `length` characters from `alphabet`, each position independently
    and uniformly. Repeats are allowed.
    """
    if not alphabet:
        raise EmptyAlphabetError("alphabet must not be empty")
    if length < 1:
        raise InvalidLengthError(f"length must be >= 1, got {length}")

    rng = rng or _sysrand
    size = len(alphabet)
    return "".join(alphabet[rng.randrange(size)] for _ in range(length))


def generate_password(config: GenerationConfig, rng: Optional[RandomSource] = None) -> str:
    """Build the alphabet for `config` and sample a password from it."""
    alphabet = build_charset(config)
    password = generate(alphabet, config.length, rng)
    logger.debug("generated password of length {} from {} chars", len(password), len(alphabet))
    return password
