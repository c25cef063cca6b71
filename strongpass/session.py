"""
strongpass.session

Application state for a two-mode front-end (generate / test).
A Session owns the current mode and password and composes the charset
builder, generator and scorer; display surfaces only render its Outcomes.
Clipboard access goes through an injected ClipboardSink.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

import pyperclip
from loguru import logger

from .charset import GenerationConfig
from .errors import ConfigError, ModeError
from .evaluator import ScoreResult, score_password
from .generator import RandomSource, generate_password


class Mode(Enum):
    GENERATE = "generate"
    TEST = "test"


@dataclass(frozen=True)
class Outcome:
    password: str = ""
    result: Optional[ScoreResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Session:
    def __init__(self, mode: Mode = Mode.GENERATE, rng: Optional[RandomSource] = None):
        self.mode = mode
        self.password = ""
        self._rng = rng

    def switch_mode(self, mode: Mode) -> None:
        """Change mode; the current password is always cleared."""
        logger.debug("switching mode {} -> {}", self.mode.value, mode.value)
        self.mode = mode
        self.clear()

    def clear(self) -> None:
        self.password = ""

    def _require(self, mode: Mode) -> None:
        if self.mode is not mode:
            raise ModeError(f"operation needs {mode.value} mode, session is in {self.mode.value} mode")

    def generate(self, config: GenerationConfig) -> Outcome:
        """
        Generate and score a password. A bad config is reported in
        Outcome.error and leaves the session untouched.
        """
        self._require(Mode.GENERATE)
        try:
            password = generate_password(config, self._rng)
        except ConfigError as e:
            logger.warning("generation rejected: {}", e)
            return Outcome(error=e.user_message)
        self.password = password
        return Outcome(password=password, result=score_password(password))

    def test(self, password: str) -> Outcome:
        """Score user input. Empty input resets the session instead of scoring."""
        self._require(Mode.TEST)
        if not password:
            self.clear()
            return Outcome()
        self.password = password
        return Outcome(password=password, result=score_password(password))


class ClipboardSink(Protocol):
    def write_text(self, text: str) -> bool: ...


class PyperclipSink:
    """System clipboard via pyperclip."""

    def write_text(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("clipboard unavailable: {}", e)
            return False
        return True


def copy_password(session: Session, sink: ClipboardSink) -> bool:
    if not session.password:
        logger.warning("nothing to copy: generate or enter a password first")
        return False
    ok = sink.write_text(session.password)
    logger.debug("clipboard write {}", "succeeded" if ok else "failed")
    return ok
