"""strongpass: password generator and strength tester."""

from loguru import logger

from .charset import AMBIGUOUS_CHARS, CharacterClass, GenerationConfig, build_charset
from .errors import ConfigError, EmptyAlphabetError, InvalidLengthError, ModeError
from .evaluator import ScoreResult, Tier, score_password
from .generator import generate, generate_password
from .session import Mode, Session

__version__ = "0.1.0"

# silent until a front-end calls strongpass.log.configure()
logger.disable("strongpass")
