"""
strongpass.errors
Exceptions raised by the charset builder, generator and session.
"""


class StrongPassError(Exception):
    """Base class for all strongpass errors."""


class ConfigError(StrongPassError, ValueError):
    """
    A generation config that cannot produce a password.
    `user_message` is what a display surface should show; the user can fix it.
    """

    user_message = "check the generation settings"

    def __init__(self, message: str = "", user_message: str = ""):
        super().__init__(message or user_message or self.user_message)
        if user_message:
            self.user_message = user_message


class EmptyAlphabetError(ConfigError):
    user_message = "select at least one character type"


class InvalidLengthError(ConfigError):
    user_message = "password length must be at least 1"


class ModeError(StrongPassError):
    """Session operation called in the wrong mode."""
