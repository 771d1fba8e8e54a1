"""
Exception hierarchy for jtrivia.

Every failure the question pipeline can produce derives from ``TriviaError``
so callers can catch the whole family at once or pick out a single kind.
"""

from typing import Optional


class TriviaError(Exception):
    """Base class for all jtrivia errors."""


class TransportError(TriviaError):
    """The outbound request could not be completed."""


class ResponseReadError(TriviaError):
    """Reading or decoding the response body failed."""


class PayloadParseError(TriviaError):
    """The response body is not valid JSON."""

    def __init__(self, diagnostic: str):
        super().__init__(f"malformed payload: {diagnostic}")
        self.diagnostic = diagnostic


class QuestionShapeError(TriviaError):
    """The parsed payload does not look like a random-question response."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NoCurrentQuestionError(TriviaError):
    """An answer was submitted before any question was fetched."""

    def __init__(self):
        super().__init__("no current question")


class ConfigError(TriviaError):
    """The settings file could not be read or is not valid JSON."""
