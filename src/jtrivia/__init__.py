"""
jtrivia

A command-line trivia game that fetches random questions from jService,
validates them and checks the player's answers.
"""

__version__ = "1.0.0"

from .errors import (
    TriviaError,
    TransportError,
    ResponseReadError,
    PayloadParseError,
    QuestionShapeError,
    NoCurrentQuestionError,
    ConfigError
)
from .question import Question, decode_question
from .game import GameSession
from .source import JServiceSource

__all__ = [
    'TriviaError',
    'TransportError',
    'ResponseReadError',
    'PayloadParseError',
    'QuestionShapeError',
    'NoCurrentQuestionError',
    'ConfigError',
    'Question',
    'decode_question',
    'GameSession',
    'JServiceSource'
]
