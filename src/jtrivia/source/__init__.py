"""
Question sources.

This package contains the sources jtrivia can pull random questions from,
with jService as the default.
"""

from .base import BaseQuestionSource
from .jservice import JServiceSource

__all__ = [
    'BaseQuestionSource',
    'JServiceSource'
]
