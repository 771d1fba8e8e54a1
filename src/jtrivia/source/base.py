from abc import ABC, abstractmethod
from typing import Optional
import logging

from ..config import TriviaConfig


class BaseQuestionSource(ABC):
    def __init__(self, config: Optional[TriviaConfig] = None):
        self.config = config or TriviaConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def fetch(self) -> str:
        """Fetch one random question and return the raw, trimmed response text."""
        pass
