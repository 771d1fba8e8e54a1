"""
Game session: holds the score and the question currently being played.
"""

import logging
from typing import Optional

from .errors import NoCurrentQuestionError
from .question import Question, decode_question
from .source import BaseQuestionSource


class GameSession:
    """
    One play session.

    The session fetches and stores at most one question at a time and checks
    answers against it. It never changes ``score`` itself; the caller adds
    ``question.value`` after a correct answer.
    """

    def __init__(self, source: BaseQuestionSource):
        self.logger = logging.getLogger(__name__)
        self.source = source
        self.score = 0
        self.current_question: Optional[Question] = None

    @property
    def has_question(self) -> bool:
        return self.current_question is not None

    def new_question(self) -> Question:
        """
        Fetch and decode a new question, replacing the current one.

        If fetching or decoding fails the error propagates and the previously
        stored question, if any, is kept.

        Returns:
            Question: The newly stored question
        """
        raw_text = self.source.fetch()
        question = decode_question(raw_text)
        self.current_question = question
        self.logger.info(f"New question {question.id} ({question.value} points)")
        return question

    def verify_answer(self, answer: str) -> bool:
        """
        Check a candidate answer against the current question.

        The candidate is compared with the question's prompt text (``title``),
        not its ``answer`` field, using exact string equality. This mirrors
        the behaviour of the game this was built from and is kept until the
        intended comparison is confirmed.

        Raises:
            NoCurrentQuestionError: If no question has been fetched yet
        """
        if self.current_question is None:
            self.logger.warning("Answer submitted with no current question")
            raise NoCurrentQuestionError()

        result = self.current_question.title == answer
        self.logger.info(f"Answer for question {self.current_question.id} was "
                         f"{'correct' if result else 'wrong'}")
        return result
