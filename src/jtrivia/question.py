"""
Question model and decoder for jService random-question responses.

The decoder turns raw response text into a validated ``Question``. It checks
the payload step by step and raises a ``QuestionShapeError`` naming exactly
which expectation failed, so a bad response never yields a partial question.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict

from .constants import MAX_UNSIGNED_64, REQUIRED_FIELDS, SHAPE_ERRORS
from .errors import PayloadParseError, QuestionShapeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """A single trivia question as served by jService."""

    id: int
    title: str
    answer: str
    value: int


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid constant {name!r}")


def _is_unsigned_64(value: Any) -> bool:
    # bool is a subclass of int, but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_UNSIGNED_64


def _extract_field(data: Dict[str, Any], field: str) -> Any:
    """
    Look up one required field and check its type.

    Args:
        data: The question object from the payload
        field: Name of the field to extract

    Returns:
        The field value

    Raises:
        QuestionShapeError: If the field is missing or has the wrong type
    """
    expected_type = REQUIRED_FIELDS[field]

    if field in data:
        value = data[field]
        if expected_type is int and _is_unsigned_64(value):
            return value
        if expected_type is str and isinstance(value, str):
            return value

    message = SHAPE_ERRORS['field'].format(field=field)
    logger.debug(f"Rejected question payload: field '{field}' missing or wrong type")
    raise QuestionShapeError(message, field=field)


def parse_payload(raw_text: str) -> Any:
    """
    Parse raw response text into a generic JSON value.

    Raises:
        PayloadParseError: If the text is not valid JSON
    """
    try:
        return json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Response is not valid JSON: {e}")
        raise PayloadParseError(str(e)) from e


def decode_question_payload(data: Any) -> Question:
    """
    Validate an already parsed payload and build a ``Question`` from it.

    The payload must be a non-empty array whose first element is an object
    carrying ``question`` and ``answer`` strings and ``id`` and ``value``
    unsigned integers. Any other fields are ignored.

    Args:
        data: Parsed JSON value

    Returns:
        Question: The decoded question

    Raises:
        QuestionShapeError: If any shape expectation fails
    """
    if not isinstance(data, list) or not data:
        logger.debug("Rejected question payload: expected a non-empty array")
        raise QuestionShapeError(SHAPE_ERRORS['not_an_array'])

    item = data[0]
    if not isinstance(item, dict):
        logger.debug("Rejected question payload: first element is not an object")
        raise QuestionShapeError(SHAPE_ERRORS['not_an_object'])

    title = _extract_field(item, 'question')
    answer = _extract_field(item, 'answer')
    question_id = _extract_field(item, 'id')
    value = _extract_field(item, 'value')

    question = Question(id=question_id, title=title, answer=answer, value=value)
    logger.debug(f"Decoded question {question.id} worth {question.value} points")
    return question


def decode_question(raw_text: str) -> Question:
    """
    Decode raw jService response text into a ``Question``.

    Args:
        raw_text: Response body, already trimmed

    Returns:
        Question: The decoded question

    Raises:
        PayloadParseError: If the text is not valid JSON
        QuestionShapeError: If the JSON does not have the expected shape
    """
    return decode_question_payload(parse_payload(raw_text))
