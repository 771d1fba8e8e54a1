import json
import sys
from pathlib import Path
from typing import List, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jtrivia.source import BaseQuestionSource  # noqa: E402


SAMPLE_QUESTION = {
    "id": 87603,
    "answer": "a safety",
    "question": "An NFL game ended 17-7 after one team scored this 2-point play",
    "value": 400,
    "airdate": "2009-04-29T12:00:00.000Z",
    "created_at": "2014-02-14T02:14:46.000Z",
    "updated_at": "2014-02-14T02:14:46.000Z",
    "category_id": 11571,
    "game_id": None,
    "invalid_count": None,
    "category": {"id": 11571, "title": "football", "clues_count": 5}
}


class FakeSource(BaseQuestionSource):
    """Source that returns canned bodies (or raises canned errors) in order."""

    def __init__(self, responses: List[Union[str, Exception]]):
        self.responses = list(responses)
        self.calls = 0

    def fetch(self) -> str:
        self.calls += 1
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_payload(**overrides) -> str:
    """Serialize a single-question response, applying field overrides."""
    item = dict(SAMPLE_QUESTION)
    item.update(overrides)
    return json.dumps([item])


@pytest.fixture
def sample_question():
    return dict(SAMPLE_QUESTION)


@pytest.fixture
def sample_payload():
    return json.dumps([SAMPLE_QUESTION])
