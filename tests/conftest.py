"""
Pytest configuration and shared fixtures for trivia_cbt tests.
"""

import pytest

import api.session as web_session
from trivia_cbt.models.question_model import Question
from trivia_cbt.services.quiz_controller import QuizController


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_questions(count: int) -> list[Question]:
    """Questions whose correct answer is always the first choice."""
    return [
        Question(
            text=f"Question {i + 1}?",
            choices=[f"right {i + 1}", f"wrong {i + 1}a", f"wrong {i + 1}b", f"wrong {i + 1}c"],
            correct_answer=f"right {i + 1}",
        )
        for i in range(count)
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    return QuizController(duration_seconds=60, clock=clock)


@pytest.fixture
def questions():
    return make_questions(5)


@pytest.fixture(autouse=True)
def _clear_web_sessions():
    web_session._sessions.clear()
    yield
    web_session._sessions.clear()


@pytest.fixture
def question_factory():
    return make_questions
