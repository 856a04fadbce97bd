import random

import pytest
from pydantic import ValidationError

from trivia_cbt.models.question_model import ProviderItem, Question, build_question_set


def _item(**overrides):
    data = {
        "question_text": "Capital of France?",
        "correct_answer_text": "Paris",
        "incorrect_answer_texts": ["Lyon", "Nice", "Lille"],
    }
    data.update(overrides)
    return ProviderItem(**data)


def test_from_item_contains_every_answer_once():
    q = Question.from_item(_item(), random.Random(7))
    assert sorted(q.choices) == ["Lille", "Lyon", "Nice", "Paris"]
    assert q.correct_answer == "Paris"
    assert q.choices.count("Paris") == 1


def test_shuffle_is_deterministic_for_seeded_rng():
    a = Question.from_item(_item(), random.Random(42))
    b = Question.from_item(_item(), random.Random(42))
    assert a.choices == b.choices


def test_question_is_frozen():
    q = Question.from_item(_item(), random.Random(1))
    with pytest.raises(ValidationError):
        q.text = "changed"


def test_correct_answer_must_be_a_choice():
    with pytest.raises(ValidationError):
        Question(text="Q", choices=["a", "b"], correct_answer="c")


def test_at_least_two_choices():
    with pytest.raises(ValidationError):
        Question(text="Q", choices=["a"], correct_answer="a")


def test_duplicate_choice_text_is_kept():
    q = Question.from_item(_item(incorrect_answer_texts=["Paris", "Lyon"]), random.Random(3))
    assert q.choices.count("Paris") == 2


def test_provider_item_needs_a_distractor():
    with pytest.raises(ValidationError):
        _item(incorrect_answer_texts=[])


def test_build_question_set_keeps_order():
    items = [_item(question_text=f"Q{i}") for i in range(4)]
    qs = build_question_set(items, random.Random(0))
    assert isinstance(qs, tuple)
    assert [q.text for q in qs] == ["Q0", "Q1", "Q2", "Q3"]


def test_choices_cannot_be_changed_in_place():
    q = Question.from_item(_item(), random.Random(5))
    assert isinstance(q.choices, tuple)
    with pytest.raises(AttributeError):
        q.choices.append("Marseille")
    with pytest.raises(TypeError):
        q.choices[0] = "Marseille"
    assert q.correct_answer in q.choices
    assert len(q.choices) == 4
