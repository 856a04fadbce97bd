import asyncio
import random

import httpx
import pytest

from trivia_cbt.errors import ProviderError
from trivia_cbt.services.sample_questions import SAMPLE_ITEMS, load_sample_question_set
from trivia_cbt.services.trivia_provider import fetch_trivia_items, load_question_set

_PAYLOAD = {
    "response_code": 0,
    "results": [
        {
            "type": "multiple",
            "question": "Who wrote &quot;Hamlet&quot;?",
            "correct_answer": "William Shakespeare",
            "incorrect_answers": ["Charles Dickens", "Jane Austen", "Mark Twain"],
        },
        {
            "type": "multiple",
            "question": "What is 2 &amp; 2?",
            "correct_answer": "4",
            "incorrect_answers": ["3", "5", "22"],
        },
    ],
}


def _transport(handler):
    return httpx.MockTransport(handler)


def _json_handler(payload, status=200, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload)
    return handler


def test_fetch_decodes_entities_and_sends_params():
    seen = []
    items = asyncio.run(
        fetch_trivia_items(2, url="https://trivia.test/api.php",
                           transport=_transport(_json_handler(_PAYLOAD, seen=seen)))
    )
    assert [i.question_text for i in items] == ['Who wrote "Hamlet"?', "What is 2 & 2?"]
    assert items[0].incorrect_answer_texts == ["Charles Dickens", "Jane Austen", "Mark Twain"]
    assert seen[0].url.params["amount"] == "2"
    assert seen[0].url.params["type"] == "multiple"


def test_non_zero_response_code_is_provider_error():
    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(
            5, transport=_transport(_json_handler({"response_code": 1, "results": []}))))


def test_http_error_status_is_provider_error():
    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(5, transport=_transport(_json_handler({}, status=500))))


def test_network_failure_is_provider_error():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(5, transport=_transport(handler)))


def test_invalid_json_is_provider_error():
    def handler(request):
        return httpx.Response(200, content=b"<html>nope</html>")

    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(5, transport=_transport(handler)))


def test_empty_results_is_provider_error():
    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(
            5, transport=_transport(_json_handler({"response_code": 0, "results": []}))))


def test_malformed_item_is_provider_error():
    payload = {"response_code": 0, "results": [{"question": "Missing answers"}]}
    with pytest.raises(ProviderError):
        asyncio.run(fetch_trivia_items(5, transport=_transport(_json_handler(payload))))


def test_load_question_set_builds_shuffled_questions():
    questions = asyncio.run(load_question_set(
        2, rng=random.Random(5), transport=_transport(_json_handler(_PAYLOAD))))
    assert len(questions) == 2
    assert questions[0].correct_answer == "William Shakespeare"
    assert sorted(questions[1].choices) == ["22", "3", "4", "5"]


def test_sample_question_set_is_valid():
    questions = load_sample_question_set(random.Random(1))
    assert len(questions) == len(SAMPLE_ITEMS)
    for q in questions:
        assert q.correct_answer in q.choices
