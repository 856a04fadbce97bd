"""
services/trivia_provider.py

문제 공급처 어댑터 (Open Trivia DB).
Public API:
  - fetch_trivia_items(amount) -> List[ProviderItem]   : 원격 문제 조회 (async, httpx)
  - load_question_set(amount, rng) -> tuple[Question]   : 조회 + 보기 섞기

설계 원칙:
- 실패(네트워크, HTTP 상태, response_code != 0, 잘못된 페이로드, 0문제)는 전부 ProviderError
- 재시도 없음. 사용자가 입장 화면에서 다시 시도한다.
"""

import html
import logging
import random
from typing import List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from config import PROVIDER_TIMEOUT, QUESTION_COUNT, TRIVIA_API_URL, TRIVIA_QUESTION_TYPE
from trivia_cbt.errors import ProviderError
from trivia_cbt.models.question_model import ProviderItem, Question, build_question_set

logger = logging.getLogger(__name__)

# Open Trivia DB response_code 의미
_RESPONSE_CODES = {
    1: "요청한 수만큼의 문제가 없습니다",
    2: "잘못된 요청 파라미터",
    3: "세션 토큰 없음",
    4: "세션 토큰 소진",
    5: "요청 한도 초과",
}


def _decode_item(raw: dict) -> ProviderItem:
    """HTML 엔티티가 섞인 원본 문항 → 평문 ProviderItem."""
    return ProviderItem(
        question_text=html.unescape(raw["question"]),
        correct_answer_text=html.unescape(raw["correct_answer"]),
        incorrect_answer_texts=[html.unescape(a) for a in raw["incorrect_answers"]],
    )


async def fetch_trivia_items(
    amount: int = QUESTION_COUNT,
    *,
    url: str = TRIVIA_API_URL,
    timeout: float = PROVIDER_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ProviderItem]:
    """
    Open Trivia DB 에서 객관식 문제 amount 개를 가져온다.

    Args:
        amount:    요청 문제 수.
        url:       API 주소.
        timeout:   요청 타임아웃 (초).
        transport: 테스트용 httpx transport 주입.

    Raises:
        ProviderError: 조회 실패 또는 문제 0개.
    """
    params = {"amount": amount, "type": TRIVIA_QUESTION_TYPE}
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"문제 조회 HTTP 오류: {e.response.status_code}")
        raise ProviderError("문제를 불러오지 못했습니다. 잠시 후 다시 시도해 주세요.") from e
    except httpx.HTTPError as e:
        logger.error(f"문제 조회 네트워크 오류: {type(e).__name__}: {e}")
        raise ProviderError("문제를 불러오는 중 오류가 발생했습니다. 인터넷 연결을 확인해 주세요.") from e
    except ValueError as e:
        logger.error(f"문제 조회 응답 JSON 파싱 실패: {e}")
        raise ProviderError("문제 응답 형식이 올바르지 않습니다.") from e

    if not isinstance(data, dict):
        raise ProviderError("문제 응답 형식이 올바르지 않습니다.")

    code = data.get("response_code")
    if code != 0:
        logger.error(f"문제 API 오류: response_code={code} ({_RESPONSE_CODES.get(code, '알 수 없음')})")
        raise ProviderError("문제를 불러오지 못했습니다. 잠시 후 다시 시도해 주세요.")

    try:
        items = [_decode_item(raw) for raw in data.get("results") or []]
    except (KeyError, TypeError, PydanticValidationError) as e:
        logger.error(f"문제 항목 변환 실패: {e}")
        raise ProviderError("문제 응답 형식이 올바르지 않습니다.") from e

    if not items:
        raise ProviderError("불러온 문제가 없습니다.")

    logger.info(f"fetch_trivia_items: {len(items)}개 문제 조회 완료")
    return items


async def load_question_set(
    amount: int = QUESTION_COUNT,
    rng: Optional[random.Random] = None,
    **kwargs,
) -> tuple[Question, ...]:
    """원격 조회 후 세션용 문제 세트를 만든다. kwargs 는 fetch_trivia_items 로 전달."""
    items = await fetch_trivia_items(amount, **kwargs)
    try:
        return build_question_set(items, rng)
    except PydanticValidationError as e:
        raise ProviderError("문제 데이터가 올바르지 않습니다.") from e
