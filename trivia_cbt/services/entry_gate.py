"""
services/entry_gate.py

입장 화면: 응시자 식별 문자열(이메일) 검증과 안내문 생성.
"""

import re

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from trivia_cbt.errors import ValidationError
from trivia_cbt.services.countdown import format_remaining

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Candidate(BaseModel):
    """검증을 통과한 응시자."""
    email: str

    @field_validator('email', mode='before')
    @classmethod
    def validate_email_format(cls, v) -> str:
        if not isinstance(v, str):
            raise ValueError("이메일은 문자열이어야 합니다.")
        v = v.strip()
        if not v or not _EMAIL_PATTERN.match(v):
            raise ValueError("올바른 이메일 주소를 입력해 주세요.")
        return v


def validate_email(raw) -> str:
    """
    입력값을 검증하고 앞뒤 공백을 제거한 이메일을 반환한다.

    Raises:
        ValidationError: 비어 있거나 형식이 맞지 않을 때.
    """
    try:
        return Candidate(email=raw).email
    except PydanticValidationError as e:
        raise ValidationError("올바른 이메일 주소를 입력해 주세요.") from e


def build_guidelines(total_questions: int, duration_seconds: int) -> str:
    """시작 전 안내문."""
    minutes = duration_seconds // 60
    limit = f"{minutes}분" if duration_seconds % 60 == 0 else format_remaining(duration_seconds)
    return (
        f"총 {total_questions}문제를 {limit} 안에 풀어야 합니다. "
        "답은 선택하는 즉시 자동 저장됩니다. "
        "이전/다음 버튼이나 상단 문제 번호를 눌러 자유롭게 이동할 수 있고, "
        "'다시 보기'로 나중에 확인할 문제를 표시할 수 있습니다. "
        "마지막 문제에서 '다음'을 누르면 제출되며, 시간이 다 되면 자동으로 제출됩니다."
    )
