import random
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ProviderItem(BaseModel):
    """
    문제 공급처가 돌려주는 원본 문항 1개.
    HTML 엔티티 디코딩이 끝난 평문이어야 한다.
    """
    question_text: str = Field(
        ...,
        min_length=1,
        description="발문"
    )
    correct_answer_text: str = Field(
        ...,
        description="정답 보기 문자열"
    )
    incorrect_answer_texts: List[str] = Field(
        ...,
        min_length=1,
        description="오답(오답 보기) 문자열 리스트"
    )


class Question(BaseModel):
    """
    세션 중 변하지 않는 객관식 문제.
    choices 순서는 생성 시점에 한 번만 섞이고 이후 고정된다.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="문제 본문"
    )
    choices: Tuple[str, ...] = Field(
        ...,
        description="보기 목록 (화면 표시 순서, 불변 튜플)"
    )
    correct_answer: str = Field(
        ...,
        description="정답 문자열. choices 중 하나와 문자열이 같아야 한다."
    )

    @field_validator('choices')
    @classmethod
    def validate_choices_length(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """
        검증 로직 1: 보기는 최소 2개 이상이어야 한다.
        """
        if len(v) < 2:
            raise ValueError("보기(choices)는 최소 2개 이상의 항목이 필요합니다.")
        return v

    @model_validator(mode='after')
    def validate_answer_in_choices(self) -> 'Question':
        """
        검증 로직 2: 정답은 반드시 보기 리스트 안에 있어야 한다.
        같은 문자열의 보기가 중복되어도 제거하지 않는다 (문자열 동등 비교 그대로 유지).
        """
        if self.correct_answer not in self.choices:
            raise ValueError(f"정답('{self.correct_answer}')이 보기 리스트({self.choices})에 존재하지 않습니다.")
        return self

    @classmethod
    def from_item(cls, item: ProviderItem, rng: Optional[random.Random] = None) -> 'Question':
        """공급처 문항 → Question. [정답, *오답] 을 한 번 섞어 choices 를 만든다."""
        rng = rng or random.Random()
        choices = [item.correct_answer_text, *item.incorrect_answer_texts]
        rng.shuffle(choices)
        return cls(
            text=item.question_text,
            choices=choices,
            correct_answer=item.correct_answer_text,
        )


def build_question_set(
    items: List[ProviderItem],
    rng: Optional[random.Random] = None,
) -> tuple[Question, ...]:
    """공급처 문항 리스트로 세션용 문제 세트(불변 튜플)를 만든다."""
    rng = rng or random.Random()
    return tuple(Question.from_item(item, rng) for item in items)
