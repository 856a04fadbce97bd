"""
models/session_state.py

퀴즈 진행 상태(세션)를 담는 모델.
Pydantic BaseModel 기반 — 직렬화 및 타입 안전성 확보.
UI 코드 없음. 상태 변경은 services/quiz_controller.py 만 수행한다.
"""

from enum import Enum
from typing import List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from trivia_cbt.models.question_model import Question


class Phase(str, Enum):
    """세션 생명주기 단계."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


class NavStatus(str, Enum):
    """문제 번호 그리드에 표시되는 상태. 선언 순서가 곧 우선순위."""
    CURRENT = "current"
    FLAGGED = "flagged"
    ATTEMPTED = "attempted"
    VISITED = "visited"
    UNSEEN = "unseen"


class QuizState(BaseModel):
    """
    사용자의 퀴즈 세션 전체 상태를 표현하는 모델.

    Attributes:
        questions:     문제 세트. 시작 시 한 번 설정되고 순서/길이 고정.
        answers:       답안지. answers[i] 는 선택한 보기 인덱스, 미응답이면 None.
        current_index: 현재 화면에 표시 중인 문제 인덱스 (0-based).
        visited:       한 번이라도 표시된 문제 인덱스 집합.
        attempted:     답이 기록된 문제 인덱스 집합.
        flagged:       "다시 보기" 로 표시한 문제 인덱스 집합.
        phase:         세션 단계.
    """

    questions: Tuple[Question, ...] = Field(
        default=(),
        description="문제 세트 (불변)"
    )
    answers: List[Optional[int]] = Field(
        default_factory=list,
        description="답안지. 미응답은 None"
    )
    current_index: int = Field(
        default=0,
        ge=0,
        description="현재 문제 인덱스 (0-based)"
    )
    visited: Set[int] = Field(default_factory=set)
    attempted: Set[int] = Field(default_factory=set)
    flagged: Set[int] = Field(default_factory=set)
    phase: Phase = Field(
        default=Phase.NOT_STARTED,
        description="세션 단계"
    )

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    def answer_text(self, index: int) -> Optional[str]:
        """index 번 문제에 대해 사용자가 고른 보기 문자열. 미응답이면 None."""
        choice = self.answers[index]
        if choice is None:
            return None
        return self.questions[index].choices[choice]
