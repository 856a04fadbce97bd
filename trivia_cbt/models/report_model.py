"""
models/report_model.py

채점 결과 모델. 제출된 세션에서 파생되며 생성 후 변경 불가.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

NOT_ANSWERED = "Not Answered"


class ReportEntry(BaseModel):
    """문제 1개의 채점 결과."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="문제 번호 (1-based 표시용)")
    question_text: str
    user_answer: Optional[str] = Field(
        None,
        description="사용자가 고른 보기 문자열. 미응답이면 None"
    )
    correct_answer: str
    is_correct: bool

    @property
    def answered(self) -> bool:
        return self.user_answer is not None

    @property
    def user_answer_display(self) -> str:
        return self.user_answer if self.user_answer is not None else NOT_ANSWERED


class Report(BaseModel):
    """전체 채점 결과: 문제 순서대로의 ReportEntry 와 요약."""
    model_config = ConfigDict(frozen=True)

    entries: Tuple[ReportEntry, ...] = Field(default=())
    correct: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    @property
    def unanswered(self) -> int:
        return sum(1 for e in self.entries if not e.answered)

    @property
    def incorrect(self) -> int:
        return self.total - self.correct - self.unanswered

    @property
    def percent(self) -> float:
        """100점 만점 환산 점수 (소수점 둘째 자리 반올림)."""
        if not self.total:
            return 0.0
        return round(self.correct / self.total * 100, 2)

    def summary(self) -> dict:
        return {"correct": self.correct, "total": self.total}
