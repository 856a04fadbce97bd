"""
services/quiz_controller.py

퀴즈 세션의 유일한 변경 주체.

- 단계 전이: NOT_STARTED → IN_PROGRESS → SUBMITTED (restart 로 NOT_STARTED 복귀)
- 문제 이동 / 답 기록 / 다시 보기 표시
- 제한 시간 만료 시 강제 제출
- 변경 후 on_change, 제출 시 on_submit(report) 알림

모든 조작은 단일 스레드에서 순서대로 실행된다고 가정한다 (락 없음).
"""

import logging
import time
from typing import Callable, FrozenSet, List, Optional, Sequence

from config import QUIZ_DURATION_SECONDS
from trivia_cbt.errors import InvalidOperation
from trivia_cbt.models.question_model import Question
from trivia_cbt.models.report_model import Report
from trivia_cbt.models.session_state import NavStatus, Phase, QuizState
from trivia_cbt.services.countdown import CountdownTimer, format_remaining
from trivia_cbt.services.navigation import compute_statuses
from trivia_cbt.services.report_service import build_report

logger = logging.getLogger(__name__)

ChangeListener = Callable[[QuizState], None]
SubmitListener = Callable[[Report], None]


class QuizController:
    """세션 상태 + 카운트다운 타이머를 묶어 관리한다."""

    def __init__(
        self,
        duration_seconds: int = QUIZ_DURATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._state = QuizState()
        self._timer = CountdownTimer(
            duration_seconds,
            on_expire=self._on_timer_expired,
            clock=clock,
        )
        self._report: Optional[Report] = None
        self._submit_reason: Optional[str] = None
        self._change_listeners: List[ChangeListener] = []
        self._submit_listeners: List[SubmitListener] = []

    # ── 알림 ────────────────────────────────────────────────────────────────

    def add_listener(
        self,
        on_change: Optional[ChangeListener] = None,
        on_submit: Optional[SubmitListener] = None,
    ) -> None:
        if on_change is not None:
            self._change_listeners.append(on_change)
        if on_submit is not None:
            self._submit_listeners.append(on_submit)

    def _notify_change(self) -> None:
        for listener in self._change_listeners:
            listener(self.state)

    # ── 읽기 전용 접근자 ────────────────────────────────────────────────────

    @property
    def state(self) -> QuizState:
        """세션 상태의 복사본. 수정해도 컨트롤러에는 반영되지 않는다."""
        return self._state.model_copy(deep=True)

    @property
    def visited(self) -> FrozenSet[int]:
        return frozenset(self._state.visited)

    @property
    def attempted(self) -> FrozenSet[int]:
        return frozenset(self._state.attempted)

    @property
    def flagged(self) -> FrozenSet[int]:
        return frozenset(self._state.flagged)

    def is_flagged(self, index: int) -> bool:
        return index in self._state.flagged

    @property
    def can_advance(self) -> bool:
        """마지막 문제는 답을 고르기 전까지 "다음"(=제출)을 막는다."""
        state = self._state
        if state.phase is not Phase.IN_PROGRESS:
            return False
        is_last = state.current_index == state.total - 1
        return not (is_last and state.answers[state.current_index] is None)

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def current_question(self) -> Optional[Question]:
        return self._state.current_question

    @property
    def answers(self) -> List[Optional[int]]:
        return list(self._state.answers)

    @property
    def total(self) -> int:
        return self._state.total

    @property
    def answered_count(self) -> int:
        return len(self._state.attempted)

    @property
    def remaining_seconds(self) -> int:
        return self._timer.remaining_seconds

    @property
    def duration_seconds(self) -> int:
        return self._timer.duration_seconds

    @property
    def report(self) -> Optional[Report]:
        return self._report

    @property
    def submit_reason(self) -> Optional[str]:
        return self._submit_reason

    def statuses(self) -> List[NavStatus]:
        return compute_statuses(self._state)

    # ── 가드 ────────────────────────────────────────────────────────────────

    def _require_in_progress(self, operation: str) -> None:
        # 만료가 밀려 있으면 먼저 반영 (만료 시 여기서 제출됨)
        self.sync_clock()
        if self._state.phase is not Phase.IN_PROGRESS:
            logger.warning(f"{operation}: 허용되지 않는 단계 ({self._state.phase.value})")
            raise InvalidOperation(
                f"{operation}: 진행 중인 퀴즈가 없습니다 (현재 단계: {self._state.phase.value})."
            )

    def _visit(self, index: int) -> None:
        self._state.current_index = index
        self._state.visited.add(index)

    # ── 조작 ────────────────────────────────────────────────────────────────

    def start(self, question_set: Sequence[Question]) -> None:
        if self._state.phase is not Phase.NOT_STARTED:
            raise InvalidOperation("start: 이미 시작된 세션입니다. restart 후 다시 시작하세요.")
        if not question_set:
            raise InvalidOperation("start: 문제 세트가 비어 있습니다.")

        questions = tuple(question_set)
        self._state = QuizState(
            questions=questions,
            answers=[None] * len(questions),
            current_index=0,
            visited={0},
            phase=Phase.IN_PROGRESS,
        )
        self._report = None
        self._submit_reason = None
        self._timer.start()
        logger.info(f"퀴즈 시작: {len(questions)}문제, 제한 시간 {format_remaining(self._timer.remaining_seconds)}")
        self._notify_change()

    def select_answer(self, choice_index: int) -> None:
        self._require_in_progress("select_answer")
        question = self._state.current_question
        if not 0 <= choice_index < len(question.choices):
            raise InvalidOperation(
                f"select_answer: 보기 인덱스 {choice_index} 가 범위(0~{len(question.choices) - 1})를 벗어났습니다."
            )
        idx = self._state.current_index
        self._state.answers[idx] = choice_index
        self._state.attempted.add(idx)
        self._notify_change()

    def go_to_next(self) -> None:
        self._require_in_progress("go_to_next")
        if self._state.current_index < self._state.total - 1:
            self._visit(self._state.current_index + 1)
            self._notify_change()
        else:
            # 마지막 문제에서의 "다음" 은 제출로 동작
            self.submit(reason="last_question")

    def go_to_previous(self) -> None:
        self._require_in_progress("go_to_previous")
        if self._state.current_index > 0:
            self._visit(self._state.current_index - 1)
            self._notify_change()

    def go_to(self, index: int) -> None:
        self._require_in_progress("go_to")
        if not 0 <= index < self._state.total:
            raise InvalidOperation(
                f"go_to: 문제 인덱스 {index} 가 범위(0~{self._state.total - 1})를 벗어났습니다."
            )
        self._visit(index)
        self._notify_change()

    def toggle_flag(self) -> bool:
        """현재 문제의 다시 보기 표시를 뒤집고, 표시 여부를 반환한다."""
        self._require_in_progress("toggle_flag")
        idx = self._state.current_index
        if idx in self._state.flagged:
            self._state.flagged.discard(idx)
        else:
            self._state.flagged.add(idx)
        self._notify_change()
        return idx in self._state.flagged

    def submit(self, reason: str = "manual") -> Optional[Report]:
        """
        세션을 제출하고 채점한다.

        진행 중이 아니면 (이미 제출됨 포함) 아무 것도 하지 않고 None 을 반환한다.
        수동 제출과 시간 만료가 겹쳐도 리포트는 한 번만 생성된다.
        """
        if self._state.phase is not Phase.IN_PROGRESS:
            logger.debug(f"submit({reason}) 무시: 단계 {self._state.phase.value}")
            return None

        self._timer.stop()
        self._state.phase = Phase.SUBMITTED
        self._submit_reason = reason
        self._report = build_report(self._state)
        logger.info(
            f"퀴즈 제출({reason}): {self._report.correct}/{self._report.total} 정답, "
            f"남은 시간 {format_remaining(self._timer.remaining_seconds)}"
        )
        self._notify_change()
        for listener in self._submit_listeners:
            listener(self._report)
        return self._report

    def restart(self) -> None:
        """모든 세션 필드와 타이머를 시작 전 상태로 되돌린다."""
        self._timer.reset()
        self._state = QuizState()
        self._report = None
        self._submit_reason = None
        logger.info("퀴즈 초기화")
        self._notify_change()

    # ── 시간 ────────────────────────────────────────────────────────────────

    def sync_clock(self) -> None:
        """실제 시계 기준으로 밀린 tick 을 반영한다. 만료 시 자동 제출."""
        if self._state.phase is Phase.IN_PROGRESS:
            self._timer.sync()

    def tick(self) -> None:
        """1초 경과를 직접 반영한다 (테스트/외부 구동용)."""
        if self._state.phase is Phase.IN_PROGRESS:
            self._timer.tick()

    def _on_timer_expired(self) -> None:
        logger.info("제한 시간 종료 — 자동 제출")
        self.submit(reason="timeout")

    # ── 표시용 스냅샷 ───────────────────────────────────────────────────────

    def snapshot(self) -> dict:
        """프레젠테이션 계층이 그리는 데 필요한 값 전체 (JSON 직렬화 가능)."""
        state = self._state
        question = state.current_question
        return {
            "phase": state.phase.value,
            "total": state.total,
            "current_index": state.current_index,
            "question": None if question is None else {
                "number": state.current_index + 1,
                "text": question.text,
                "choices": list(question.choices),
                "selected": state.answers[state.current_index],
                "flagged": state.current_index in state.flagged,
            },
            "answers": list(state.answers),
            "statuses": [s.value for s in self.statuses()],
            "answered_count": self.answered_count,
            "can_advance": self.can_advance,
            "flagged": sorted(state.flagged),
            "remaining_seconds": self.remaining_seconds,
            "remaining_display": format_remaining(self.remaining_seconds),
            "submit_reason": self._submit_reason,
        }
