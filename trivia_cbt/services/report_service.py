"""
services/report_service.py

채점 및 결과 리포트 생성 비즈니스 로직.
순수 Python 함수로 구성 — UI 코드, 세션 상태 변경 없음.
"""

from typing import List

from trivia_cbt.models.report_model import Report, ReportEntry
from trivia_cbt.models.session_state import QuizState


def build_report(state: QuizState) -> Report:
    """
    제출된 세션을 채점하여 Report 를 반환한다.

    정답 판정 기준: 사용자가 고른 보기 문자열 == question.correct_answer (대소문자 구분).
    응답하지 않은 문제는 항상 오답으로 처리.

    Args:
        state: 채점 대상 세션. 읽기만 한다.

    Returns:
        문제 순서대로의 ReportEntry 리스트와 {correct, total} 요약을 담은 Report.
    """
    entries: List[ReportEntry] = []
    correct = 0

    for idx, q in enumerate(state.questions):
        user_answer = state.answer_text(idx)
        is_correct = user_answer is not None and user_answer == q.correct_answer
        if is_correct:
            correct += 1
        entries.append(
            ReportEntry(
                number=idx + 1,
                question_text=q.text,
                user_answer=user_answer,
                correct_answer=q.correct_answer,
                is_correct=is_correct,
            )
        )

    return Report(entries=tuple(entries), correct=correct, total=len(state.questions))


def get_incorrect_entries(report: Report) -> List[ReportEntry]:
    """오답(미응답 포함) 항목만 원래 순서대로 반환한다 (오답 노트용)."""
    return [e for e in report.entries if not e.is_correct]
