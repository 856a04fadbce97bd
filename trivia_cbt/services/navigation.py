"""
services/navigation.py

문제 번호 그리드용 상태 계산. 순수 함수 — 상태 변경 없음.

우선순위 (먼저 맞는 규칙 적용):
  현재 문제 > 다시 보기 표시 > 답함 > 방문함 > 미방문
"""

from typing import List

from trivia_cbt.models.session_state import NavStatus, QuizState


def status_for(index: int, state: QuizState) -> NavStatus:
    if index == state.current_index:
        return NavStatus.CURRENT
    if index in state.flagged:
        return NavStatus.FLAGGED
    if index in state.attempted:
        return NavStatus.ATTEMPTED
    if index in state.visited:
        return NavStatus.VISITED
    return NavStatus.UNSEEN


def compute_statuses(state: QuizState) -> List[NavStatus]:
    """문제 순서대로의 상태 리스트. 문제가 없으면 빈 리스트."""
    return [status_for(i, state) for i in range(state.total)]
