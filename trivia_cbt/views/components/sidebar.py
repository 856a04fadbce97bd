"""
views/components/sidebar.py

문제 번호 네비게이션 그리드 컴포넌트.
각 번호를 누르면 해당 문제로 바로 이동한다.
"""

from __future__ import annotations

import streamlit as st

from trivia_cbt.models.session_state import NavStatus
from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.views.components import actions

_STATUS_ICONS = {
    NavStatus.CURRENT: "🔵",
    NavStatus.FLAGGED: "🟡",
    NavStatus.ATTEMPTED: "🟢",
    NavStatus.VISITED: "🔴",
    NavStatus.UNSEEN: "⚪",
}

_LEGEND = [
    (NavStatus.CURRENT, "현재"),
    (NavStatus.FLAGGED, "다시 보기"),
    (NavStatus.ATTEMPTED, "답함"),
    (NavStatus.VISITED, "미답 (방문)"),
    (NavStatus.UNSEEN, "미방문"),
]


def render(controller: QuizController) -> None:
    """사이드바에 진행률과 문제 번호 버튼 그리드를 그린다."""
    total = controller.total
    answered = controller.answered_count

    st.markdown(f"진행률 **{answered}** / {total}")
    st.progress(answered / total if total > 0 else 0)

    cols_per_row = 5
    statuses = controller.statuses()

    for row_start in range(0, total, cols_per_row):
        cols = st.columns(cols_per_row)
        for col_idx, status in enumerate(statuses[row_start : row_start + cols_per_row]):
            q_idx = row_start + col_idx
            with cols[col_idx]:
                if st.button(
                    f"{_STATUS_ICONS[status]}{q_idx + 1}",
                    key=f"nav_{q_idx}",
                    help=f"문제 {q_idx + 1}번으로 이동",
                ):
                    actions.run(controller, controller.go_to, q_idx)

    st.caption("  ".join(f"{_STATUS_ICONS[s]} {label}" for s, label in _LEGEND))
