"""
views/result_view.py — 결과 화면

표시 내용:
  - 점수 (정답 수 / 전체, 100점 환산)
  - 통계 요약 (정답, 오답, 미응답)
  - 문제별 결과 (내 답 vs 정답)
  - 처음으로 버튼
"""

from __future__ import annotations

import streamlit as st

from trivia_cbt.models.report_model import Report
from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.services.report_service import get_incorrect_entries

_REASON_LABELS = {
    "manual": "직접 제출",
    "last_question": "마지막 문제에서 제출",
    "timeout": "시간 종료로 자동 제출",
}


def _restart() -> None:
    """세션을 초기화하고 입장 화면으로 돌아간다."""
    st.session_state.controller.restart()
    st.session_state.candidate = ""
    # 이전 라디오/입력 위젯 상태 정리
    stale = [k for k in st.session_state if k.startswith("radio_") or k == "email_input"]
    for k in stale:
        del st.session_state[k]
    st.session_state.page = "home"


def render() -> None:
    """결과 화면 렌더링."""
    controller: QuizController = st.session_state.controller
    report: Report = controller.report

    _, col, _ = st.columns([0.8, 2.5, 0.8])
    with col:
        st.markdown(
            f"<p class='score-big'>{report.correct} / {report.total}</p>",
            unsafe_allow_html=True,
        )
        st.caption(f"{report.percent:.1f}점 · {_REASON_LABELS.get(controller.submit_reason, '')}")

        s1, s2, s3 = st.columns(3)
        s1.metric("정답", report.correct)
        s2.metric("오답", report.incorrect)
        s3.metric("미응답", report.unanswered)

        st.button("처음으로", key="restart_btn", type="primary",
                  use_container_width=True, on_click=_restart)

        all_tab, wrong_tab = st.tabs(["전체 결과", f"오답 노트 ({len(get_incorrect_entries(report))})"])
        with all_tab:
            for entry in report.entries:
                _render_entry(entry)
        with wrong_tab:
            wrong = get_incorrect_entries(report)
            if not wrong:
                st.success("모든 문제를 맞혔습니다!")
            for entry in wrong:
                _render_entry(entry)


def _render_entry(entry) -> None:
    mark = "O" if entry.is_correct else "X"
    with st.expander(f"{mark} {entry.number}. {entry.question_text}", expanded=False):
        color = "#065f46" if entry.is_correct else "#991b1b"
        st.markdown(
            f"<p style='color:{color};'>내 답: {entry.user_answer_display}</p>"
            f"<p style='color:#065f46;'>정답: {entry.correct_answer}</p>",
            unsafe_allow_html=True,
        )
