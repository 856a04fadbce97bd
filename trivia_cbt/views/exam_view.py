"""
views/exam_view.py — 퀴즈 풀기 화면

레이아웃:
  - st.sidebar : 타이머 + 문제 번호 그리드 + 최종 제출
  - 메인 영역  : 현재 문제 카드 + 이전 / 다시 보기 / 다음

모든 조작은 QuizController 메서드 호출로만 이루어진다.
"""

from __future__ import annotations

import streamlit as st

from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.views.components import actions
from trivia_cbt.views.components import question_card as qcard
from trivia_cbt.views.components import sidebar as nav
from trivia_cbt.views.components import timer as tmr


def render() -> None:
    """풀이 화면 렌더링."""
    controller: QuizController = st.session_state.controller
    total = controller.total
    current_idx = controller.current_index

    # ── 사이드바 ───────────────────────────────────────────────────────────
    with st.sidebar:
        st.markdown(f"**{st.session_state.candidate}**")
        tmr.render()
        st.divider()
        nav.render(controller)
        st.divider()

        unanswered = total - controller.answered_count
        if unanswered > 0:
            st.caption(f"⚠️ 미응답 문제: {unanswered}개")

        if st.button("최종 제출", key="submit_sidebar", type="primary"):
            if unanswered > 0:
                st.session_state["confirm_submit"] = True
                st.rerun()
            actions.run(controller, controller.submit)

        # 미응답 상태에서 제출 확인
        if st.session_state.get("confirm_submit"):
            st.warning(f"미응답 문제 {unanswered}개가 있습니다. 그래도 제출하시겠습니까?")
            col_yes, col_no = st.columns(2)
            with col_yes:
                if st.button("제출", key="confirm_yes", type="primary"):
                    st.session_state["confirm_submit"] = False
                    actions.run(controller, controller.submit)
            with col_no:
                if st.button("취소", key="confirm_no"):
                    st.session_state["confirm_submit"] = False
                    st.rerun()

    # ── 문제 카드 ─────────────────────────────────────────────────────────
    qcard.render(controller)

    # ── 이전 / 다시 보기 / 다음 ──────────────────────────────────────────
    nav_left, nav_center, nav_right = st.columns([1, 1, 1])

    with nav_left:
        if st.button("← 이전 문제", key="prev_btn",
                     disabled=current_idx == 0, use_container_width=True):
            actions.run(controller, controller.go_to_previous)

    with nav_center:
        flagged = controller.is_flagged(current_idx)
        if st.button("다시 보기 해제" if flagged else "다시 보기", key="flag_btn",
                     use_container_width=True):
            actions.run(controller, controller.toggle_flag)

    with nav_right:
        # 마지막 문제에서는 "다음" 이 제출을 겸하므로 답을 고르기 전에는 막아 둔다
        label = "제출하기 →" if current_idx == total - 1 else "다음 문제 →"
        if st.button(label, key="next_btn", type="primary",
                     disabled=not controller.can_advance, use_container_width=True):
            actions.run(controller, controller.go_to_next)
