"""
views/components/timer.py

남은 시험 시간을 렌더링하는 컴포넌트.
fragment 로 1초마다 다시 그리면서 컨트롤러 시계를 동기화하고,
만료되어 제출되면 전체 앱을 다시 실행해 결과 화면으로 넘긴다.
"""

import streamlit as st

from config import TIMER_WARNING_SECONDS
from trivia_cbt.models.session_state import Phase
from trivia_cbt.services.countdown import format_remaining
from trivia_cbt.services.quiz_controller import QuizController


@st.fragment(run_every=1)
def render() -> None:
    controller: QuizController = st.session_state.controller
    controller.sync_clock()

    if controller.phase is Phase.SUBMITTED:
        st.session_state.page = "result"
        st.rerun(scope="app")

    remaining = controller.remaining_seconds
    is_warning = remaining < TIMER_WARNING_SECONDS

    css_class = "timer-display timer-warning" if is_warning else "timer-display"
    icon = "⚠️ " if is_warning else "⏱ "
    st.markdown(
        f'<div class="{css_class}">{icon}{format_remaining(remaining)}</div>',
        unsafe_allow_html=True,
    )
