"""
streamlit_app.py — Streamlit 화면 진입점

실행: streamlit run streamlit_app.py

페이지 전환:
  home(입장) → guidelines(안내) → exam(풀이) → result(결과)
퀴즈 상태는 st.session_state.controller (QuizController) 한 곳에만 둔다.
"""

import logging

import streamlit as st

from trivia_cbt.models.session_state import Phase
from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.views import exam_view, home_view, result_view

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Trivia CBT", page_icon="📝", layout="wide")


def _init_state() -> None:
    defaults = {
        "page": "home",
        "candidate": "",
        "controller": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state.controller is None:
        st.session_state.controller = QuizController()


def main() -> None:
    _init_state()
    controller: QuizController = st.session_state.controller
    controller.sync_clock()

    # 시간 만료 등으로 제출되었으면 결과 화면으로
    if controller.phase is Phase.SUBMITTED:
        st.session_state.page = "result"

    page = st.session_state.page
    if page == "exam" and controller.phase is Phase.IN_PROGRESS:
        exam_view.render()
    elif page == "result" and controller.report is not None:
        result_view.render()
    else:
        home_view.render()


main()
