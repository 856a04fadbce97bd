"""
views/components/actions.py

버튼 콜백 공통 처리: 컨트롤러 조작 → 제출되었으면 결과 페이지 → 재실행.
"""

import streamlit as st

from trivia_cbt.errors import InvalidOperation
from trivia_cbt.models.session_state import Phase
from trivia_cbt.services.quiz_controller import QuizController


def run(controller: QuizController, operation, *args) -> None:
    try:
        operation(*args)
    except InvalidOperation:
        # 조작 직전에 시간이 만료되어 제출된 경우만 허용
        if controller.phase is not Phase.SUBMITTED:
            raise
    if controller.phase is Phase.SUBMITTED:
        st.session_state.page = "result"
    st.rerun()
