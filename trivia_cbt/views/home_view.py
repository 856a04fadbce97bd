"""
views/home_view.py — 입장 / 안내 화면

기능:
  - 이메일 입력 및 검증 (통과해야 안내 화면으로 이동)
  - 안내문 표시 후 "시작" (Open Trivia DB) 또는 "샘플 문제로 시작"
  - 문제 조회 실패 시 알림을 띄우고 입장 화면에 머무름
"""

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from config import QUESTION_COUNT
from trivia_cbt.errors import InvalidOperation, ProviderError, ValidationError
from trivia_cbt.models.session_state import Phase
from trivia_cbt.services.entry_gate import build_guidelines, validate_email
from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.services.sample_questions import load_sample_question_set
from trivia_cbt.services.trivia_provider import load_question_set

logger = logging.getLogger(__name__)


def _start(sample: bool) -> None:
    controller: QuizController = st.session_state.controller
    try:
        with st.spinner("문제를 불러오는 중입니다..."):
            if sample:
                questions = load_sample_question_set()
            else:
                questions = asyncio.run(load_question_set(QUESTION_COUNT))
    except ProviderError as e:
        st.session_state.page = "home"
        st.session_state.flash = str(e)
        return

    try:
        controller.start(questions)
    except InvalidOperation as e:
        logger.warning(f"퀴즈 시작 거부: {e}")
        st.session_state.flash = str(e)
        # 이미 진행 중이면 (버튼 중복 클릭 등) 풀이 화면으로 보낸다
        st.session_state.page = "exam" if controller.phase is Phase.IN_PROGRESS else "home"
        return
    st.session_state.page = "exam"


def _render_entry() -> None:
    st.markdown('<p class="cbt-title">Trivia CBT</p>', unsafe_allow_html=True)
    email = st.text_input(
        "이메일",
        placeholder="you@example.com",
        key="email_input",
    )
    if st.button("계속 →", type="primary", key="continue_btn"):
        try:
            st.session_state.candidate = validate_email(email)
        except ValidationError as e:
            st.error(str(e))
            return
        st.session_state.page = "guidelines"
        st.rerun()


def _render_guidelines() -> None:
    controller: QuizController = st.session_state.controller
    st.markdown(f"**응시자**: {st.session_state.candidate}")
    st.info(build_guidelines(QUESTION_COUNT, controller.duration_seconds))

    left, right = st.columns(2)
    with left:
        st.button(
            "시험 시작 →",
            key="start_quiz",
            type="primary",
            use_container_width=True,
            on_click=_start,
            args=(False,),
        )
    with right:
        st.button(
            "샘플 문제로 시작",
            key="start_sample",
            use_container_width=True,
            on_click=_start,
            args=(True,),
        )


def render() -> None:
    """입장/안내 화면 렌더링."""
    flash = st.session_state.pop("flash", None)
    if flash:
        st.error(flash)

    _, col, _ = st.columns([1, 2.2, 1])
    with col:
        if st.session_state.page == "guidelines" and st.session_state.candidate:
            _render_guidelines()
        else:
            st.session_state.page = "home"
            _render_entry()
