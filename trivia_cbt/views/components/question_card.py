"""
views/components/question_card.py

현재 문제를 카드 형태로 렌더링하고 보기 선택을 컨트롤러에 기록하는 컴포넌트.
"""

from __future__ import annotations

import streamlit as st

from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.views.components import actions


def render(controller: QuizController) -> None:
    question = controller.current_question
    idx = controller.current_index
    selected = controller.answers[idx]
    flagged = controller.is_flagged(idx)

    badge = " 🟡 다시 보기" if flagged else ""
    st.markdown(
        f'<span class="question-number-badge">문제 {idx + 1} / {controller.total}</span>{badge}',
        unsafe_allow_html=True,
    )
    st.markdown(f"#### {question.text}")

    # 문제마다 다른 위젯 키를 써야 이전 선택이 섞이지 않는다
    choice = st.radio(
        "보기를 선택하세요",
        options=list(range(len(question.choices))),
        index=selected,
        format_func=lambda i: question.choices[i],
        key=f"radio_{idx}",
        label_visibility="collapsed",
    )
    if choice is not None and choice != selected:
        actions.run(controller, controller.select_answer, choice)
