"""
services/sample_questions.py

네트워크 없이 체험할 수 있는 샘플 문제 세트.
"""

import random
from typing import List, Optional

from trivia_cbt.models.question_model import ProviderItem, Question, build_question_set

SAMPLE_ITEMS: List[ProviderItem] = [
    ProviderItem(
        question_text="What is the chemical symbol for gold?",
        correct_answer_text="Au",
        incorrect_answer_texts=["Ag", "Gd", "Go"],
    ),
    ProviderItem(
        question_text="Which planet is known as the Red Planet?",
        correct_answer_text="Mars",
        incorrect_answer_texts=["Venus", "Jupiter", "Mercury"],
    ),
    ProviderItem(
        question_text="Who painted the Mona Lisa?",
        correct_answer_text="Leonardo da Vinci",
        incorrect_answer_texts=["Michelangelo", "Raphael", "Donatello"],
    ),
    ProviderItem(
        question_text="What is the largest ocean on Earth?",
        correct_answer_text="Pacific Ocean",
        incorrect_answer_texts=["Atlantic Ocean", "Indian Ocean", "Arctic Ocean"],
    ),
    ProviderItem(
        question_text="In computing, what does \"CPU\" stand for?",
        correct_answer_text="Central Processing Unit",
        incorrect_answer_texts=["Central Process Unit", "Computer Personal Unit", "Central Processor Utility"],
    ),
    ProviderItem(
        question_text="How many sides does a hexagon have?",
        correct_answer_text="6",
        incorrect_answer_texts=["5", "7", "8"],
    ),
    ProviderItem(
        question_text="Which language has the most native speakers?",
        correct_answer_text="Mandarin Chinese",
        incorrect_answer_texts=["English", "Spanish", "Hindi"],
    ),
    ProviderItem(
        question_text="What year did the first human land on the Moon?",
        correct_answer_text="1969",
        incorrect_answer_texts=["1965", "1971", "1959"],
    ),
    ProviderItem(
        question_text="Which gas do plants absorb from the atmosphere?",
        correct_answer_text="Carbon dioxide",
        incorrect_answer_texts=["Oxygen", "Nitrogen", "Hydrogen"],
    ),
    ProviderItem(
        question_text="What is the capital city of Australia?",
        correct_answer_text="Canberra",
        incorrect_answer_texts=["Sydney", "Melbourne", "Perth"],
    ),
]


def load_sample_question_set(rng: Optional[random.Random] = None) -> tuple[Question, ...]:
    return build_question_set(SAMPLE_ITEMS, rng)
