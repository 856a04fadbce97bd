"""
errors.py

퀴즈 코어가 던지는 예외 계층.
UI / API 계층은 이 예외들만 잡아서 사용자 알림으로 변환한다.
"""


class QuizError(Exception):
    """퀴즈 코어 예외의 공통 부모."""


class ProviderError(QuizError):
    """문제 공급처(Open Trivia DB 등) 호출 실패 또는 문제 0개."""


class ValidationError(QuizError):
    """입장 화면 입력(이메일 등) 형식 오류."""


class InvalidOperation(QuizError):
    """
    현재 단계(phase)나 인덱스 범위에서 허용되지 않는 조작.
    UI 배선 결함이므로 상태를 건드리지 않고 즉시 거부한다.
    """
