import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
STATIC_DIR = os.path.join(BASE_DIR, "static")
LOG_FILE = os.path.join(BASE_DIR, "launch.log")

# 서버 설정
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))
DEFAULT_TIMEOUT = 15.0  # 서버 기동 대기 (초)

# 퀴즈 설정
QUIZ_DURATION_SECONDS = int(os.getenv("QUIZ_DURATION_SECONDS", str(30 * 60)))  # 30분
QUESTION_COUNT = int(os.getenv("QUESTION_COUNT", "15"))
TIMER_WARNING_SECONDS = 300  # 5분 미만이면 경고 표시

# 문제 공급처 (Open Trivia DB)
TRIVIA_API_URL = os.getenv("TRIVIA_API_URL", "https://opentdb.com/api.php")
TRIVIA_QUESTION_TYPE = "multiple"
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "10.0"))
