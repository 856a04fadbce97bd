"""
api/session.py — 브라우저별 인메모리 세션 (쿠키 기반)

브라우저마다 UUID 세션 ID를 발급하고, 세션마다 독립된 QuizController 를 둔다.
마지막 접근 후 TTL(기본 1시간)이 지나면 만료. 새로고침/만료 후 복구는 하지 않는다.
"""

import threading
import time
import uuid
from dataclasses import dataclass, field

from trivia_cbt.services.quiz_controller import QuizController

SESSION_TTL = 3600  # 1시간


@dataclass
class WebSession:
    candidate: str = ""
    controller: QuizController = field(default_factory=QuizController)
    touched_at: float = field(default_factory=time.time)

    def expired(self, now: float) -> bool:
        return now - self.touched_at > SESSION_TTL


_lock = threading.Lock()
_sessions: dict[str, WebSession] = {}


def create_session() -> str:
    """새 세션을 만들고 세션 ID를 반환."""
    sid = uuid.uuid4().hex
    with _lock:
        _sessions[sid] = WebSession()
    return sid


def get_session(sid: str | None) -> WebSession | None:
    """세션 ID로 세션을 찾는다. 없거나 만료되었으면 None (만료분은 즉시 삭제)."""
    if not sid:
        return None
    now = time.time()
    with _lock:
        ws = _sessions.get(sid)
        if ws is None:
            return None
        if ws.expired(now):
            del _sessions[sid]
            return None
        ws.touched_at = now
        return ws


def cleanup_expired() -> int:
    """만료된 세션을 정리. 제거된 수 반환."""
    now = time.time()
    with _lock:
        expired = [sid for sid, ws in _sessions.items() if ws.expired(now)]
        for sid in expired:
            del _sessions[sid]
    return len(expired)
