"""
services/countdown.py

퀴즈 전체 제한 시간을 관리하는 카운트다운 타이머.

상태: STOPPED ↔ RUNNING
  - start()  : STOPPED → RUNNING (이미 돌고 있으면 먼저 정지 후 재시작)
  - tick()   : 1초 경과 처리. 0 도달 시 스스로 정지하고 on_expire 호출
  - sync()   : clock 기준으로 밀린 초 수만큼 tick() 을 반복 (실제 시계 구동용)
  - stop()   : RUNNING → STOPPED

UI 는 요청/재실행 때마다 sync() 를 호출하고,
테스트는 tick() 을 직접 호출하거나 가짜 clock 을 주입한다.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


def format_remaining(seconds: int) -> str:
    """남은 초 → "MM:SS"."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownTimer:
    """1초 단위로 줄어드는 단일 카운트다운."""

    def __init__(
        self,
        duration_seconds: int,
        on_expire: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError("제한 시간은 1초 이상이어야 합니다.")
        self.duration_seconds = duration_seconds
        self.on_expire = on_expire
        self._clock = clock
        self._remaining = duration_seconds
        self._state = TimerState.STOPPED
        self._last_tick_at: Optional[float] = None

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    def start(self, duration_seconds: Optional[int] = None) -> None:
        # 동시에 두 개가 돌지 않도록 기존 카운트다운을 먼저 정리
        self.stop()
        if duration_seconds is not None:
            self.duration_seconds = duration_seconds
        self._remaining = self.duration_seconds
        self._last_tick_at = self._clock()
        self._state = TimerState.RUNNING
        logger.debug(f"타이머 시작: {self._remaining}초")

    def stop(self) -> None:
        self._state = TimerState.STOPPED
        self._last_tick_at = None

    def reset(self) -> None:
        """정지 후 남은 시간을 초기값으로 되돌린다."""
        self.stop()
        self._remaining = self.duration_seconds

    def tick(self) -> None:
        if not self.is_running:
            return
        self._remaining -= 1
        if self._last_tick_at is not None:
            self._last_tick_at += 1
        if self._remaining <= 0:
            self._remaining = 0
            self.stop()
            logger.info("타이머 만료")
            if self.on_expire is not None:
                self.on_expire()

    def sync(self) -> int:
        """
        마지막 tick 이후 clock 상에서 지난 '온전한 초' 만큼 tick 한다.

        Returns:
            실제로 처리한 tick 수.
        """
        if not self.is_running or self._last_tick_at is None:
            return 0
        elapsed = int(self._clock() - self._last_tick_at)
        ticks = 0
        while ticks < elapsed and self.is_running:
            self.tick()
            ticks += 1
        return ticks
