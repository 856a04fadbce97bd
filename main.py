"""
main.py — 퀴즈 데스크톱 앱 진입점

로컬 uvicorn 서버를 백그라운드 스레드로 띄우고 브라우저(앱 모드)를 연다.
"""

import logging
import os
import socket
import subprocess
import sys
import threading
import time
import webbrowser

from config import BASE_DIR, DEFAULT_HOST, DEFAULT_TIMEOUT, LOG_FILE

# ── 로깅 설정 ────────────────────────────────────────────────────────────────

def configure_logging() -> None:
    try:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s [%(levelname)s] %(message)s',
            handlers=[
                logging.FileHandler(LOG_FILE, encoding='utf-8'),
                logging.StreamHandler(sys.stdout),
            ],
        )
    except PermissionError:
        # 로그 파일을 열 수 없으면 콘솔 출력만 사용
        logging.basicConfig(level=logging.INFO)


logger = logging.getLogger(__name__)

# ── 서버 및 네트워크 유틸 ───────────────────────────────────────────────────

def _find_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((DEFAULT_HOST, 0))
        return s.getsockname()[1]


def _wait_for_server(port: int, timeout: float = DEFAULT_TIMEOUT) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            with socket.create_connection((DEFAULT_HOST, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.1)
    return False


def _open_browser(url: str) -> None:
    """크롬/엣지가 있으면 앱 모드 창으로, 없으면 기본 브라우저로 연다."""
    candidates = [
        r"C:\Program Files\Google\Chrome\Application\chrome.exe",
        r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
        r"C:\Program Files\Microsoft\Edge\Application\msedge.exe",
        "/usr/bin/google-chrome",
        "/usr/bin/chromium",
    ]
    for path in candidates:
        if os.path.exists(path):
            logger.info(f"브라우저 실행: {path}")
            subprocess.Popen([path, f"--app={url}", "--no-first-run", "--window-size=1100,800"])
            return
    webbrowser.open(url)


def _start_server(port: int) -> None:
    import uvicorn
    from api.app import create_app

    logger.info(f"Uvicorn 서버 시작 - Port: {port}")
    try:
        uvicorn.run(create_app(), host=DEFAULT_HOST, port=port, log_level="warning")
    except Exception:
        logger.exception("서버 오류 발생")


# ── 메인 실행 ────────────────────────────────────────────────────────────────

def main() -> None:
    configure_logging()
    logger.info("=== Trivia CBT Started ===")
    os.chdir(BASE_DIR)

    port = _find_free_port()
    threading.Thread(target=_start_server, args=(port,), daemon=True).start()

    if not _wait_for_server(port):
        logger.error("서버 시작 제한 시간을 초과했습니다.")
        sys.exit(1)

    logger.info("서버 준비 완료. 브라우저를 엽니다.")
    _open_browser(f"http://{DEFAULT_HOST}:{port}")
    try:
        while True:
            time.sleep(10)
    except KeyboardInterrupt:
        logger.info("사용자에 의해 종료되었습니다.")


if __name__ == "__main__":
    main()
