"""
api/app.py — FastAPI 앱 인스턴스 + 세션 미들웨어 + static 파일 서빙
"""

import logging
import os
import threading
import time

from fastapi import FastAPI, Request, Response
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

import api.session as session
from api.routes import router
from config import STATIC_DIR

logger = logging.getLogger(__name__)

SESSION_COOKIE = "quiz_session"
_CLEANUP_INTERVAL = 300  # 5분


def create_app(cleanup: bool = True) -> FastAPI:
    app = FastAPI(title="Trivia CBT", docs_url=None, redoc_url=None)

    # 세션 미들웨어: 쿠키에서 세션 ID를 읽고, 없거나 만료되었으면 새로 발급
    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if session.get_session(sid) is None:
            sid = session.create_session()

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=sid,
            httponly=True,
            samesite="lax",
            max_age=session.SESSION_TTL,
        )
        return response

    app.include_router(router)

    if os.path.isdir(STATIC_DIR):
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # 루트 → index.html
    @app.get("/")
    async def serve_index():
        index_path = os.path.join(STATIC_DIR, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"error": "index.html not found"}

    if cleanup:
        def _cleanup_loop():
            while True:
                time.sleep(_CLEANUP_INTERVAL)
                removed = session.cleanup_expired()
                if removed:
                    logger.info(f"만료 세션 {removed}개 정리")

        threading.Thread(target=_cleanup_loop, daemon=True).start()

    return app
