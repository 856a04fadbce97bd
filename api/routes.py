"""
api/routes.py — FastAPI 엔드포인트

HTTP 요청 1건 = 컨트롤러 조작 1건. 상태를 읽는 모든 요청은 먼저 시계를 동기화하므로
브라우저가 /api/state 를 1초마다 폴링하면 시간 만료 시 자동 제출이 반영된다.
"""

import logging
from typing import Callable

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

import api.session as session
from config import QUESTION_COUNT
from trivia_cbt.errors import InvalidOperation, ProviderError, ValidationError
from trivia_cbt.models.report_model import Report
from trivia_cbt.models.session_state import Phase
from trivia_cbt.services.entry_gate import build_guidelines, validate_email
from trivia_cbt.services.quiz_controller import QuizController
from trivia_cbt.services.sample_questions import load_sample_question_set
from trivia_cbt.services.trivia_provider import load_question_set

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class EnterBody(BaseModel):
    email: str

class SelectAnswerBody(BaseModel):
    choice_index: int

class NavigateBody(BaseModel):
    index: int


# ── 헬퍼 ─────────────────────────────────────────────────────────────────────

def _web_session(request: Request) -> session.WebSession:
    ws = session.get_session(request.state.session_id)
    if ws is None:
        raise HTTPException(status_code=404, detail="세션이 만료되었습니다. 새로고침 후 다시 시작해 주세요.")
    return ws


def _controller(request: Request) -> QuizController:
    controller = _web_session(request).controller
    controller.sync_clock()
    return controller


def _apply(controller: QuizController, operation: Callable, *args) -> dict:
    """컨트롤러 조작을 실행하고 최신 스냅샷을 반환. 잘못된 조작은 409."""
    try:
        operation(*args)
    except InvalidOperation as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state_payload(controller)


def _report_to_dict(report: Report) -> dict:
    return {
        "summary": report.summary(),
        "percent": report.percent,
        "incorrect": report.incorrect,
        "unanswered": report.unanswered,
        "entries": [
            {
                "number": e.number,
                "question_text": e.question_text,
                "user_answer": e.user_answer_display,
                "answered": e.answered,
                "correct_answer": e.correct_answer,
                "is_correct": e.is_correct,
            }
            for e in report.entries
        ],
    }


def _state_payload(controller: QuizController) -> dict:
    payload = controller.snapshot()
    if controller.report is not None:
        payload["report"] = _report_to_dict(controller.report)
    return payload


async def _begin(request: Request, loader) -> dict:
    ws = _web_session(request)
    if not ws.candidate:
        raise HTTPException(status_code=400, detail="이메일을 먼저 입력해 주세요.")
    controller = ws.controller
    if controller.phase is not Phase.NOT_STARTED:
        raise HTTPException(status_code=409, detail="이미 진행 중이거나 제출된 퀴즈가 있습니다.")

    try:
        questions = await loader()
    except ProviderError as e:
        raise HTTPException(status_code=503, detail=str(e))

    try:
        controller.start(questions)
    except InvalidOperation as e:
        raise HTTPException(status_code=409, detail=str(e))
    logger.info(f"퀴즈 시작: {ws.candidate} ({controller.total}문제)")
    return _state_payload(controller)


# ── 엔드포인트 ───────────────────────────────────────────────────────────────

@router.post("/api/enter")
async def enter(body: EnterBody, request: Request):
    ws = _web_session(request)
    try:
        ws.candidate = validate_email(body.email)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "ok": True,
        "email": ws.candidate,
        "guidelines": build_guidelines(QUESTION_COUNT, ws.controller.duration_seconds),
    }


@router.get("/api/guidelines")
async def guidelines(request: Request):
    ws = _web_session(request)
    return {"guidelines": build_guidelines(QUESTION_COUNT, ws.controller.duration_seconds)}


@router.post("/api/start-quiz")
async def start_quiz(request: Request):
    return await _begin(request, lambda: load_question_set(QUESTION_COUNT))


@router.post("/api/start-sample-quiz")
async def start_sample_quiz(request: Request):
    async def _sample():
        return load_sample_question_set()
    return await _begin(request, _sample)


@router.get("/api/state")
async def get_state(request: Request):
    ws = _web_session(request)
    controller = ws.controller
    controller.sync_clock()
    payload = _state_payload(controller)
    payload["email"] = ws.candidate
    return payload


@router.post("/api/select")
async def select_answer(body: SelectAnswerBody, request: Request):
    controller = _controller(request)
    return _apply(controller, controller.select_answer, body.choice_index)


@router.post("/api/next")
async def next_question(request: Request):
    controller = _controller(request)
    return _apply(controller, controller.go_to_next)


@router.post("/api/previous")
async def previous_question(request: Request):
    controller = _controller(request)
    return _apply(controller, controller.go_to_previous)


@router.post("/api/navigate")
async def navigate(body: NavigateBody, request: Request):
    controller = _controller(request)
    return _apply(controller, controller.go_to, body.index)


@router.post("/api/flag")
async def toggle_flag(request: Request):
    controller = _controller(request)
    return _apply(controller, controller.toggle_flag)


@router.post("/api/submit")
async def submit_quiz(request: Request):
    controller = _controller(request)
    if controller.phase is Phase.NOT_STARTED:
        raise HTTPException(status_code=409, detail="진행 중인 퀴즈가 없습니다.")
    # 이미 제출된 경우(시간 만료 등)에도 같은 리포트를 돌려준다
    controller.submit(reason="manual")
    return _state_payload(controller)


@router.get("/api/report")
async def get_report(request: Request):
    controller = _controller(request)
    if controller.report is None:
        raise HTTPException(status_code=400, detail="퀴즈가 아직 제출되지 않았습니다.")
    return _report_to_dict(controller.report)


@router.post("/api/restart")
async def restart_quiz(request: Request):
    ws = _web_session(request)
    ws.controller.restart()
    ws.candidate = ""
    return {"ok": True, "phase": ws.controller.phase.value}
