"""Chat and position-explanation endpoints backed by the local LLM."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..commands import AppState, CommandError
from ..schemas import AnalyzePositionRequest, ChatReply, ChatRequest
from .deps import command_failed, get_state

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/chat", response_model=ChatReply)
async def chat_with_ai(payload: ChatRequest, state: AppState = Depends(get_state)) -> ChatReply:
    try:
        content = await state.chat_with_ai(payload.messages, payload.model)
    except CommandError as exc:
        raise command_failed(exc) from None
    return ChatReply(content=content)


@router.post("/analyze", response_model=ChatReply)
async def analyze_position(payload: AnalyzePositionRequest, state: AppState = Depends(get_state)) -> ChatReply:
    try:
        content = await state.analyze_position(payload.fen, payload.evaluation, payload.best_move)
    except CommandError as exc:
        raise command_failed(exc) from None
    return ChatReply(content=content)
