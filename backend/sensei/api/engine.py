"""Normalization of front-end engine output."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..commands import AppState
from ..schemas import AnalysisResult, EngineReport
from .deps import get_state

router = APIRouter(prefix="/engine", tags=["engine"])


@router.post("/normalize", response_model=AnalysisResult)
async def normalize_engine_report(report: EngineReport, state: AppState = Depends(get_state)) -> AnalysisResult:
    return await state.normalize_engine_report(report)
