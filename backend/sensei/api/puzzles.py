"""Puzzle endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from ..commands import AppState, CommandError
from ..schemas import Puzzle, PuzzleAttempt
from .deps import command_failed, get_state

router = APIRouter(prefix="/puzzles", tags=["puzzles"])


@router.get("", response_model=List[Puzzle])
async def get_puzzles(
    theme: Optional[str] = Query(None, description="Exact theme tag, e.g. mate_in_1"),
    difficulty: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=500),
    state: AppState = Depends(get_state),
) -> List[Puzzle]:
    try:
        return await state.get_puzzles(theme, difficulty, limit)
    except CommandError as exc:
        raise command_failed(exc) from None


@router.get("/{puzzle_id}", response_model=Puzzle)
async def get_puzzle(
    puzzle_id: int = Path(..., description="Puzzle identifier"),
    state: AppState = Depends(get_state),
) -> Puzzle:
    try:
        puzzle = await state.get_puzzle_by_id(puzzle_id)
    except CommandError as exc:
        raise command_failed(exc) from None
    if puzzle is None:
        raise HTTPException(status_code=404, detail="Puzzle not found")
    return puzzle


@router.post("/attempts", status_code=204)
async def save_puzzle_attempt(payload: PuzzleAttempt, state: AppState = Depends(get_state)) -> Response:
    try:
        await state.save_puzzle_attempt(payload)
    except CommandError as exc:
        raise command_failed(exc) from None
    return Response(status_code=204)
