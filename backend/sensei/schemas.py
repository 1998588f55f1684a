"""Pydantic schemas for the Chess Sensei command surface."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

ChatRole = Literal["system", "user", "assistant"]


class Puzzle(BaseModel):
    id: int
    fen: str
    solution: list[str]
    theme: str
    difficulty: int
    description: Optional[str] = None


class Opening(BaseModel):
    id: int
    eco: str
    name: str
    moves: list[str]
    description: str


class PuzzleAttempt(BaseModel):
    puzzle_id: int
    solved: bool
    attempts: int = Field(..., ge=1)
    time_spent: int = Field(..., ge=0, description="Seconds spent on the puzzle")
    timestamp: str


class UserStats(BaseModel):
    total_attempts: int
    solved_count: int
    success_rate: float
    average_attempts: float


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage]
    model: Optional[str] = None


class OllamaChatResponse(BaseModel):
    """Body returned by the local chat server for a non-streaming request."""

    message: ChatMessage
    done: bool


class AnalyzePositionRequest(BaseModel):
    fen: str
    evaluation: float
    best_move: str


class ChatReply(BaseModel):
    content: str


class EngineReport(BaseModel):
    """Raw search output posted by the front-end engine."""

    eval_cp: int = 0
    mate_in: Optional[int] = None
    turn: Literal["white", "black"] = Field("white", description="Side to move; scores are relative to it")
    best_move: str
    depth: int = Field(0, ge=0)
    pv: list[str] = []


class AnalysisResult(BaseModel):
    evaluation: float = Field(..., description="Pawn units, positive favours White")
    best_move: str
    depth: int
    pv: list[str] = []
