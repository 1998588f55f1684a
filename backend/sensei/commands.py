"""Application-facing entry points.

Every store operation runs under a single lock; chat calls never take it.
Failures below this layer leave here as a ``CommandError`` carrying one message.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Sequence, TypeVar

from .config import settings
from .engine import EngineSlot, build_analysis_result
from .errors import NetworkError, DecodeError, SenseiError, StorageError
from .ollama import OllamaClient
from .schemas import (
    AnalysisResult,
    ChatMessage,
    EngineReport,
    Opening,
    Puzzle,
    PuzzleAttempt,
    UserStats,
)
from .store import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CommandError(Exception):
    """One failed command. Callers get ``message``; only the HTTP layer reads ``kind`` to pick a status code."""

    def __init__(self, message: str, kind: str = "internal") -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


def _error_kind(exc: SenseiError) -> str:
    if isinstance(exc, StorageError):
        return "storage"
    if isinstance(exc, (NetworkError, DecodeError)):
        return "gateway"
    return "internal"


class AppState:
    def __init__(
        self,
        store: Store,
        chat_client: Optional[OllamaClient] = None,
        default_puzzle_limit: Optional[int] = None,
    ) -> None:
        self.store = store
        self.db_lock = asyncio.Lock()
        self.chat_client = chat_client or OllamaClient()
        self.engine_slot = EngineSlot()
        self.default_puzzle_limit = (
            settings.default_puzzle_limit if default_puzzle_limit is None else default_puzzle_limit
        )

    @classmethod
    def from_settings(cls) -> "AppState":
        return cls(Store(settings.database_url))

    async def _with_store(self, operation: Callable[..., T], *args) -> T:
        async with self.db_lock:
            work = asyncio.ensure_future(asyncio.to_thread(operation, *args))
            try:
                return await asyncio.shield(work)
            except asyncio.CancelledError:
                # Keep the lock until the worker thread has let go of the store.
                await asyncio.wait({work})
                raise
            except SenseiError as exc:
                logger.error("%s failed: %s", operation.__name__, exc)
                raise CommandError(str(exc), _error_kind(exc)) from exc

    async def get_puzzles(
        self,
        theme: Optional[str] = None,
        difficulty: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Puzzle]:
        if limit is None:
            limit = self.default_puzzle_limit
        return await self._with_store(self.store.list_puzzles, theme, difficulty, limit)

    async def get_puzzle_by_id(self, puzzle_id: int) -> Optional[Puzzle]:
        return await self._with_store(self.store.get_puzzle_by_id, puzzle_id)

    async def get_openings(self) -> List[Opening]:
        return await self._with_store(self.store.list_openings)

    async def get_opening_by_id(self, opening_id: int) -> Optional[Opening]:
        return await self._with_store(self.store.get_opening_by_id, opening_id)

    async def save_puzzle_attempt(self, attempt: PuzzleAttempt) -> None:
        await self._with_store(self.store.record_attempt, attempt)

    async def get_user_stats(self) -> UserStats:
        return await self._with_store(self.store.compute_user_stats)

    async def chat_with_ai(self, messages: Sequence[ChatMessage], model: Optional[str] = None) -> str:
        model = model or self.chat_client.default_model
        try:
            return await self.chat_client.chat(model, messages)
        except SenseiError as exc:
            raise CommandError(str(exc), _error_kind(exc)) from exc

    async def analyze_position(self, fen: str, evaluation: float, best_move: str) -> str:
        try:
            return await self.chat_client.analyze_position(fen, evaluation, best_move)
        except SenseiError as exc:
            raise CommandError(str(exc), _error_kind(exc)) from exc

    async def normalize_engine_report(self, report: EngineReport) -> AnalysisResult:
        return build_analysis_result(report)

    def close(self) -> None:
        self.store.dispose()
