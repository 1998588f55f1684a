"""Puzzle, opening and attempt repository backed by SQLAlchemy."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import Base, build_engine, build_session_factory
from .errors import StorageError
from .models import OpeningModel, PuzzleAttemptModel, PuzzleModel
from .schemas import Opening, Puzzle, PuzzleAttempt, UserStats
from .seed import SAMPLE_OPENINGS, SAMPLE_PUZZLES

logger = logging.getLogger(__name__)

DEFAULT_PUZZLE_LIMIT = 10


class Store:
    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        try:
            self.engine = build_engine(database_url)
        except (OSError, SQLAlchemyError) as exc:
            raise StorageError(f"cannot open database {database_url}: {exc}") from exc
        self._session_factory = build_session_factory(self.engine)

    def _session(self) -> Session:
        return self._session_factory()

    def initialize(self) -> None:
        """Create the tables if needed and seed sample content into an empty database."""
        try:
            Base.metadata.create_all(bind=self.engine)
            with self._session() as db:
                if db.scalar(select(func.count()).select_from(PuzzleModel)):
                    return
                db.add_all(PuzzleModel(**entry) for entry in SAMPLE_PUZZLES)
                db.add_all(OpeningModel(**entry) for entry in SAMPLE_OPENINGS)
                db.commit()
                logger.info(
                    "Seeded %d puzzles and %d openings into %s",
                    len(SAMPLE_PUZZLES),
                    len(SAMPLE_OPENINGS),
                    self.database_url,
                )
        except SQLAlchemyError as exc:
            raise StorageError(f"database initialization failed: {exc}") from exc

    def list_puzzles(
        self,
        theme: Optional[str] = None,
        difficulty: Optional[int] = None,
        limit: int = DEFAULT_PUZZLE_LIMIT,
    ) -> List[Puzzle]:
        query = select(PuzzleModel)
        if theme is not None:
            query = query.where(PuzzleModel.theme == theme)
        if difficulty is not None:
            query = query.where(PuzzleModel.difficulty == difficulty)
        query = query.order_by(func.random()).limit(limit)
        try:
            with self._session() as db:
                rows = db.scalars(query).all()
                return [Puzzle.model_validate(row.as_dict()) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to list puzzles: {exc}") from exc

    def get_puzzle_by_id(self, puzzle_id: int) -> Optional[Puzzle]:
        try:
            with self._session() as db:
                model = db.get(PuzzleModel, puzzle_id)
                if not model:
                    return None
                return Puzzle.model_validate(model.as_dict())
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to load puzzle {puzzle_id}: {exc}") from exc

    def list_openings(self) -> List[Opening]:
        query = select(OpeningModel).order_by(OpeningModel.eco.asc(), OpeningModel.id.asc())
        try:
            with self._session() as db:
                return [Opening.model_validate(row.as_dict()) for row in db.scalars(query).all()]
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to list openings: {exc}") from exc

    def get_opening_by_id(self, opening_id: int) -> Optional[Opening]:
        try:
            with self._session() as db:
                model = db.get(OpeningModel, opening_id)
                if not model:
                    return None
                return Opening.model_validate(model.as_dict())
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to load opening {opening_id}: {exc}") from exc

    def record_attempt(self, attempt: PuzzleAttempt) -> None:
        # puzzle_id is not checked against the puzzles table.
        try:
            with self._session() as db:
                db.add(PuzzleAttemptModel(**attempt.model_dump()))
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to record attempt: {exc}") from exc

    def compute_user_stats(self) -> UserStats:
        try:
            with self._session() as db:
                total = db.scalar(select(func.count()).select_from(PuzzleAttemptModel)) or 0
                solved = (
                    db.scalar(
                        select(func.count())
                        .select_from(PuzzleAttemptModel)
                        .where(PuzzleAttemptModel.solved.is_(True))
                    )
                    or 0
                )
                average = db.scalar(select(func.avg(PuzzleAttemptModel.attempts)))
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to compute stats: {exc}") from exc

        return UserStats(
            total_attempts=total,
            solved_count=solved,
            success_rate=solved / total if total else 0.0,
            average_attempts=float(average) if average is not None else 0.0,
        )

    def count_puzzles(self) -> int:
        try:
            with self._session() as db:
                return db.scalar(select(func.count()).select_from(PuzzleModel)) or 0
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to count puzzles: {exc}") from exc

    def count_openings(self) -> int:
        try:
            with self._session() as db:
                return db.scalar(select(func.count()).select_from(OpeningModel)) or 0
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to count openings: {exc}") from exc

    def dispose(self) -> None:
        self.engine.dispose()
