"""SQLAlchemy models."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text

from .database import Base


class PuzzleModel(Base):
    __tablename__ = "puzzles"

    id = Column(Integer, primary_key=True)
    fen = Column(Text, nullable=False)
    # JSON array of SAN moves, stored as text.
    solution = Column(JSON, nullable=False)
    theme = Column(String, nullable=False)
    difficulty = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fen": self.fen,
            "solution": list(self.solution or []),
            "theme": self.theme,
            "difficulty": self.difficulty,
            "description": self.description,
        }


class OpeningModel(Base):
    __tablename__ = "openings"

    id = Column(Integer, primary_key=True)
    eco = Column(String, nullable=False)
    name = Column(String, nullable=False)
    moves = Column(JSON, nullable=False)
    description = Column(Text, nullable=False)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "eco": self.eco,
            "name": self.name,
            "moves": list(self.moves or []),
            "description": self.description,
        }


class PuzzleAttemptModel(Base):
    __tablename__ = "puzzle_attempts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    puzzle_id = Column(Integer, ForeignKey("puzzles.id"), nullable=False)
    solved = Column(Boolean, nullable=False)
    attempts = Column(Integer, nullable=False)
    time_spent = Column(Integer, nullable=False)
    timestamp = Column(Text, nullable=False)
