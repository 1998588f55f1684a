"""Engine score helpers.

The search itself runs in the front-end (Stockfish WASM); the backend only
rescales what the engine reports onto a single pawn-unit scale.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import chess
import chess.engine

from .schemas import AnalysisResult, EngineReport

MATE_SCORE = 1000.0


def normalize_evaluation(eval_cp: int, mate_in: Optional[int] = None) -> float:
    """Return a signed pawn-unit score; forced mates dominate and closer mates are more extreme."""
    if mate_in is not None:
        if mate_in > 0:
            return MATE_SCORE - mate_in
        return -MATE_SCORE - mate_in
    return eval_cp / 100.0


def normalize_pov_score(score: chess.engine.PovScore | chess.engine.Score | None) -> float:
    if score is None:
        return 0.0
    pov = score.white() if isinstance(score, chess.engine.PovScore) else score
    if pov == chess.engine.MateGiven:
        return MATE_SCORE
    if pov.is_mate():
        return normalize_evaluation(0, pov.mate())
    return normalize_evaluation(pov.score() or 0)


def report_score(report: EngineReport) -> chess.engine.PovScore:
    """Wrap the raw report in a score seen from the side that was to move."""
    if report.mate_in is not None:
        relative: chess.engine.Score = chess.engine.Mate(report.mate_in)
    else:
        relative = chess.engine.Cp(report.eval_cp)
    return chess.engine.PovScore(relative, chess.WHITE if report.turn == "white" else chess.BLACK)


def build_analysis_result(report: EngineReport) -> AnalysisResult:
    return AnalysisResult(
        evaluation=normalize_pov_score(report_score(report)),
        best_move=report.best_move,
        depth=report.depth,
        pv=list(report.pv),
    )


class EngineSlot:
    """Lockable holder for an embedded engine handle; nothing fills it yet."""

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.engine: Any = None

    @property
    def loaded(self) -> bool:
        return self.engine is not None
