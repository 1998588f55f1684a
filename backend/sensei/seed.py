"""Sample content written into an empty database on first start."""

from __future__ import annotations

from typing import Dict, List

SAMPLE_PUZZLES: List[Dict[str, object]] = [
    {
        "fen": "r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 0 1",
        "solution": ["Qxf7#"],
        "theme": "mate_in_1",
        "difficulty": 1,
        "description": "scholars mate pattern",
    },
    {
        "fen": "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 0 1",
        "solution": ["Nf3"],
        "theme": "opening",
        "difficulty": 1,
        "description": "King's Knight Opening",
    },
]

SAMPLE_OPENINGS: List[Dict[str, object]] = [
    {
        "eco": "C20",
        "name": "King's Pawn Game",
        "moves": ["e4", "e5", "Nf3"],
        "description": "古典的なオープニング。中央を取り、駒を速く展開する。",
    },
    {
        "eco": "C60",
        "name": "Ruy Lopez",
        "moves": ["e4", "e5", "Nf3", "Nc6", "Bb5"],
        "description": "最も有名なオープニングの一つ。b5のビショップで圧力をかける。",
    },
]
