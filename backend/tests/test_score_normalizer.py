import chess.engine

from sensei.engine import EngineSlot, build_analysis_result, normalize_evaluation, normalize_pov_score
from sensei.schemas import EngineReport


def test_normalize_centipawns():
    assert normalize_evaluation(150) == 1.5
    assert normalize_evaluation(-35) == -0.35
    assert normalize_evaluation(0) == 0.0


def test_normalize_mate_for_side_to_move():
    assert normalize_evaluation(0, 3) == 997.0
    assert normalize_evaluation(0, 1) > normalize_evaluation(0, 3)


def test_normalize_being_mated():
    assert normalize_evaluation(0, -2) == -998.0
    assert normalize_evaluation(0, -1) < normalize_evaluation(0, -4)


def test_mate_ignores_centipawns():
    assert normalize_evaluation(-5000, 2) == 998.0


def test_normalize_pov_score_from_white_perspective():
    cp = chess.engine.PovScore(chess.engine.Cp(-120), chess.BLACK)
    assert normalize_pov_score(cp) == 1.2

    mate = chess.engine.PovScore(chess.engine.Mate(2), chess.WHITE)
    assert normalize_pov_score(mate) == 998.0

    mated = chess.engine.PovScore(chess.engine.Mate(2), chess.BLACK)
    assert normalize_pov_score(mated) == -998.0


def test_normalize_pov_score_none():
    assert normalize_pov_score(None) == 0.0


def test_build_analysis_result():
    report = EngineReport(eval_cp=42, best_move="e2e4", depth=18, pv=["e2e4", "e7e5"])
    result = build_analysis_result(report)
    assert result.evaluation == 0.42
    assert result.best_move == "e2e4"
    assert result.depth == 18
    assert result.pv == ["e2e4", "e7e5"]


def test_engine_slot_starts_empty():
    slot = EngineSlot()
    assert slot.engine is None
    assert not slot.loaded


def test_normalize_pov_score_mate_already_given():
    assert normalize_pov_score(chess.engine.PovScore(chess.engine.MateGiven, chess.WHITE)) == 1000.0
    assert normalize_pov_score(chess.engine.PovScore(chess.engine.MateGiven, chess.BLACK)) == -1000.0


def test_build_analysis_result_black_to_move():
    report = EngineReport(eval_cp=120, turn="black", best_move="e7e5")
    assert build_analysis_result(report).evaluation == -1.2

    mating = EngineReport(mate_in=3, turn="black", best_move="d8h4")
    assert build_analysis_result(mating).evaluation == -997.0


def test_build_analysis_result_side_to_move_is_mated():
    # Black to move with no moves left: White has delivered mate.
    mated = EngineReport(mate_in=0, turn="black", best_move="")
    assert build_analysis_result(mated).evaluation == 1000.0

    assert build_analysis_result(EngineReport(mate_in=0, best_move="")).evaluation == -1000.0
