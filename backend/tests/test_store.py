import pytest

from sensei.errors import StorageError
from sensei.schemas import PuzzleAttempt
from sensei.seed import SAMPLE_OPENINGS, SAMPLE_PUZZLES
from sensei.store import Store


def _attempt(puzzle_id=1, solved=True, attempts=1, time_spent=30):
    return PuzzleAttempt(
        puzzle_id=puzzle_id,
        solved=solved,
        attempts=attempts,
        time_spent=time_spent,
        timestamp="2024-05-01T10:00:00Z",
    )


def test_initialize_seeds_sample_content(store):
    assert store.count_puzzles() == len(SAMPLE_PUZZLES)
    assert store.count_openings() == len(SAMPLE_OPENINGS)


def test_initialize_is_idempotent(store, database_url):
    store.initialize()
    store.initialize()
    reopened = Store(database_url)
    reopened.initialize()
    assert reopened.count_puzzles() == len(SAMPLE_PUZZLES)
    assert reopened.count_openings() == len(SAMPLE_OPENINGS)
    reopened.dispose()


def test_list_puzzles_filters_by_theme(store):
    for _ in range(5):
        puzzles = store.list_puzzles(theme="mate_in_1", limit=10)
        assert len(puzzles) == 1
        assert puzzles[0].theme == "mate_in_1"
        assert puzzles[0].solution == ["Qxf7#"]


def test_list_puzzles_without_filters_returns_everything(store):
    puzzles = store.list_puzzles()
    assert {p.theme for p in puzzles} == {"mate_in_1", "opening"}


def test_list_puzzles_filters_by_difficulty_and_limit(store):
    assert len(store.list_puzzles(difficulty=1)) == 2
    assert store.list_puzzles(difficulty=5) == []
    assert len(store.list_puzzles(limit=1)) == 1


def test_list_puzzles_no_match_is_empty(store):
    assert store.list_puzzles(theme="endgame", difficulty=1) == []


def test_get_puzzle_by_id(store):
    puzzle = store.get_puzzle_by_id(1)
    assert puzzle is not None
    assert puzzle.fen.startswith("r1bqkb1r")
    assert puzzle.description == "scholars mate pattern"


def test_get_puzzle_by_unknown_id_is_none(store):
    assert store.get_puzzle_by_id(999) is None


def test_openings_sorted_by_eco(store):
    first = store.list_openings()
    assert [o.eco for o in first] == ["C20", "C60"]
    assert first[1].moves == ["e4", "e5", "Nf3", "Nc6", "Bb5"]
    assert store.list_openings() == first


def test_get_opening_by_id(store):
    opening = store.get_opening_by_id(2)
    assert opening is not None
    assert opening.name == "Ruy Lopez"
    assert store.get_opening_by_id(42) is None


def test_stats_on_empty_history(store):
    stats = store.compute_user_stats()
    assert stats.model_dump() == {
        "total_attempts": 0,
        "solved_count": 0,
        "success_rate": 0.0,
        "average_attempts": 0.0,
    }


def test_stats_after_attempts(store):
    store.record_attempt(_attempt(solved=True, attempts=1))
    store.record_attempt(_attempt(solved=False, attempts=3))
    store.record_attempt(_attempt(puzzle_id=2, solved=True, attempts=2))
    stats = store.compute_user_stats()
    assert stats.total_attempts == 3
    assert stats.solved_count == 2
    assert stats.success_rate == pytest.approx(2 / 3)
    assert stats.average_attempts == pytest.approx(2.0)


def test_attempt_for_unknown_puzzle_is_accepted(store):
    store.record_attempt(_attempt(puzzle_id=12345))
    assert store.compute_user_stats().total_attempts == 1


def test_unreadable_database_raises_storage_error(tmp_path):
    # A directory cannot be opened as a database file.
    broken = Store(f"sqlite:///{tmp_path.as_posix()}")
    with pytest.raises(StorageError):
        broken.initialize()


def test_queries_before_initialize_raise_storage_error(database_url):
    bare = Store(database_url)
    with pytest.raises(StorageError):
        bare.list_puzzles()
    with pytest.raises(StorageError):
        bare.compute_user_stats()
    bare.dispose()
