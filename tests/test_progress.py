import pytest

from constants.defaults import KEY_PROGRESS
from utils.progress import ProgressStore
from utils.storage import Storage


@pytest.fixture
def progress(tmp_path):
    return ProgressStore(Storage(str(tmp_path / "store.yaml")))


def test_fresh_progress(progress):
    record = progress.get()

    assert set(record["modules"]) == {1, 2, 3, 4, 5, 6}
    assert record["practiceCount"] == 0
    assert progress.get_stats() == {
        "modules_completed": 0,
        "total_modules": 6,
        "average_score": None,
        "practice_count": 0,
        "percent_complete": 0,
    }


def test_complete_modules_and_practice(progress):
    progress.complete_module(1, 80)
    progress.complete_module(2, 91)
    progress.complete_module(3)
    progress.add_practice()
    progress.add_practice()

    stats = progress.get_stats()

    assert stats["modules_completed"] == 3
    assert stats["average_score"] == 86
    assert stats["practice_count"] == 2
    assert stats["percent_complete"] == 50


def test_module_number_is_checked(progress):
    with pytest.raises(ValueError):
        progress.complete_module(7)


def test_fresh_default_is_not_shared(progress):
    progress.get()["practiceCount"] = 99

    assert progress.get()["practiceCount"] == 0


def test_average_score_rounds_halves_up(progress):
    progress.complete_module(1, 84)
    progress.complete_module(2, 85)

    assert progress.get_stats()["average_score"] == 85


def test_string_module_keys_are_not_counted_twice(tmp_path):
    storage = Storage(str(tmp_path / "store.yaml"))
    storage.set(KEY_PROGRESS, {
        "modules": {"1": {"completed": True, "quizScore": 70}, "2": {"completed": False, "quizScore": None}},
        "practiceCount": 3,
        "notes": {},
    })
    progress = ProgressStore(storage)

    progress.complete_module(1, 90)

    assert set(progress.get()["modules"]) == {1, 2}
    stats = progress.get_stats()
    assert stats["modules_completed"] == 1
    assert stats["average_score"] == 90
    assert stats["practice_count"] == 3
