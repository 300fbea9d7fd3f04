import pytest

from constants.defaults import TRACK_AI, TRACK_MODULE, TRACK_STARTER
from utils.context import classify_track, collect_context, completed_modules


@pytest.mark.parametrize("page, track", [
    ("/python-starter/index.html", TRACK_STARTER),
    ("/python-starter/starter-guessing-game.html", TRACK_STARTER),
    ("/cs50-ai/index.html", TRACK_AI),
    ("/ai-week-3.html", TRACK_AI),
    ("/modules/module-4.html", TRACK_MODULE),
    ("/", TRACK_MODULE),
    ("", TRACK_MODULE),
])
def test_classify_track(page, track):
    assert classify_track(page) == track


def test_module_page_extracts_module_number():
    context = collect_context("/modules/module-3.html", None, "solution")

    assert context.track == TRACK_MODULE
    assert context.current_module == 3
    assert context.current_ai_week is None
    assert context.tutor_mode == "solution"


def test_ai_week_page_extracts_week():
    context = collect_context("/cs50-ai/ai-week-0.html", None)

    assert context.track == TRACK_AI
    assert context.current_ai_week == 0


def test_starter_page_extracts_project_slug():
    context = collect_context("/python-starter/starter-mad-libs.html", None)

    assert context.track == TRACK_STARTER
    assert context.current_starter_project == "mad-libs"


def test_completed_modules_from_progress():
    progress = {
        "modules": {
            3: {"completed": True, "quizScore": 80},
            1: {"completed": True, "quizScore": None},
            2: {"completed": False, "quizScore": None},
        },
        "practiceCount": 7,
    }

    context = collect_context("/", progress)

    assert context.completed_modules == (1, 3)
    assert context.practice_count == 7


def test_completed_modules_accepts_string_keys():
    progress = {"modules": {"2": {"completed": True}, "5": {"completed": True}}}

    assert completed_modules(progress) == (2, 5)


@pytest.mark.parametrize("progress", [
    None,
    [],
    {"modules": "broken"},
    {"modules": {"x": {"completed": True}, 4: "yes"}, "practiceCount": "many"},
])
def test_malformed_progress_yields_defaults(progress):
    context = collect_context("/module-1.html", progress)

    assert context.completed_modules == ()
    assert context.practice_count == 0
