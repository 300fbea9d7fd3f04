"""
Context collection: classify the learner's current page and summarize their
saved progress into a TutorContext.

Never raises - missing or malformed progress yields empty defaults.
"""

import re

from constants.defaults import DEFAULT_MODE, TRACK_AI, TRACK_MODULE, TRACK_STARTER
from utils.types import TutorContext

MODULE_PATTERN = re.compile(r"module-(\d)")
AI_WEEK_PATTERN = re.compile(r"ai-week-(\d)")
STARTER_PROJECT_PATTERN = re.compile(r"starter-([a-z-]+)\.html")


def classify_track(page: str) -> str:
    # Starter wins over AI when a path somehow matches both
    if "python-starter" in page or "starter-" in page:
        return TRACK_STARTER
    if "cs50-ai" in page or "ai-week-" in page:
        return TRACK_AI
    return TRACK_MODULE


def _match_int(pattern, page):
    match = pattern.search(page)
    return int(match.group(1)) if match else None


def completed_modules(progress) -> tuple[int, ...]:
    """Module numbers flagged completed in ``progress``, ascending."""
    if not isinstance(progress, dict):
        return ()
    modules = progress.get("modules")
    if not isinstance(modules, dict):
        return ()

    done = []
    for num, entry in modules.items():
        if not isinstance(entry, dict) or not entry.get("completed"):
            continue
        try:
            done.append(int(num))
        except (TypeError, ValueError):
            continue
    return tuple(sorted(done))


def _practice_count(progress) -> int:
    if not isinstance(progress, dict):
        return 0
    try:
        return int(progress.get("practiceCount") or 0)
    except (TypeError, ValueError):
        return 0


def collect_context(page: str | None, progress: dict | None, mode: str = DEFAULT_MODE) -> TutorContext:
    page = page or ""
    starter_match = STARTER_PROJECT_PATTERN.search(page)

    return TutorContext(
        track=classify_track(page),
        current_module=_match_int(MODULE_PATTERN, page),
        current_ai_week=_match_int(AI_WEEK_PATTERN, page),
        current_starter_project=starter_match.group(1) if starter_match else None,
        completed_modules=completed_modules(progress),
        practice_count=_practice_count(progress),
        tutor_mode=mode,
    )
