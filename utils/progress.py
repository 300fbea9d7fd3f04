"""
Lesson progress bookkeeping.

The record keeps the shape the curriculum pages have always stored:

    {
        "modules": {1: {"completed": bool, "quizScore": int | None}, ... 6: ...},
        "practiceCount": int,
        "notes": {},
    }

Records saved by the browser use string module keys ("1"); they are read back
with int keys so a module is never counted twice.
"""

import copy
import math

from constants.defaults import KEY_PROGRESS, TOTAL_MODULES
from utils.storage import Storage

DEFAULT_PROGRESS = {
    "modules": {n: {"completed": False, "quizScore": None} for n in range(1, TOTAL_MODULES + 1)},
    "practiceCount": 0,
    "notes": {},
}


def round_half_up(value: float) -> int:
    """Round .5 upwards, the way the lesson pages display scores."""
    return math.floor(value + 0.5)


def _normalise_modules(modules) -> dict:
    if not isinstance(modules, dict):
        return {}
    normalised = {}
    # int keys come last so they win over a stale "1" from an older save
    for key, entry in sorted(modules.items(), key=lambda item: isinstance(item[0], int)):
        try:
            normalised[int(key)] = entry
        except (TypeError, ValueError):
            normalised[key] = entry
    return normalised


class ProgressStore:
    def __init__(self, storage: Storage):
        self.storage = storage

    def get(self) -> dict:
        progress = self.storage.get(KEY_PROGRESS)
        if not isinstance(progress, dict):
            return copy.deepcopy(DEFAULT_PROGRESS)
        progress["modules"] = _normalise_modules(progress.get("modules"))
        return progress

    def save(self, progress: dict) -> None:
        self.storage.set(KEY_PROGRESS, progress)

    def complete_module(self, module_num: int, quiz_score: int = None) -> None:
        if not 1 <= module_num <= TOTAL_MODULES:
            raise ValueError(f"Module number must be between 1 and {TOTAL_MODULES}, got {module_num}")
        progress = self.get()
        progress["modules"][module_num] = {
            "completed": True,
            "quizScore": quiz_score,
        }
        self.save(progress)

    def add_practice(self) -> None:
        progress = self.get()
        progress["practiceCount"] = int(progress.get("practiceCount") or 0) + 1
        self.save(progress)

    def get_stats(self) -> dict:
        """Summary numbers for display: completion, average quiz score, practice count."""
        progress = self.get()
        modules = [m for m in progress["modules"].values() if isinstance(m, dict)]

        completed = sum(1 for m in modules if m.get("completed"))
        scores = [m["quizScore"] for m in modules if m.get("quizScore") is not None]
        average = round_half_up(sum(scores) / len(scores)) if scores else None

        return {
            "modules_completed": completed,
            "total_modules": TOTAL_MODULES,
            "average_score": average,
            "practice_count": int(progress.get("practiceCount") or 0),
            "percent_complete": round_half_up(completed / TOTAL_MODULES * 100),
        }
