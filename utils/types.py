"""
Value types passed between the tutor pipeline stages.

Everything here is immutable once built; the only mutable object in a
pipeline run is the shared dict itself.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TutorContext:
    """Snapshot of where the learner is, derived from page path + progress."""

    track: str
    current_module: int | None = None
    current_ai_week: int | None = None
    current_starter_project: str | None = None
    completed_modules: tuple[int, ...] = ()
    practice_count: int = 0
    tutor_mode: str = "guide"


@dataclass(frozen=True)
class TutorPrompt:
    system_prompt: str
    user_message: str


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    message: str


# A dispatch always yields exactly one of these
DispatchOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class FormattedResponse:
    html: str
    is_error: bool = False


@dataclass(frozen=True)
class ProbeResult:
    success: bool
    message: str


@dataclass(frozen=True)
class LoadProgress:
    text: str
    progress: float
