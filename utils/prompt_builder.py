"""
Prompt assembly for the tutor.

The system prompt is composed from the data records in constants/tutor.py:

    role line
    mode block        (guide or solution)
    context block     (where the learner is + the track's topic catalog)

    universal rules   (the track's rules)

Pure string assembly: every (track, mode) pair is defined, so build_prompt
never fails.
"""

from constants.defaults import MODE_GUIDE, TRACK_AI, TRACK_STARTER
from constants.tutor import (
    GUIDE_PROFILE,
    SOLUTION_PROFILE,
    STARTER_HOME_NAME,
    STARTER_PROJECT_NAMES,
    TRACK_PROFILES,
    ModeProfile,
    TrackProfile,
)
from utils.types import TutorContext, TutorPrompt


def _viewing_lines(context: TutorContext) -> list[str]:
    if context.track == TRACK_STARTER:
        name = STARTER_PROJECT_NAMES.get(context.current_starter_project, STARTER_HOME_NAME)
        return [f"- User is viewing: {name}"]

    if context.track == TRACK_AI:
        if context.current_ai_week is not None:
            return [f"- User is viewing: CS50 AI Week {context.current_ai_week}"]
        return ["- User is viewing: CS50 AI Home"]

    viewing = f"Module {context.current_module}" if context.current_module else "Home page"
    completed = ", ".join(str(n) for n in context.completed_modules) or "None yet"
    return [
        f"- User is viewing: {viewing}",
        f"- Completed modules: {completed}",
        f"- Practice problems done: {context.practice_count}",
    ]


def render_mode_block(profile: ModeProfile) -> str:
    lines = [profile.heading, profile.intro, ""]
    lines += [f"{i}. {rule}" for i, rule in enumerate(profile.rules, 1)]
    if profile.examples:
        lines += ["", "Example responses:"]
        lines += [f"- {example}" for example in profile.examples]
    if profile.closing:
        lines += ["", profile.closing]
    return "\n".join(lines)


def render_context_block(profile: TrackProfile, context: TutorContext) -> str:
    lines = ["CURRENT CONTEXT:"]
    lines += _viewing_lines(context)
    lines += [f"- {note}" for note in profile.audience]
    lines += ["", profile.catalog_title, *profile.catalog]
    if profile.extra:
        lines += ["", profile.extra_title, *profile.extra]
    return "\n".join(lines)


def render_rules_block(profile: TrackProfile) -> str:
    return "\n".join(["UNIVERSAL RULES:"] + [f"- {rule}" for rule in profile.rules])


def build_system_prompt(context: TutorContext) -> str:
    track = TRACK_PROFILES[context.track]
    mode = GUIDE_PROFILE if context.tutor_mode == MODE_GUIDE else SOLUTION_PROFILE

    return (
        f"{track.role}\n\n"
        f"{render_mode_block(mode)}\n\n"
        f"{render_context_block(track, context)}\n\n"
        f"{render_rules_block(track)}"
    )


def build_prompt(question: str, context: TutorContext) -> TutorPrompt:
    return TutorPrompt(system_prompt=build_system_prompt(context), user_message=question)
