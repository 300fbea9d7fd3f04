"""
================================================================================
PYLEARN TUTOR - FLOW DEFINITION
================================================================================
This file defines the PocketFlow workflow that answers one learner question.

FLOW ARCHITECTURE:
==================
    GetContext → BuildPrompt → CallLLM ─ success → FormatResponse
                                       └ error   → ErrorHandler

The wiring is data: TUTOR_TRANSITIONS maps each Stage to {Action: Stage}.
build_flow() turns such a table into PocketFlow edges (node - action >> next).
A node whose returned action has no edge simply ends the run; there are no
cycles, so every run terminates.

Only CallLLM awaits anything, so the flow runs on an AsyncFlow and mixes
plain Nodes with one AsyncNode.
================================================================================
"""

import asyncio

from pocketflow import AsyncFlow

from constants.defaults import DEFAULT_PAGE
from nodes import (
    Action,
    BuildPrompt,
    CallLLM,
    ErrorHandler,
    FormatResponse,
    GetContext,
    Stage,
)

TUTOR_TRANSITIONS = {
    Stage.GET_CONTEXT: {Action.DEFAULT: Stage.BUILD_PROMPT},
    Stage.BUILD_PROMPT: {Action.DEFAULT: Stage.CALL_LLM},
    Stage.CALL_LLM: {
        Action.SUCCESS: Stage.FORMAT_RESPONSE,
        Action.ERROR: Stage.ERROR_HANDLER,
    },
    Stage.FORMAT_RESPONSE: {},
    Stage.ERROR_HANDLER: {},
}


def build_flow(nodes: dict, transitions: dict, start) -> AsyncFlow:
    """
    Wire ``nodes`` together according to ``transitions``.

    Args:
        nodes: Stage -> node instance
        transitions: Stage -> {Action -> Stage}
        start: Stage the flow starts at

    Returns:
        AsyncFlow: ready to run with a shared dict

    Raises:
        ValueError: If the table or ``start`` names a stage without a node
    """
    referenced = {start} | set(transitions)
    for edges in transitions.values():
        referenced |= set(edges.values())
    missing = referenced - set(nodes)
    if missing:
        raise ValueError(f"No node for stage(s): {', '.join(sorted(str(s) for s in missing))}")

    for source, edges in transitions.items():
        for action, target in edges.items():
            nodes[source] - action >> nodes[target]

    return AsyncFlow(start=nodes[start])


def create_tutor_flow(app) -> AsyncFlow:
    """
    Creates and returns the tutor flow bound to one TutorApp.

    No node retries: a failed backend call is answered by ErrorHandler and
    the learner resubmits if they want another try.
    """
    nodes = {
        Stage.GET_CONTEXT: GetContext(app),
        Stage.BUILD_PROMPT: BuildPrompt(),
        Stage.CALL_LLM: CallLLM(app),
        Stage.FORMAT_RESPONSE: FormatResponse(),
        Stage.ERROR_HANDLER: ErrorHandler(),
    }
    return build_flow(nodes, TUTOR_TRANSITIONS, Stage.GET_CONTEXT)


async def run_tutor_flow(question: str, app, page: str = DEFAULT_PAGE) -> dict:
    """Run the flow once for ``question`` and return the shared store."""
    shared = {
        "question": question,
        "page": page,
        # Outputs will be populated by the nodes
        "context": None,
        "prompt": None,
        "backend_result": None,
        "formatted_response": None,
    }
    await create_tutor_flow(app).run_async(shared)
    return shared


async def ask_tutor(question: str, app, page: str = DEFAULT_PAGE):
    """Answer one question; returns the FormattedResponse."""
    shared = await run_tutor_flow(question, app, page)
    return shared["formatted_response"]


class TutorSession:
    """
    One chat conversation on one page.

    Questions are answered one at a time: a question asked while another is
    still in flight waits for it to finish instead of racing it.
    """

    def __init__(self, app, page: str = DEFAULT_PAGE):
        self.app = app
        self.page = page
        self._lock = asyncio.Lock()

    async def ask(self, question: str):
        async with self._lock:
            return await ask_tutor(question, self.app, self.page)
