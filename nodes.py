"""
================================================================================
PYLEARN TUTOR - PROCESSING NODES
================================================================================
This file contains the Node classes that answer one learner question.

NODE ARCHITECTURE (PocketFlow Pattern):
=======================================
Each node follows the prep → exec → post lifecycle:

    prep(shared)                     - READ from shared store, prepare data
         ↓
    exec(prep_res)                   - PROCESS (CallLLM is the only await point)
         ↓
    post(shared, prep_res, exec_res) - WRITE to shared store, return action

SHARED STORE STRUCTURE:
======================
One fresh dict per question, discarded once the caller has read the answer:

    shared = {
        # Input (set by flow.run_tutor_flow)
        "question": str,                  # The learner's question
        "page": str,                      # Lesson path the learner is viewing

        # Output (populated by nodes, in this order)
        "context": TutorContext,          # GetContext
        "prompt": TutorPrompt,            # BuildPrompt
        "backend_result": Success | Failure,  # CallLLM
        "formatted_response": FormattedResponse,  # FormatResponse or ErrorHandler
    }
================================================================================
"""

import asyncio
from enum import Enum

from pocketflow import AsyncNode, Node

from constants.tutor import DEFAULT_FAILURE_MESSAGE
from utils.call_llm import call_llm
from utils.context import collect_context
from utils.formatting import fallback_response, format_response
from utils.prompt_builder import build_prompt
from utils.types import Failure, Success


class Stage(str, Enum):
    """Every node in the tutor flow."""

    GET_CONTEXT = "GetContext"
    BUILD_PROMPT = "BuildPrompt"
    CALL_LLM = "CallLLM"
    FORMAT_RESPONSE = "FormatResponse"
    ERROR_HANDLER = "ErrorHandler"


class Action(str, Enum):
    """Every action a node's post() can return."""

    DEFAULT = "default"
    SUCCESS = "success"
    ERROR = "error"


# =============================================================================
# NODE 1: GetContext - Where is the learner and what have they done?
# =============================================================================

class GetContext(Node):
    """
    First node - derives a TutorContext snapshot.

    Input (from shared / app):
        - page: Current lesson path
        - saved progress record, active tutor mode

    Output (to shared):
        - context: TutorContext
    """

    def __init__(self, app):
        super().__init__()
        self.app = app

    def prep(self, shared):
        return {
            "page": shared.get("page"),
            "progress": self.app.progress.get(),
            "mode": self.app.settings.mode,
        }

    def exec(self, prep_res):
        return collect_context(prep_res["page"], prep_res["progress"], prep_res["mode"])

    def post(self, shared, prep_res, exec_res):
        shared["context"] = exec_res
        return Action.DEFAULT


# =============================================================================
# NODE 2: BuildPrompt - Compose the system prompt for this track and mode
# =============================================================================

class BuildPrompt(Node):
    """
    Second node - turns question + context into a TutorPrompt.

    Output (to shared):
        - prompt: TutorPrompt(system_prompt, user_message)
    """

    def prep(self, shared):
        return shared["question"], shared["context"]

    def exec(self, prep_res):
        question, context = prep_res
        return build_prompt(question, context)

    def post(self, shared, prep_res, exec_res):
        shared["prompt"] = exec_res
        return Action.DEFAULT


# =============================================================================
# NODE 3: CallLLM - Dispatch to the selected backend
# =============================================================================

class CallLLM(AsyncNode):
    """
    Third node - sends the prompt to the active backend.

    The blocking HTTP / llama.cpp call runs in a worker thread so the event
    loop stays free. Any exception becomes a Failure through
    exec_fallback_async; nothing is retried (max_retries stays at 1).

    Output (to shared):
        - backend_result: Success(text) or Failure(message)

    Returns action "success" or "error".
    """

    def __init__(self, app):
        super().__init__()
        self.app = app

    async def prep_async(self, shared):
        settings = self.app.settings
        backend = settings.backend
        return {
            "prompt": shared["prompt"],
            "backend": backend,
            "config": settings.backend_config(backend),
            "engine": self.app.model.engine,
        }

    async def exec_async(self, prep_res):
        prompt = prep_res["prompt"]
        text = await asyncio.to_thread(
            call_llm,
            prep_res["backend"],
            prep_res["config"],
            prompt.system_prompt,
            prompt.user_message,
            prep_res["engine"],
        )
        return Success(text=text)

    async def exec_fallback_async(self, prep_res, exc):
        return Failure(message=str(exc) or DEFAULT_FAILURE_MESSAGE)

    async def post_async(self, shared, prep_res, exec_res):
        shared["backend_result"] = exec_res
        return Action.SUCCESS if isinstance(exec_res, Success) else Action.ERROR


# =============================================================================
# NODE 4: FormatResponse - Markdown to HTML
# =============================================================================

class FormatResponse(Node):
    """Turns a successful reply into display-ready HTML."""

    def prep(self, shared):
        return shared["backend_result"]

    def exec(self, prep_res):
        return format_response(prep_res.text)

    def post(self, shared, prep_res, exec_res):
        shared["formatted_response"] = exec_res
        return Action.DEFAULT


# =============================================================================
# NODE 5: ErrorHandler - Canned answer or a visible error
# =============================================================================

class ErrorHandler(Node):
    """
    Runs when the backend failed. A keyword in the question gets a canned
    explanation; otherwise the failure message is shown.
    """

    def prep(self, shared):
        result = shared.get("backend_result")
        error = result.message if isinstance(result, Failure) else DEFAULT_FAILURE_MESSAGE
        return shared["question"], error

    def exec(self, prep_res):
        question, error = prep_res
        return fallback_response(question, error)

    def post(self, shared, prep_res, exec_res):
        shared["formatted_response"] = exec_res
        return Action.DEFAULT
