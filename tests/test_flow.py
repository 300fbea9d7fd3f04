import asyncio
import threading
import time

import pytest
import requests
from pocketflow import Node

from flow import TUTOR_TRANSITIONS, TutorSession, ask_tutor, build_flow, run_tutor_flow
from nodes import Action, Stage
from tests.conftest import FakeResponse
from utils.types import Failure, Success

STARTER_PAGE = "/python-starter/starter-mad-libs.html"


def use_ollama(app, monkeypatch, reply=None, error=None):
    app.settings.update(backend="ollama")

    def fake_post(url, headers=None, json=None, timeout=None):
        if error is not None:
            raise error
        return FakeResponse(payload={"message": {"content": reply}})

    monkeypatch.setattr(requests, "post", fake_post)


def test_successful_answer_is_formatted(app, monkeypatch):
    app.settings.update(mode="guide")
    use_ollama(app, monkeypatch, reply="A variable stores values.")

    shared = asyncio.run(run_tutor_flow("What is a variable?", app, STARTER_PAGE))

    assert shared["context"].track == "starter"
    assert "YOU ARE IN GUIDE MODE" in shared["prompt"].system_prompt
    assert shared["backend_result"] == Success("A variable stores values.")
    response = shared["formatted_response"]
    assert "<p>A variable stores values.</p>" in response.html
    assert response.is_error is False


def test_failure_with_keyword_uses_canned_answer(app, monkeypatch):
    use_ollama(app, monkeypatch, error=requests.exceptions.ConnectionError("Connection refused"))

    shared = asyncio.run(run_tutor_flow("What is a variable?", app, STARTER_PAGE))

    assert shared["backend_result"] == Failure("Connection refused")
    response = shared["formatted_response"]
    assert "labeled box that stores a value" in response.html
    assert response.is_error is False


def test_failure_without_keyword_is_an_error(app, monkeypatch):
    use_ollama(app, monkeypatch, error=TimeoutError("timeout"))

    response = asyncio.run(ask_tutor("asdkjasd", app, STARTER_PAGE))

    assert "timeout" in response.html
    assert response.is_error is True


def test_error_status_becomes_failure(app, monkeypatch):
    app.settings.update(backend="ollama")
    monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(status_code=500))

    shared = asyncio.run(run_tutor_flow("zzz", app))

    assert shared["backend_result"] == Failure("Ollama error: 500. Is Ollama running?")
    assert shared["formatted_response"].is_error is True


def test_embedded_backend_not_loaded(app):
    response = asyncio.run(ask_tutor("qwerty", app))

    assert "not loaded yet" in response.html
    assert response.is_error is True


def test_embedded_backend_with_loaded_engine(app):
    class Engine:
        def create_chat_completion(self, **kwargs):
            return {"choices": [{"message": {"content": "Use `print()`."}}]}

    app.model.engine = Engine()

    response = asyncio.run(ask_tutor("How do I show text?", app))

    assert response.html == "<p>Use <code>print()</code>.</p>"


def test_context_reads_saved_progress(app, monkeypatch):
    app.progress.complete_module(1, 90)
    app.progress.add_practice()
    use_ollama(app, monkeypatch, reply="ok")

    shared = asyncio.run(run_tutor_flow("q", app, "/modules/module-2.html"))

    assert shared["context"].completed_modules == (1,)
    assert "- Completed modules: 1" in shared["prompt"].system_prompt
    assert "- User is viewing: Module 2" in shared["prompt"].system_prompt


def test_transition_table_covers_every_stage():
    assert set(TUTOR_TRANSITIONS) == set(Stage)
    assert TUTOR_TRANSITIONS[Stage.CALL_LLM] == {
        Action.SUCCESS: Stage.FORMAT_RESPONSE,
        Action.ERROR: Stage.ERROR_HANDLER,
    }


class Step(Node):
    def __init__(self, name, action):
        super().__init__()
        self.name, self.action = name, action

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("visited", []).append(self.name)
        return self.action


def test_unmatched_action_ends_the_run():
    nodes = {"a": Step("a", "next"), "b": Step("b", "surprise"), "c": Step("c", "next")}
    transitions = {"a": {"next": "b"}, "b": {"next": "c"}}

    shared = {}
    with pytest.warns(UserWarning):
        asyncio.run(build_flow(nodes, transitions, "a").run_async(shared))

    assert shared == {"visited": ["a", "b"]}


def test_build_flow_rejects_missing_nodes():
    with pytest.raises(ValueError, match="No node for stage"):
        build_flow({"a": Step("a", "next")}, {"a": {"next": "ghost"}}, "a")


def test_session_answers_one_question_at_a_time(app, monkeypatch):
    app.settings.update(backend="ollama")
    active = {"now": 0, "max": 0}
    lock = threading.Lock()

    def slow_post(url, headers=None, json=None, timeout=None):
        with lock:
            active["now"] += 1
            active["max"] = max(active["max"], active["now"])
        time.sleep(0.05)
        with lock:
            active["now"] -= 1
        return FakeResponse(payload={"message": {"content": json["messages"][1]["content"]}})

    monkeypatch.setattr(requests, "post", slow_post)
    session = TutorSession(app, "/module-1.html")

    async def scenario():
        return await asyncio.gather(session.ask("first"), session.ask("second"))

    first, second = asyncio.run(scenario())

    assert active["max"] == 1
    assert first.html == "<p>first</p>"
    assert second.html == "<p>second</p>"
