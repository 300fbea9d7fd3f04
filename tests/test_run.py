import requests

import run
from tests.conftest import FakeResponse
from utils.state import TutorApp


def test_html_to_text():
    markup = '<p>Hi<br>there</p><p>Try <code>print(1)</code></p><pre><code class="language-python">x = 1</code></pre>'

    assert run.html_to_text(markup) == "Hi\nthere\n\nTry print(1)\nx = 1"


def test_config_updates_and_shows_settings(tmp_path, capsys):
    code = run.main([
        "--data-dir", str(tmp_path),
        "config", "--backend", "openai", "--base-url", "http://mlx:8080/v1",
        "--model", "qwen", "--api-key", "sk-secret",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "OpenAI-Compatible" in out
    assert "http://mlx:8080/v1" in out
    assert "sk-secret" not in out

    config = TutorApp.from_data_dir(tmp_path).settings.active_config()
    assert config.model == "qwen"


def test_config_rejects_field_of_other_backend(tmp_path, capsys):
    code = run.main(["--data-dir", str(tmp_path), "config", "--backend", "ollama", "--api-key", "x"])

    assert code == 1
    assert "Unknown setting" in capsys.readouterr().out


def test_ask_prints_answer(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        requests, "post",
        lambda url, headers=None, json=None, timeout=None: FakeResponse(
            payload={"message": {"content": "A **loop** repeats code."}}
        ),
    )

    code = run.main([
        "--data-dir", str(tmp_path),
        "ask", "What is a loop?", "--backend", "ollama", "--page", "/module-2.html",
    ])

    assert code == 0
    assert "A loop repeats code." in capsys.readouterr().out


def test_ask_exit_code_on_error(tmp_path, monkeypatch, capsys):
    def refuse(url, headers=None, json=None, timeout=None):
        raise requests.exceptions.ConnectionError("Connection refused")

    monkeypatch.setattr(requests, "post", refuse)

    code = run.main(["--data-dir", str(tmp_path), "ask", "zzz", "--backend", "ollama", "--html"])

    out = capsys.readouterr().out
    assert code == 1
    assert "<p>⚠️ Connection refused</p>" in out


def test_test_backend_embedded(tmp_path, capsys):
    code = run.main(["--data-dir", str(tmp_path), "test-backend"])

    assert code == 0
    assert "embedded" in capsys.readouterr().out


def test_progress_command(tmp_path, capsys):
    run.main(["--data-dir", str(tmp_path), "progress", "--complete", "2", "--score", "70"])
    capsys.readouterr()

    code = run.main(["--data-dir", str(tmp_path), "progress", "--practice"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Modules completed: 1/6" in out
    assert "Average quiz score: 70%" in out
    assert "Practice problems: 1" in out


def test_ask_html_flag_prints_markup(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        requests, "post",
        lambda url, headers=None, json=None, timeout=None: FakeResponse(
            payload={"message": {"content": "Use `len()`."}}
        ),
    )
    args = ["--data-dir", str(tmp_path), "ask", "How long is a list?", "--backend", "ollama"]

    assert run.main(args) == 0
    text = capsys.readouterr().out
    assert run.main(args + ["--html"]) == 0
    markup = capsys.readouterr().out

    assert "Use len()." in text
    assert "<code>" not in text
    assert "<p>Use <code>len()</code>.</p>" in markup


def test_ask_parser_accepts_html_flag():
    args = run.build_parser().parse_args(["ask", "q", "--html"])

    assert args.html is True
    assert run.build_parser().parse_args(["ask", "q"]).html is False
