import os
import tempfile

import pytest

# Keep the tutor's log file out of the source tree while testing
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="tutor-logs-"))

from utils.state import TutorApp  # noqa: E402

TUTOR_ENV_VARS = (
    "TUTOR_MODE",
    "TUTOR_BACKEND",
    "OLLAMA_BASE_URL",
    "OLLAMA_MODEL",
    "LLM_API_BASE_URL",
    "LLM_API_KEY",
    "LLM_MODEL",
    "EMBEDDED_MODEL_REPO",
    "EMBEDDED_MODEL_FILE",
    "EMBEDDED_MODEL_PATH",
    "TUTOR_REQUEST_TIMEOUT",
    "TUTOR_DATA_DIR",
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in TUTOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app(tmp_path):
    return TutorApp.from_data_dir(tmp_path)
