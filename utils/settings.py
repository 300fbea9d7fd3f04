"""
================================================================================
PYLEARN TUTOR - SETTINGS
================================================================================
The tutor's configuration store: active mode, active backend, and one record
per backend kind.

RESOLUTION ORDER (first one set wins):
======================================
1. Value saved in the durable store (written only by update())
2. Environment variable (.env files are loaded here)
3. Built-in default from constants/

Every read goes back to the store, so a settings change made by another
process is picked up on the next dispatch.
================================================================================
"""

import logging
import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

from constants.defaults import (
    DEFAULT_MODE,
    KEY_BACKEND,
    KEY_EMBEDDED_FILE,
    KEY_EMBEDDED_PATH,
    KEY_EMBEDDED_REPO,
    KEY_MODE,
    KEY_OLLAMA_MODEL,
    KEY_OLLAMA_URL,
    KEY_OPENAI_KEY,
    KEY_OPENAI_MODEL,
    KEY_OPENAI_URL,
    MODES,
)
from constants.llm import (
    BACKEND_DESCRIPTIONS,
    BACKEND_EMBEDDED,
    BACKEND_OLLAMA,
    BACKEND_OPENAI,
    BACKENDS,
    DEFAULT_EMBEDDED_MODEL_FILE,
    DEFAULT_EMBEDDED_MODEL_REPO,
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_BASE_URL,
    DEFAULT_OPENAI_MODEL,
    ENV_EMBEDDED_MODEL_FILE,
    ENV_EMBEDDED_MODEL_PATH,
    ENV_EMBEDDED_MODEL_REPO,
    ENV_LLM_API_BASE_URL,
    ENV_LLM_API_KEY,
    ENV_LLM_MODEL,
    ENV_OLLAMA_BASE_URL,
    ENV_OLLAMA_MODEL,
    ENV_TUTOR_BACKEND,
    ENV_TUTOR_MODE,
)
from utils.storage import Storage

load_dotenv()

logger = logging.getLogger("tutor_logger")


# =============================================================================
# BACKEND RECORDS
# =============================================================================

@dataclass(frozen=True)
class EmbeddedConfig:
    model_id: str = DEFAULT_EMBEDDED_MODEL_REPO
    model_file: str = DEFAULT_EMBEDDED_MODEL_FILE
    model_path: str = ""  # local .gguf file, wins over model_id when set


@dataclass(frozen=True)
class LocalServerConfig:
    base_url: str = DEFAULT_OLLAMA_BASE_URL
    model: str = DEFAULT_OLLAMA_MODEL


@dataclass(frozen=True)
class RemoteAPIConfig:
    base_url: str = DEFAULT_OPENAI_BASE_URL
    model: str = DEFAULT_OPENAI_MODEL
    api_key: str = ""


# field name -> (store key, env var) for every backend record
_FIELD_SOURCES = {
    BACKEND_EMBEDDED: {
        "model_id": (KEY_EMBEDDED_REPO, ENV_EMBEDDED_MODEL_REPO),
        "model_file": (KEY_EMBEDDED_FILE, ENV_EMBEDDED_MODEL_FILE),
        "model_path": (KEY_EMBEDDED_PATH, ENV_EMBEDDED_MODEL_PATH),
    },
    BACKEND_OLLAMA: {
        "base_url": (KEY_OLLAMA_URL, ENV_OLLAMA_BASE_URL),
        "model": (KEY_OLLAMA_MODEL, ENV_OLLAMA_MODEL),
    },
    BACKEND_OPENAI: {
        "base_url": (KEY_OPENAI_URL, ENV_LLM_API_BASE_URL),
        "model": (KEY_OPENAI_MODEL, ENV_LLM_MODEL),
        "api_key": (KEY_OPENAI_KEY, ENV_LLM_API_KEY),
    },
}

_RECORD_TYPES = {
    BACKEND_EMBEDDED: EmbeddedConfig,
    BACKEND_OLLAMA: LocalServerConfig,
    BACKEND_OPENAI: RemoteAPIConfig,
}


def _check_backend(backend: str) -> str:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Choose one of: {', '.join(BACKENDS)}")
    return backend


class TutorSettings:
    """Durable tutor settings. All writes go through update()."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def _resolve(self, key: str, env_var: str, default):
        value = self.storage.get(key)
        if value not in (None, ""):
            return value
        return os.getenv(env_var) or default

    @property
    def mode(self) -> str:
        mode = self._resolve(KEY_MODE, ENV_TUTOR_MODE, DEFAULT_MODE)
        return mode if mode in MODES else DEFAULT_MODE

    @property
    def backend(self) -> str:
        backend = self._resolve(KEY_BACKEND, ENV_TUTOR_BACKEND, BACKEND_EMBEDDED)
        return backend if backend in BACKENDS else BACKEND_EMBEDDED

    def backend_config(self, backend: str):
        """Build the current record for ``backend`` from store, env and defaults."""
        record_type = _RECORD_TYPES[_check_backend(backend)]
        values = {}
        for field in fields(record_type):
            key, env_var = _FIELD_SOURCES[backend][field.name]
            values[field.name] = str(self._resolve(key, env_var, field.default))
        return record_type(**values)

    def active_config(self):
        return self.backend_config(self.backend)

    @staticmethod
    def describe(backend: str) -> tuple[str, str]:
        """(display name, description) for ``backend``."""
        return BACKEND_DESCRIPTIONS[_check_backend(backend)]

    def update(self, mode: str = None, backend: str = None, config: dict = None) -> None:
        """
        Apply a settings change and persist it.

        Args:
            mode: New tutoring mode ("guide" or "solution")
            backend: New active backend
            config: Field values for the backend named by ``backend``
                    (or the active one when ``backend`` is None)

        Raises:
            ValueError: On an unknown mode, backend, or config field.
                        Nothing is written when validation fails.
        """
        if mode is not None and mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}. Choose one of: {', '.join(MODES)}")
        if backend is not None:
            _check_backend(backend)

        target = backend or self.backend
        sources = _FIELD_SOURCES[target]
        config = {k: v for k, v in (config or {}).items() if v is not None}
        unknown = set(config) - set(sources)
        if unknown:
            raise ValueError(
                f"Unknown setting(s) for {target}: {', '.join(sorted(unknown))}"
            )

        if mode is not None:
            self.storage.set(KEY_MODE, mode)
        if backend is not None:
            self.storage.set(KEY_BACKEND, backend)
        for name, value in config.items():
            # An empty key never overwrites a saved one
            if name == "api_key" and not value:
                continue
            key, _ = sources[name]
            self.storage.set(key, str(value))

        logger.info(f"Settings updated: mode={mode} backend={backend} fields={sorted(config)}")
