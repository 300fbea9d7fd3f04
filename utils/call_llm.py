"""
================================================================================
PYLEARN TUTOR - LLM WRAPPER
================================================================================
The tutor's LLM calling interface. One chat call per question, sent to the
ONE backend the user selected:

    embedded → llama.cpp model inside this process (must already be loaded)
    ollama   → POST {base_url}/api/chat
    openai   → POST {base_url}/chat/completions (optional Bearer key)

Every call either returns the reply text or raises. There are no retries and
no streaming; converting an exception into a failed outcome is the caller's
job (see CallLLM in nodes.py).

LOGGING:
========
All prompts, responses and failures are logged to
logs/tutor_calls_YYYYMMDD.log (directory overridable with LOG_DIR).
================================================================================
"""

# =============================================================================
# IMPORTS
# =============================================================================
import logging
import os
import time
from datetime import datetime

import requests

from constants.llm import (
    BACKEND_EMBEDDED,
    BACKEND_OLLAMA,
    BACKEND_OPENAI,
    BACKENDS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
    ENV_LOG_DIR,
    ENV_REQUEST_TIMEOUT,
    OLLAMA_CHAT_PATH,
    OLLAMA_TAGS_PATH,
    OPENAI_CHAT_PATH,
    OPENAI_MODELS_PATH,
    PROBE_MAX_MODELS_SHOWN,
    PROBE_TIMEOUT,
)
from constants.paths import LOG_DATE_FORMAT, LOG_FILE_PREFIX, LOGS_DIR_NAME
from utils.types import ProbeResult

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
# Package root directory (parent of utils/)
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

log_directory = os.getenv(ENV_LOG_DIR, os.path.join(_PACKAGE_DIR, LOGS_DIR_NAME))
os.makedirs(log_directory, exist_ok=True)

log_file = os.path.join(
    log_directory, f"{LOG_FILE_PREFIX}{datetime.now().strftime(LOG_DATE_FORMAT)}.log"
)

# Named logger shared by the whole tutor
logger = logging.getLogger("tutor_logger")
logger.setLevel(logging.INFO)
logger.propagate = False

# Only add handler if not already present (prevents duplicate handlers on reimport)
if not logger.handlers:
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)


class LLMBackendError(Exception):
    """A backend answered with an error status, or isn't ready to answer."""


def build_messages(system_prompt: str, user_message: str) -> list[dict]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_message},
    ]


def _request_timeout() -> float:
    try:
        return float(os.getenv(ENV_REQUEST_TIMEOUT, DEFAULT_REQUEST_TIMEOUT))
    except ValueError:
        return float(DEFAULT_REQUEST_TIMEOUT)


def _auth_headers(api_key: str) -> dict:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


# =============================================================================
# MAIN LLM CALLING FUNCTION
# =============================================================================
def call_llm(backend: str, config, system_prompt: str, user_message: str, engine=None) -> str:
    """
    Send one (system prompt, user message) pair to the selected backend.

    Args:
        backend: "embedded", "ollama" or "openai"
        config: The backend's settings record (see utils/settings.py)
        system_prompt: Tutor instructions
        user_message: The learner's question
        engine: Loaded llama.cpp handle, only used by "embedded"

    Returns:
        str: The reply text

    Raises:
        LLMBackendError: Error status from a server, or model not loaded
        ValueError: Unknown backend name
        requests.exceptions.RequestException: Network failures
    """
    start_time = time.time()
    logger.info(f"BACKEND: {backend}")
    logger.info(f"PROMPT: {system_prompt}\n---\nUSER: {user_message}")

    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}")

    try:
        # IMPORTANT: Exactly one backend is tried - no fallback between them
        if backend == BACKEND_EMBEDDED:
            print("  🧠 Embedded model...", end=" ", flush=True)
            response_text = _call_embedded(engine, system_prompt, user_message)
        elif backend == BACKEND_OLLAMA:
            print(f"  🦙 Ollama ({config.model})...", end=" ", flush=True)
            response_text = _call_ollama(config, system_prompt, user_message)
        else:
            print(f"  ☁️  {config.base_url} ({config.model})...", end=" ", flush=True)
            response_text = _call_openai(config, system_prompt, user_message)
    except Exception as e:
        logger.error(f"LLM call error: {e}")
        print("✗")
        raise

    elapsed = time.time() - start_time
    logger.info(f"RESPONSE: {response_text}")
    print(f"✓ {len(response_text):,} chars ({elapsed:.1f}s)")
    return response_text


# =============================================================================
# BACKEND-SPECIFIC IMPLEMENTATIONS
# =============================================================================

def _call_embedded(engine, system_prompt: str, user_message: str) -> str:
    """
    Chat with the in-process llama.cpp model.

    The handle must have been loaded beforehand (EmbeddedModel.load);
    no loading is attempted here.
    """
    if engine is None:
        raise LLMBackendError(
            "Embedded model not loaded yet. Please wait for it to finish loading."
        )

    response = engine.create_chat_completion(
        messages=build_messages(system_prompt, user_message),
        temperature=DEFAULT_TEMPERATURE,
        max_tokens=DEFAULT_MAX_TOKENS,
    )
    return response["choices"][0]["message"]["content"]


def _call_ollama(config, system_prompt: str, user_message: str) -> str:
    """
    Call a local Ollama server through its native /api/chat endpoint.
    """
    url = f"{config.base_url.rstrip('/')}{OLLAMA_CHAT_PATH}"
    payload = {
        "model": config.model,
        "messages": build_messages(system_prompt, user_message),
        "stream": False,
    }

    response = requests.post(
        url,
        headers={"Content-Type": "application/json"},
        json=payload,
        timeout=_request_timeout(),
    )
    if not response.ok:
        raise LLMBackendError(f"Ollama error: {response.status_code}. Is Ollama running?")
    return response.json()["message"]["content"]


def _call_openai(config, system_prompt: str, user_message: str) -> str:
    """
    Call any OpenAI-compatible chat-completions API.

    Works with MLX-server, llama.cpp server, LM Studio, vLLM and hosted
    OpenAI-style APIs. The key is optional for local servers.
    """
    url = f"{config.base_url.rstrip('/')}{OPENAI_CHAT_PATH}"
    payload = {
        "model": config.model,
        "messages": build_messages(system_prompt, user_message),
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    }

    response = requests.post(
        url,
        headers=_auth_headers(config.api_key),
        json=payload,
        timeout=_request_timeout(),
    )
    if not response.ok:
        raise LLMBackendError(f"API error: {response.status_code}. {response.text}")
    return response.json()["choices"][0]["message"]["content"]


# =============================================================================
# CONNECTIVITY PROBES
# =============================================================================
def probe_backend(backend: str, config) -> ProbeResult:
    """
    Check whether a backend is reachable. Never raises.

    The embedded backend is always reported ready: it loads on first use.
    """
    try:
        if backend == BACKEND_EMBEDDED:
            return ProbeResult(True, "Embedded model ready (loads on first use)")

        if backend == BACKEND_OLLAMA:
            response = requests.get(
                f"{config.base_url.rstrip('/')}{OLLAMA_TAGS_PATH}",
                timeout=PROBE_TIMEOUT,
            )
            if not response.ok:
                raise LLMBackendError("Cannot connect")
            models = [m.get("name", "unknown") for m in response.json().get("models") or []]
            shown = ", ".join(models[:PROBE_MAX_MODELS_SHOWN])
            more = "..." if len(models) > PROBE_MAX_MODELS_SHOWN else ""
            return ProbeResult(True, f"Connected! Models: {shown}{more}")

        if backend == BACKEND_OPENAI:
            response = requests.get(
                f"{config.base_url.rstrip('/')}{OPENAI_MODELS_PATH}",
                headers=_auth_headers(config.api_key),
                timeout=PROBE_TIMEOUT,
            )
            if not response.ok:
                raise LLMBackendError("Cannot connect")
            return ProbeResult(True, "Connected to API!")

        return ProbeResult(False, "Unknown backend")
    except Exception as e:
        logger.warning(f"Probe of {backend} failed: {e}")
        return ProbeResult(False, str(e))
