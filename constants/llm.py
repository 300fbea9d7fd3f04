"""
================================================================================
LLM BACKEND CONSTANTS
================================================================================
This file contains all constants related to the tutor's LLM backends, API
configuration, and model defaults. This is the single source of truth for
backend configuration.

BACKENDS (exactly one is active at a time):
==========================================
1. embedded → llama.cpp model loaded inside this process
2. ollama   → Local Ollama server (POST /api/chat)
3. openai   → Any OpenAI-compatible API (MLX-server, llama.cpp server, ...)
================================================================================
"""

# =============================================================================
# BACKEND NAMES
# =============================================================================
BACKEND_EMBEDDED = "embedded"
BACKEND_OLLAMA = "ollama"
BACKEND_OPENAI = "openai"

BACKENDS = (BACKEND_EMBEDDED, BACKEND_OLLAMA, BACKEND_OPENAI)

# Shown by the CLI next to each backend
BACKEND_DESCRIPTIONS = {
    BACKEND_EMBEDDED: (
        "Embedded (llama.cpp)",
        "Runs inside this process. ~500MB download, works offline after.",
    ),
    BACKEND_OLLAMA: (
        "Ollama (Local)",
        "Connect to Ollama running on your computer.",
    ),
    BACKEND_OPENAI: (
        "OpenAI-Compatible (MLX/llama.cpp)",
        "Connect to any OpenAI-compatible API (MLX-server, llama.cpp, etc.)",
    ),
}

# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================
# Active mode / backend
ENV_TUTOR_MODE = "TUTOR_MODE"
ENV_TUTOR_BACKEND = "TUTOR_BACKEND"

# Embedded model
ENV_EMBEDDED_MODEL_REPO = "EMBEDDED_MODEL_REPO"
ENV_EMBEDDED_MODEL_FILE = "EMBEDDED_MODEL_FILE"
ENV_EMBEDDED_MODEL_PATH = "EMBEDDED_MODEL_PATH"

# Ollama
ENV_OLLAMA_BASE_URL = "OLLAMA_BASE_URL"
ENV_OLLAMA_MODEL = "OLLAMA_MODEL"

# Generic OpenAI-compatible API
ENV_LLM_API_BASE_URL = "LLM_API_BASE_URL"
ENV_LLM_API_KEY = "LLM_API_KEY"
ENV_LLM_MODEL = "LLM_MODEL"

# HTTP
ENV_REQUEST_TIMEOUT = "TUTOR_REQUEST_TIMEOUT"

# Logging
ENV_LOG_DIR = "LOG_DIR"

# =============================================================================
# DEFAULT MODEL VALUES
# =============================================================================
DEFAULT_EMBEDDED_MODEL_REPO = "bartowski/Llama-3.2-1B-Instruct-GGUF"
DEFAULT_EMBEDDED_MODEL_FILE = "*Q4_K_M.gguf"
DEFAULT_EMBEDDED_CONTEXT_LENGTH = 4096

DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama3.2:1b"

DEFAULT_OPENAI_BASE_URL = "http://localhost:8080/v1"
DEFAULT_OPENAI_MODEL = "default"

# =============================================================================
# API PATHS
# =============================================================================
OLLAMA_CHAT_PATH = "/api/chat"
OLLAMA_TAGS_PATH = "/api/tags"
OPENAI_CHAT_PATH = "/chat/completions"
OPENAI_MODELS_PATH = "/models"

# =============================================================================
# LLM CONFIGURATION
# =============================================================================
DEFAULT_TEMPERATURE = 0.7  # Balanced creativity vs consistency
DEFAULT_MAX_TOKENS = 500   # Keeps tutor answers short

DEFAULT_REQUEST_TIMEOUT = 120  # seconds, per chat call
PROBE_TIMEOUT = 5.0            # seconds, connectivity checks

# Number of model names listed by the Ollama probe
PROBE_MAX_MODELS_SHOWN = 3
