"""
PyLearn Tutor - Constants Package

This package contains all configuration constants, prompt data,
and default values used throughout the application.
"""

from .llm import (
    # Backend Names
    BACKEND_EMBEDDED,
    BACKEND_OLLAMA,
    BACKEND_OPENAI,
    BACKENDS,
    BACKEND_DESCRIPTIONS,

    # Environment Variable Names
    ENV_TUTOR_MODE,
    ENV_TUTOR_BACKEND,
    ENV_EMBEDDED_MODEL_REPO,
    ENV_EMBEDDED_MODEL_FILE,
    ENV_EMBEDDED_MODEL_PATH,
    ENV_OLLAMA_BASE_URL,
    ENV_OLLAMA_MODEL,
    ENV_LLM_API_BASE_URL,
    ENV_LLM_API_KEY,
    ENV_LLM_MODEL,
    ENV_REQUEST_TIMEOUT,
    ENV_LOG_DIR,

    # Default Model Values
    DEFAULT_EMBEDDED_MODEL_REPO,
    DEFAULT_EMBEDDED_MODEL_FILE,
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_BASE_URL,
    DEFAULT_OPENAI_MODEL,

    # LLM Configuration
    DEFAULT_TEMPERATURE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT,
)

from .paths import (
    # Directory Names
    LOGS_DIR_NAME,
    DEFAULT_DATA_DIR_NAME,
    STORE_FILE_NAME,
    ENV_DATA_DIR,

    # Log File Format
    LOG_FILE_PREFIX,
    LOG_DATE_FORMAT,
)

from .defaults import (
    # Modes and Tracks
    MODE_GUIDE,
    MODE_SOLUTION,
    MODES,
    DEFAULT_MODE,
    TRACK_STARTER,
    TRACK_MODULE,
    TRACK_AI,
    TRACKS,
    TOTAL_MODULES,
    DEFAULT_PAGE,
)

__all__ = [
    # Backend Names
    'BACKEND_EMBEDDED',
    'BACKEND_OLLAMA',
    'BACKEND_OPENAI',
    'BACKENDS',
    'BACKEND_DESCRIPTIONS',

    # Environment Variable Names
    'ENV_TUTOR_MODE',
    'ENV_TUTOR_BACKEND',
    'ENV_EMBEDDED_MODEL_REPO',
    'ENV_EMBEDDED_MODEL_FILE',
    'ENV_EMBEDDED_MODEL_PATH',
    'ENV_OLLAMA_BASE_URL',
    'ENV_OLLAMA_MODEL',
    'ENV_LLM_API_BASE_URL',
    'ENV_LLM_API_KEY',
    'ENV_LLM_MODEL',
    'ENV_REQUEST_TIMEOUT',
    'ENV_LOG_DIR',

    # Default Model Values
    'DEFAULT_EMBEDDED_MODEL_REPO',
    'DEFAULT_EMBEDDED_MODEL_FILE',
    'DEFAULT_OLLAMA_BASE_URL',
    'DEFAULT_OLLAMA_MODEL',
    'DEFAULT_OPENAI_BASE_URL',
    'DEFAULT_OPENAI_MODEL',

    # LLM Configuration
    'DEFAULT_TEMPERATURE',
    'DEFAULT_MAX_TOKENS',
    'DEFAULT_REQUEST_TIMEOUT',

    # Directory Names
    'LOGS_DIR_NAME',
    'DEFAULT_DATA_DIR_NAME',
    'STORE_FILE_NAME',
    'ENV_DATA_DIR',

    # Log File Format
    'LOG_FILE_PREFIX',
    'LOG_DATE_FORMAT',

    # Modes and Tracks
    'MODE_GUIDE',
    'MODE_SOLUTION',
    'MODES',
    'DEFAULT_MODE',
    'TRACK_STARTER',
    'TRACK_MODULE',
    'TRACK_AI',
    'TRACKS',
    'TOTAL_MODULES',
    'DEFAULT_PAGE',
]
