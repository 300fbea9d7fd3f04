"""
================================================================================
DEFAULT VALUES CONSTANTS
================================================================================
This file contains default values for tutor modes, curriculum tracks, and the
durable store keys. This is the single source of truth for application
defaults.
================================================================================
"""

# =============================================================================
# TUTOR MODES
# =============================================================================
MODE_GUIDE = "guide"        # Socratic, hint-driven
MODE_SOLUTION = "solution"  # Direct, solution-first
MODES = (MODE_GUIDE, MODE_SOLUTION)
DEFAULT_MODE = MODE_GUIDE

# =============================================================================
# CURRICULUM TRACKS
# =============================================================================
TRACK_STARTER = "starter"  # zero-experience "Python Starter" projects
TRACK_MODULE = "module"    # the six beginner modules
TRACK_AI = "ai"            # CS50 AI weeks
TRACKS = (TRACK_STARTER, TRACK_MODULE, TRACK_AI)

TOTAL_MODULES = 6

# =============================================================================
# DURABLE STORE KEYS
# =============================================================================
STORE_KEY_PREFIX = "pylearn_"

KEY_MODE = "tutorMode"
KEY_BACKEND = "tutorBackend"
KEY_EMBEDDED_REPO = "embeddedModelRepo"
KEY_EMBEDDED_FILE = "embeddedModelFile"
KEY_EMBEDDED_PATH = "embeddedModelPath"
KEY_OLLAMA_URL = "ollamaUrl"
KEY_OLLAMA_MODEL = "ollamaModel"
KEY_OPENAI_URL = "openaiUrl"
KEY_OPENAI_MODEL = "openaiModel"
KEY_OPENAI_KEY = "openaiKey"
KEY_PROGRESS = "progress"

# =============================================================================
# DEFAULT PAGE
# =============================================================================
DEFAULT_PAGE = "/index.html"
