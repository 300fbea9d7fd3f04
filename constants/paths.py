"""
================================================================================
PATH AND FILE CONSTANTS
================================================================================
This file contains all constants related to paths, directories, and file names.
This is the single source of truth for file system configuration.
================================================================================
"""

# =============================================================================
# DIRECTORY NAMES
# =============================================================================
LOGS_DIR_NAME = "logs"
DEFAULT_DATA_DIR_NAME = ".pylearn"  # created under the user's home directory
STORE_FILE_NAME = "tutor_store.yaml"

# Environment variable that relocates the data directory
ENV_DATA_DIR = "TUTOR_DATA_DIR"

# =============================================================================
# LOG FILE FORMAT
# =============================================================================
LOG_FILE_PREFIX = "tutor_calls_"
LOG_DATE_FORMAT = "%Y%m%d"
