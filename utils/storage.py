"""
Durable key-value store backed by a single YAML file.

Keys are namespaced with the ``pylearn_`` prefix. Read and write problems are
logged and never raised, so a broken store degrades to defaults.
"""

import logging
import os

import yaml

from constants.defaults import STORE_KEY_PREFIX

logger = logging.getLogger("tutor_logger")


class Storage:
    def __init__(self, path: str):
        self.path = path

    def _load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Storage read error: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default=None):
        """Return the stored value for ``key``, or ``default`` when unset."""
        value = self._load().get(f"{STORE_KEY_PREFIX}{key}")
        return default if value is None else value

    def set(self, key: str, value) -> None:
        data = self._load()
        data[f"{STORE_KEY_PREFIX}{key}"] = value
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, sort_keys=True, allow_unicode=True)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Storage write error: {e}")
