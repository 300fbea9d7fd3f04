"""
Application state handed to the tutor flow.

One TutorApp holds everything that outlives a single question: the durable
settings, the saved progress, and the embedded model holder. Nodes receive it
through their constructor instead of reaching for module-level globals.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from constants.paths import DEFAULT_DATA_DIR_NAME, ENV_DATA_DIR, STORE_FILE_NAME
from utils.embedded_model import EmbeddedModel
from utils.progress import ProgressStore
from utils.settings import TutorSettings
from utils.storage import Storage


def default_data_dir() -> Path:
    return Path(os.getenv(ENV_DATA_DIR) or Path.home() / DEFAULT_DATA_DIR_NAME)


@dataclass
class TutorApp:
    settings: TutorSettings
    progress: ProgressStore
    model: EmbeddedModel = field(default_factory=EmbeddedModel)

    @classmethod
    def from_data_dir(cls, data_dir=None, model: EmbeddedModel = None) -> "TutorApp":
        """Build the app state on top of ``<data_dir>/tutor_store.yaml``."""
        data_dir = Path(data_dir) if data_dir else default_data_dir()
        storage = Storage(str(data_dir / STORE_FILE_NAME))
        return cls(
            settings=TutorSettings(storage),
            progress=ProgressStore(storage),
            model=model or EmbeddedModel(),
        )
