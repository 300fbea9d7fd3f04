"""
================================================================================
PYLEARN TUTOR - EMBEDDED MODEL HOLDER
================================================================================
Holds the in-process llama.cpp model used by the "embedded" backend.

Loading is idempotent and memoized: the first load() starts ONE loading task,
every concurrent caller awaits that same task, and all of them receive the
same handle. This matters because the first load downloads ~500MB.

If loading fails, every waiter sees the error and the memo is cleared so a
later load() can try again.
================================================================================
"""

import asyncio
import logging

from constants.llm import DEFAULT_EMBEDDED_CONTEXT_LENGTH
from utils.types import LoadProgress

logger = logging.getLogger("tutor_logger")


def load_llama(config, report):
    """
    Build a llama.cpp model from an EmbeddedConfig.

    Runs in a worker thread. ``report(text, progress)`` publishes coarse
    loading progress; llama.cpp itself gives no finer-grained hook.
    """
    try:
        from llama_cpp import Llama
    except ImportError:
        raise ImportError(
            "llama-cpp-python is not installed. Run: pip install 'pylearn-tutor[embedded]'"
        )

    report("Loading model...", 0.0)
    if config.model_path:
        llm = Llama(
            model_path=config.model_path,
            n_ctx=DEFAULT_EMBEDDED_CONTEXT_LENGTH,
            verbose=False,
        )
    else:
        report(f"Fetching {config.model_id} ({config.model_file})...", 0.1)
        llm = Llama.from_pretrained(
            repo_id=config.model_id,
            filename=config.model_file,
            n_ctx=DEFAULT_EMBEDDED_CONTEXT_LENGTH,
            verbose=False,
        )
    report("Model ready", 1.0)
    return llm


class EmbeddedModel:
    def __init__(self, loader=load_llama):
        self.engine = None
        self._loader = loader
        self._task = None
        self._listeners = []

    @property
    def is_ready(self) -> bool:
        return self.engine is not None

    @property
    def is_loading(self) -> bool:
        return self._task is not None and not self._task.done()

    async def load(self, config, on_progress=None):
        """
        Load the model once and return the handle.

        Args:
            config: EmbeddedConfig naming the model to load
            on_progress: Optional callable receiving LoadProgress updates

        Returns:
            The loaded engine (the same object for every caller)
        """
        if self.engine is not None:
            return self.engine

        if on_progress is not None:
            self._listeners.append(on_progress)
        if self._task is None:
            self._task = asyncio.ensure_future(self._load(config))
        return await asyncio.shield(self._task)

    async def _load(self, config):
        loop = asyncio.get_running_loop()

        def publish(update):
            for listener in list(self._listeners):
                listener(update)

        def report(text, progress):
            loop.call_soon_threadsafe(publish, LoadProgress(text=text, progress=progress))

        logger.info(f"Loading embedded model: {config.model_path or config.model_id}")
        try:
            engine = await asyncio.to_thread(self._loader, config, report)
        except Exception as e:
            logger.error(f"Embedded model load failed: {e}")
            self._task = None
            self._listeners = []
            raise

        self.engine = engine
        self._listeners = []
        logger.info("Embedded model loaded")
        return engine
