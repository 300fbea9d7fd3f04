"""
PyLearn Tutor - Utils Package
"""

from .call_llm import LLMBackendError, call_llm, probe_backend
from .state import TutorApp

__all__ = ['LLMBackendError', 'call_llm', 'probe_backend', 'TutorApp']
