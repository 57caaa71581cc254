# Core Module
from .llm import get_llm, LLMClient

__all__ = ["get_llm", "LLMClient"]
