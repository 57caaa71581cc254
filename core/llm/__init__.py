# Core LLM Module
from .client import LLMClient, LLMUnavailableError, get_llm_client, get_llm
from .utils import parse_messages_to_str, split_advice_lines

__all__ = [
    "LLMClient",
    "LLMUnavailableError",
    "get_llm_client",
    "get_llm",
    "parse_messages_to_str",
    "split_advice_lines"
]
