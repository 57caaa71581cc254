"""
LLM Client Wrapper
Wraps an OpenAI-compatible text-generation endpoint behind a single chat() call.
"""
import logging
from datetime import datetime
from typing import List, Dict, Optional
from openai import OpenAI
from config_loader import get_llm_config, LLM_API_KEY, LLM_BASE_URL, LLM_MODEL
from core.llm.utils import parse_messages_to_str

logger = logging.getLogger(__name__)


class LLMUnavailableError(RuntimeError):
    """Raised when no API key is configured for the text-generation service"""


def get_llm_client() -> OpenAI:
    """Build the OpenAI-compatible client from config"""
    api_key = LLM_API_KEY()
    if not api_key:
        raise LLMUnavailableError("llm.api_key is not configured")
    return OpenAI(
        api_key=api_key,
        base_url=LLM_BASE_URL(),
        timeout=get_llm_config().get("timeout", 20)
    )


class LLMClient:
    """LLM client wrapper"""

    def __init__(self, model: Optional[str] = None, client: Optional[OpenAI] = None):
        self.client = client or get_llm_client()
        self.model = model or LLM_MODEL()

    def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> str:
        """Send a chat request and return the reply text"""
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        start_time = datetime.now()
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            **kwargs
        )
        duration_ms = (datetime.now() - start_time).total_seconds() * 1000
        content = resp.choices[0].message.content or ""
        logger.debug(
            "model <%s> answered in %.0f ms\n- query:\n%s\n- response:\n%s",
            self.model, duration_ms, parse_messages_to_str(messages), content
        )
        return content


# Global client instance
_llm_client: Optional[LLMClient] = None


def get_llm() -> LLMClient:
    """Get the global LLM client instance"""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
