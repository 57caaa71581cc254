from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from core.llm import LLMClient, get_llm
from config_loader import get_config


# Base Agent Class

class BaseAgent(ABC):
    """
    Abstract base class for agents that may consult the text-generation service.

    Usage:
        class AdviceAgent(BaseAgent):
            def get_agent_name(self) -> str:
                return "advice"

        agent = AdviceAgent()
        text = agent._call_llm(system_prompt, user_prompt)

    The LLM client is created on first use, so agents that never call it
    work without any API key configured.
    """

    def __init__(self, llm_client: Optional[LLMClient] = None):
        """Initialize agent with dependencies"""
        self._llm = llm_client
        self._config = get_config()

    @property
    def llm(self) -> LLMClient:
        """Access LLM client"""
        if self._llm is None:
            self._llm = get_llm()
        return self._llm

    @property
    def config(self) -> dict:
        """Access configuration"""
        return self._config

    @abstractmethod
    def get_agent_name(self) -> str:
        """Return agent name for logging and registry"""
        pass

    def _call_llm(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None
    ) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]
        return self.llm.chat(messages, temperature=temperature, max_tokens=max_tokens)


# Register Agent
_AGENT_REGISTRY: Dict[str, Type[BaseAgent]] = {}


def register_agent(agent_class: Type[BaseAgent]) -> Type[BaseAgent]:
    """Decorator to register an agent class"""
    _AGENT_REGISTRY[agent_class.__name__] = agent_class
    return agent_class


def get_agent(name: str, **kwargs: Any) -> Optional[BaseAgent]:
    """Get an agent instance by name"""
    agent_class = _AGENT_REGISTRY.get(name)
    if agent_class:
        return agent_class(**kwargs)
    return None


def list_agents() -> List[str]:
    """List all registered agent names"""
    return list(_AGENT_REGISTRY.keys())
