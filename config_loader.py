import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "matcher": {
        "acceptance_threshold": 3,
        "exercise_substring_pass": False
    },
    "llm": {
        "api_key": "",
        "base_url": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "model": "gemini-1.5-flash",
        "timeout": 20
    },
    "advice": {
        "use_llm": False
    },
    "server": {
        "port": 3000
    }
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path) -> dict:
    """Load configuration from config.json, layered over DEFAULT_CONFIG"""
    if config_path is None:
        raise ValueError(f"Invalid config_path={config_path}")
    if not os.path.exists(config_path):
        logger.info("No config file at %s, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(config_path, "r", encoding="utf-8") as f:
        return _merge(DEFAULT_CONFIG, json.load(f))


# Lazy-loaded config singleton
_config: dict = None


def get_config(config_path: str = None) -> dict:
    """
    Get cached config.

    Path precedence on first load: explicit config_path, then the
    HEALTH_APP_CONFIG environment variable, then ./config.json.
    """
    global _config
    if _config is None:
        if config_path is None:
            config_path = os.environ.get("HEALTH_APP_CONFIG", "config.json")
        _config = load_config(config_path)
    return _config


def get_matcher_config() -> dict:
    """Get matcher configuration"""
    return get_config()["matcher"]


def get_llm_config() -> dict:
    """Get text-generation service configuration"""
    return get_config()["llm"]


# Convenience accessors
ACCEPTANCE_THRESHOLD = lambda: int(get_matcher_config()["acceptance_threshold"])
EXERCISE_SUBSTRING_PASS = lambda: bool(get_matcher_config().get("exercise_substring_pass", False))
LLM_API_KEY = lambda: os.environ.get("LLM_API_KEY") or get_llm_config().get("api_key", "")
LLM_BASE_URL = lambda: get_llm_config()["base_url"]
LLM_MODEL = lambda: get_llm_config().get("model", "gemini-1.5-flash")
ADVICE_USE_LLM = lambda: bool(get_config()["advice"].get("use_llm", False))
SERVER_PORT = lambda: int(os.environ.get("PORT") or get_config()["server"]["port"])
