import copy

import pytest

import config_loader
import agents.matcher.resolver as resolver_module
from agents.matcher import Catalog


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Every test starts from the built-in defaults and a fresh resolver"""
    monkeypatch.setattr(config_loader, "_config", copy.deepcopy(config_loader.DEFAULT_CONFIG))
    monkeypatch.setattr(resolver_module, "_resolver", None)
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    return config_loader._config


@pytest.fixture
def small_meals():
    return Catalog("meal", [
        ("ラーメソ", 1),
        ("ラー", 2),
        ("cat", 3),
        ("bat", 4),
        ("abcdef", 5),
        ("Pizza", 750),
    ])


@pytest.fixture
def small_exercises():
    return Catalog("exercise", [
        ("ランニング", 12),
        ("Yoga", 3),
        ("cat", 1),
        ("bat", 2),
    ])
