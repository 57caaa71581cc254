"""Tests for rule-based advice and the advice agent's fallback."""

import pytest

from agents.advice import AdviceAgent, calculate_progress, generate_daily_advice, generate_meal_advice
from agents.advice.config import DAILY_MESSAGES, MEAL_MESSAGES


@pytest.mark.parametrize("name, calories, expected", [
    ("ラーメン", 450, ["noodle"]),
    ("明太子パスタ", 620, ["noodle"]),
    ("唐揚げ", 450, ["fried"]),
    ("フライドポテト", 450, ["fried"]),
    ("カルボナーラ", 780, ["high_calorie"]),
    ("味噌汁", 60, ["low_calorie"]),
    ("ハンバーグ", 680, []),
    ("カレーライス", 700, []),
    ("春巻き", 300, []),
])
def test_meal_advice(name, calories, expected):
    assert generate_meal_advice(name, calories) == [MEAL_MESSAGES[k] for k in expected]


def test_progress_above_target():
    progress = calculate_progress(70, 65)
    assert progress.diff == 5.0
    assert progress.kcal_needed == 38500
    assert progress.estimated_days_to_goal == 77


def test_progress_fractional_difference():
    progress = calculate_progress(70.3, 70)
    assert progress.diff == 0.3
    assert progress.kcal_needed == 2310
    assert progress.estimated_days_to_goal == 5


def test_progress_at_or_below_target():
    progress = calculate_progress(64, 65)
    assert progress.diff == -1.0
    assert progress.kcal_needed == 0
    assert progress.estimated_days_to_goal == 0


def test_progress_needs_both_weights():
    assert calculate_progress(None, 65) is None
    assert calculate_progress(70, None) is None


def test_daily_advice_overeating_day():
    progress, lines = generate_daily_advice(2500, 100)
    assert progress is None
    assert lines == [
        DAILY_MESSAGES["no_weight"],
        "本日の摂取: 2500 kcal、消費: 100 kcal（差し引き: 2400 kcal）。",
        DAILY_MESSAGES["net_very_high"],
        DAILY_MESSAGES["high_intake"],
        DAILY_MESSAGES["low_burn"],
    ]


def test_daily_advice_with_goal():
    progress, lines = generate_daily_advice(1500.0, 1300.0, 70, 65)
    assert progress.kcal_needed == 38500
    assert lines[0] == (
        "目標まで 5 kg。およそ 38500 kcal のカロリー削減が必要です。"
        "標準的には一日あたり約 500 kcal の赤字を作ると約 77 日で到達します（目安）。"
    )
    assert lines[1] == "本日の摂取: 1500 kcal、消費: 1300 kcal（差し引き: 200 kcal）。"
    assert lines[2:] == [DAILY_MESSAGES["net_ok"]]


def test_daily_advice_goal_reached_and_deficit():
    _, lines = generate_daily_advice(1000, 1500, 60, 65)
    assert lines[0] == DAILY_MESSAGES["goal_reached"]
    assert DAILY_MESSAGES["net_low"] in lines
    assert DAILY_MESSAGES["low_intake"] in lines
    assert DAILY_MESSAGES["low_burn"] not in lines


def test_daily_advice_slight_surplus():
    _, lines = generate_daily_advice(1500, 1000)
    assert DAILY_MESSAGES["net_high"] in lines


# --- agent ---

class StubLLM:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def chat(self, messages, **kwargs):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.reply


def test_agent_uses_rules_when_llm_disabled():
    llm = StubLLM(reply="should not be used")
    agent = AdviceAgent(llm_client=llm, use_llm=False)
    advice = agent.meal_advice("ラーメン", 450)
    assert advice.source == "rules"
    assert advice.advice == [MEAL_MESSAGES["noodle"]]
    assert llm.calls == []


def test_agent_reads_use_llm_from_config(default_config):
    default_config["advice"]["use_llm"] = True
    assert AdviceAgent(llm_client=StubLLM()).use_llm is True


def test_agent_uses_llm_reply():
    llm = StubLLM(reply="- 野菜を足しましょう\n- 水分をとりましょう\n")
    advice = AdviceAgent(llm_client=llm, use_llm=True).daily_advice(1800, 300, 70, 65)
    assert advice.source == "llm"
    assert advice.advice_text == ["野菜を足しましょう", "水分をとりましょう"]
    # progress always comes from the rules
    assert advice.progress.kcal_needed == 38500
    assert llm.calls[0][0]["role"] == "system"


def test_agent_falls_back_when_llm_raises():
    llm = StubLLM(error=RuntimeError("quota exceeded"))
    advice = AdviceAgent(llm_client=llm, use_llm=True).meal_advice("唐揚げ", 450)
    assert advice.source == "rules"
    assert advice.advice == [MEAL_MESSAGES["fried"]]


def test_agent_falls_back_on_empty_reply():
    advice = AdviceAgent(llm_client=StubLLM(reply="   \n"), use_llm=True).daily_advice(2500, 100)
    assert advice.source == "rules"
    assert advice.advice_text[0] == DAILY_MESSAGES["no_weight"]


def test_agent_falls_back_without_api_key():
    # no llm_client injected and no key configured: building the client fails
    advice = AdviceAgent(use_llm=True).meal_advice("味噌汁", 60)
    assert advice.source == "rules"
    assert advice.advice == [MEAL_MESSAGES["low_calorie"]]


def test_advice_agent_is_registered():
    from agents.base import get_agent, list_agents

    assert "AdviceAgent" in list_agents()
    agent = get_agent("AdviceAgent", use_llm=False)
    assert agent.get_agent_name() == "advice"
    assert get_agent("NoSuchAgent") is None
