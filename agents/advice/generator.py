import logging
from typing import Optional

from agents.base import BaseAgent, register_agent
from agents.advice.config import (
    ADVICE_SYSTEM_PROMPT,
    DAILY_ADVICE_PROMPT,
    MEAL_ADVICE_PROMPT,
)
from agents.advice.models import DailyAdvice, MealAdvice
from agents.advice.rules import generate_daily_advice, generate_meal_advice
from core.llm import LLMClient, split_advice_lines
from core.units import format_number

logger = logging.getLogger(__name__)


@register_agent
class AdviceAgent(BaseAgent):
    """
    Produces meal and daily advice.

    When `use_llm` is on, the text-generation service is asked first; the
    rule-based advice is returned whenever that is off, raises, or replies
    with nothing usable. Progress figures always come from the rules.
    """

    def __init__(self, llm_client: Optional[LLMClient] = None, use_llm: Optional[bool] = None):
        super().__init__(llm_client)
        if use_llm is None:
            use_llm = bool(self.config.get("advice", {}).get("use_llm", False))
        self.use_llm = use_llm

    def get_agent_name(self) -> str:
        return "advice"

    def meal_advice(self, name: str, calories: int) -> MealAdvice:
        if self.use_llm:
            lines = self._ask(MEAL_ADVICE_PROMPT.format(name=name, calories=calories))
            if lines:
                return MealAdvice(name=name, calories=calories, advice=lines, source="llm")
        return MealAdvice(name=name, calories=calories, advice=generate_meal_advice(name, calories))

    def daily_advice(
        self,
        today_intake: float,
        today_burn: float,
        current_weight: Optional[float] = None,
        target_weight: Optional[float] = None
    ) -> DailyAdvice:
        progress, rule_lines = generate_daily_advice(
            today_intake, today_burn, current_weight, target_weight
        )
        lines, source = rule_lines, "rules"

        if self.use_llm:
            prompt = DAILY_ADVICE_PROMPT.format(
                intake=format_number(today_intake),
                burn=format_number(today_burn),
                current_weight="unknown" if current_weight is None else format_number(current_weight),
                target_weight="unknown" if target_weight is None else format_number(target_weight)
            )
            llm_lines = self._ask(prompt)
            if llm_lines:
                lines, source = llm_lines, "llm"

        return DailyAdvice(
            today_intake=today_intake,
            today_burn=today_burn,
            progress=progress,
            advice_text=lines,
            source=source
        )

    def _ask(self, user_prompt: str):
        try:
            text = self._call_llm(ADVICE_SYSTEM_PROMPT, user_prompt, temperature=0.7)
        except Exception as e:
            logger.warning("Advice generation failed, using rule-based advice: %s", e)
            return []
        lines = split_advice_lines(text)
        if not lines:
            logger.warning("Advice generation returned no text, using rule-based advice")
        return lines
