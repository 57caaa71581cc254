"""
Advice Agent Module
Rule-based meal / daily advice with an optional text-generation front end.
"""

from .generator import AdviceAgent
from .models import DailyAdvice, DailyTotals, MealAdvice, WeightProgress
from .rules import calculate_progress, generate_daily_advice, generate_meal_advice

__all__ = [
    "AdviceAgent",
    "DailyAdvice",
    "DailyTotals",
    "MealAdvice",
    "WeightProgress",
    "calculate_progress",
    "generate_daily_advice",
    "generate_meal_advice"
]
