"""
Rule-based advice.

Pure functions of their arguments; used directly and as the fallback when
the text-generation service is disabled or fails.
"""
import math
from typing import List, Optional, Tuple

from agents.advice.config import (
    DAILY_MESSAGES,
    FRIED_MARKERS,
    HIGH_CALORIE_MEAL,
    HIGH_INTAKE,
    KCAL_PER_KG,
    LOW_BURN,
    LOW_CALORIE_MEAL,
    LOW_INTAKE,
    MEAL_MESSAGES,
    NET_HIGH,
    NET_LOW,
    NET_VERY_HIGH,
    NOODLE_MARKERS,
    SUGGESTED_DAILY_DEFICIT,
)
from agents.advice.models import WeightProgress
from core.units import format_number, round_half_up


def generate_meal_advice(name: str, calories: int) -> List[str]:
    """Canned advice keyed on calories and markers in the resolved meal name"""
    advice = []
    if calories > HIGH_CALORIE_MEAL:
        advice.append(MEAL_MESSAGES["high_calorie"])
    if any(marker in name for marker in NOODLE_MARKERS):
        advice.append(MEAL_MESSAGES["noodle"])
    if any(marker in name for marker in FRIED_MARKERS):
        advice.append(MEAL_MESSAGES["fried"])
    if calories < LOW_CALORIE_MEAL:
        advice.append(MEAL_MESSAGES["low_calorie"])
    return advice


def calculate_progress(
    current_weight: Optional[float],
    target_weight: Optional[float]
) -> Optional[WeightProgress]:
    if current_weight is None or target_weight is None:
        return None

    # positive: still above target
    diff = round(current_weight - target_weight, 2)
    kcal_needed = round_half_up(diff * KCAL_PER_KG) if diff > 0 else 0
    days = math.ceil(kcal_needed / SUGGESTED_DAILY_DEFICIT) if kcal_needed > 0 else 0

    return WeightProgress(
        current_weight=current_weight,
        target_weight=target_weight,
        diff=diff,
        kcal_needed=kcal_needed,
        estimated_days_to_goal=days
    )


def generate_daily_advice(
    today_intake: float,
    today_burn: float,
    current_weight: Optional[float] = None,
    target_weight: Optional[float] = None
) -> Tuple[Optional[WeightProgress], List[str]]:
    advice = []
    progress = calculate_progress(current_weight, target_weight)

    if progress is None:
        advice.append(DAILY_MESSAGES["no_weight"])
    elif progress.diff <= 0:
        advice.append(DAILY_MESSAGES["goal_reached"])
    else:
        advice.append(DAILY_MESSAGES["to_goal"].format(
            diff=format_number(progress.diff),
            kcal_needed=progress.kcal_needed,
            deficit=SUGGESTED_DAILY_DEFICIT,
            days=progress.estimated_days_to_goal
        ))

    net = today_intake - today_burn
    advice.append(DAILY_MESSAGES["summary"].format(
        intake=format_number(today_intake),
        burn=format_number(today_burn),
        net=format_number(net)
    ))

    if net > NET_VERY_HIGH:
        advice.append(DAILY_MESSAGES["net_very_high"])
    elif net > NET_HIGH:
        advice.append(DAILY_MESSAGES["net_high"])
    elif net < NET_LOW:
        advice.append(DAILY_MESSAGES["net_low"])
    else:
        advice.append(DAILY_MESSAGES["net_ok"])

    if today_intake > HIGH_INTAKE:
        advice.append(DAILY_MESSAGES["high_intake"])
    elif today_intake < LOW_INTAKE:
        advice.append(DAILY_MESSAGES["low_intake"])

    if today_burn < LOW_BURN:
        advice.append(DAILY_MESSAGES["low_burn"])

    return progress, advice
