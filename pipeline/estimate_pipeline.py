"""
Estimate Pipeline
Connects the catalog resolver to its consumers: calorie estimates, meal
registration with advice, and the daily advice summary.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from agents.advice import AdviceAgent, DailyAdvice
from agents.matcher import CatalogResolver, get_resolver
from core.units import round_half_up
from pipeline.records import InMemoryRecordLog, MealRecord, RecordSink

logger = logging.getLogger(__name__)

MEAL_NOT_FOUND = "該当料理が見つかりませんでした（手動入力してください）"
EXERCISE_NOT_FOUND = "該当運動が見つかりません（手動入力してください）"
MEAL_INPUT_NOT_FOUND = "「{query}」に該当する料理が見つかりませんでした。入力を確認してください。"


def parse_duration(duration: Any) -> float:
    """Minutes as a positive finite number; numeric strings are accepted"""
    if isinstance(duration, bool):
        raise ValueError(f"Invalid duration: {duration!r}")
    try:
        minutes = float(duration)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid duration: {duration!r}")
    if not math.isfinite(minutes) or minutes <= 0:
        raise ValueError(f"Duration must be a positive number of minutes, got {duration!r}")
    return minutes


def calories_burned(kcal_per_minute: int, duration: Any) -> int:
    return round_half_up(kcal_per_minute * parse_duration(duration))


# Pipeline Output

@dataclass
class MealEstimateOutput:
    """Catalog calories for a typed meal name"""
    success: bool
    match: Optional[str] = None
    calories: Optional[int] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "message": self.message}
        return {"success": True, "match": self.match, "calories": self.calories}


@dataclass
class ExerciseEstimateOutput:
    """Calories burned for a typed exercise name and duration"""
    success: bool
    match: Optional[str] = None
    calories_burned: Optional[int] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "message": self.message}
        return {"success": True, "match": self.match, "calories_burned": self.calories_burned}


@dataclass
class MealRegistrationOutput:
    """Result of registering a free-text meal"""
    success: bool
    detected_meal: Optional[str] = None
    calories: Optional[int] = None
    advice: List[str] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "message": self.message}
        return {
            "success": True,
            "detected_meal": self.detected_meal,
            "calories": self.calories,
            "advice": self.advice
        }


# Estimate Pipeline

class EstimatePipeline:
    def __init__(
        self,
        resolver: Optional[CatalogResolver] = None,
        records: Optional[RecordSink] = None,
        advisor: Optional[AdviceAgent] = None
    ):
        self.resolver = resolver or get_resolver()
        self.records = records if records is not None else InMemoryRecordLog()
        self.advisor = advisor or AdviceAgent()

    def estimate_meal(self, meal_name: str) -> MealEstimateOutput:
        result = self.resolver.resolve_meal(meal_name)
        if not result.matched:
            return MealEstimateOutput(success=False, message=MEAL_NOT_FOUND)
        return MealEstimateOutput(success=True, match=result.name, calories=result.value)

    def estimate_exercise(self, exercise_name: str, duration: Any) -> ExerciseEstimateOutput:
        minutes = parse_duration(duration)
        result = self.resolver.resolve_exercise(exercise_name)
        if not result.matched:
            return ExerciseEstimateOutput(success=False, message=EXERCISE_NOT_FOUND)
        return ExerciseEstimateOutput(
            success=True,
            match=result.name,
            calories_burned=calories_burned(result.value, minutes)
        )

    def register_meal(self, login_id: str, meal_input: str) -> MealRegistrationOutput:
        result = self.resolver.resolve_meal(meal_input)
        if not result.matched:
            return MealRegistrationOutput(
                success=False,
                message=MEAL_INPUT_NOT_FOUND.format(query=meal_input)
            )

        self.records.append_meal(MealRecord(
            login_id=login_id,
            meal_name=result.name,
            calories=result.value
        ))
        logger.info("Recorded meal '%s' (%d kcal) for %s", result.name, result.value, login_id)

        advice = self.advisor.meal_advice(result.name, result.value)
        return MealRegistrationOutput(
            success=True,
            detected_meal=result.name,
            calories=result.value,
            advice=advice.advice
        )

    def daily_advice(
        self,
        today_intake: float,
        today_burn: float,
        current_weight: Optional[float] = None,
        target_weight: Optional[float] = None
    ) -> DailyAdvice:
        return self.advisor.daily_advice(today_intake, today_burn, current_weight, target_weight)
