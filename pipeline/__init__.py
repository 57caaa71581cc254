# Estimate Pipeline Module
from .estimate_pipeline import (
    EstimatePipeline,
    ExerciseEstimateOutput,
    MealEstimateOutput,
    MealRegistrationOutput,
    calories_burned,
    parse_duration
)
from .records import InMemoryRecordLog, MealRecord

__all__ = [
    "EstimatePipeline",
    "ExerciseEstimateOutput",
    "MealEstimateOutput",
    "MealRegistrationOutput",
    "calories_burned",
    "parse_duration",
    "InMemoryRecordLog",
    "MealRecord"
]
