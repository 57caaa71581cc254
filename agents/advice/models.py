"""
Advice Agent Models
Pydantic models for meal and daily advice.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class WeightProgress(BaseModel):
    """Distance from the target weight"""
    current_weight: float = Field(..., description="Latest recorded weight (kg)")
    target_weight: float = Field(..., description="Target weight (kg)")
    diff: float = Field(..., description="current - target, rounded to 0.01 kg")
    kcal_needed: int = Field(..., ge=0, description="Deficit still required (kcal)")
    estimated_days_to_goal: int = Field(..., ge=0, description="Days at the suggested daily deficit")


class DailyTotals(BaseModel):
    """Request body for daily advice"""
    today_intake: float = Field(0, ge=0, description="Calories eaten today (kcal)")
    today_burn: float = Field(0, ge=0, description="Calories burned by exercise today (kcal)")
    current_weight: Optional[float] = Field(None, gt=0, description="Latest weight (kg)")
    target_weight: Optional[float] = Field(None, gt=0, description="Target weight (kg)")


class DailyAdvice(BaseModel):
    """Daily summary with advice lines"""
    today_intake: float
    today_burn: float
    progress: Optional[WeightProgress] = None
    advice_text: List[str] = Field(default_factory=list)
    source: Literal["rules", "llm"] = "rules"


class MealAdvice(BaseModel):
    """Advice for a single resolved meal"""
    name: str
    calories: int
    advice: List[str] = Field(default_factory=list)
    source: Literal["rules", "llm"] = "rules"
