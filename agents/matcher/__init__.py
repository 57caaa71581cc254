"""
Matcher Module
Free-text to catalog resolution for meals and exercises.
"""

from .models import Catalog, MatchResult
from .scorer import edit_distance
from .resolver import (
    MEAL_CATALOG,
    EXERCISE_CATALOG,
    CatalogResolver,
    get_resolver,
    nearest_match,
    resolve_exercise,
    resolve_meal,
    substring_match
)

__all__ = [
    "Catalog",
    "MatchResult",
    "edit_distance",
    "MEAL_CATALOG",
    "EXERCISE_CATALOG",
    "CatalogResolver",
    "get_resolver",
    "nearest_match",
    "resolve_exercise",
    "resolve_meal",
    "substring_match"
]
