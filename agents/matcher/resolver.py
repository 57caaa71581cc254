"""
Catalog Resolver
Maps free-text meal / exercise names onto catalog entries.

Two passes are available:
  - substring: first key (declaration order) that contains the query or is
    contained in it; exact, distance 0.
  - nearest: smallest edit distance over every key, first key wins ties,
    accepted only when the distance is within the acceptance threshold.

The meal path runs substring then nearest; the exercise path runs nearest
only unless `exercise_substring_pass` is enabled.
"""
import logging
from typing import Optional

from agents.matcher.config import (
    DEFAULT_ACCEPTANCE_THRESHOLD,
    EXERCISE_ITEMS,
    MEAL_ITEMS,
    UNUSABLE_DISTANCE,
)
from agents.matcher.models import Catalog, MatchResult
from agents.matcher.scorer import edit_distance

logger = logging.getLogger(__name__)


# Built once at import, shared read-only for the process lifetime
MEAL_CATALOG = Catalog("meal", MEAL_ITEMS)
EXERCISE_CATALOG = Catalog("exercise", EXERCISE_ITEMS)


def substring_match(query: str, catalog: Catalog) -> MatchResult:
    """First key k with k in query or query in k; query must already be trimmed"""
    if not query:
        return MatchResult.no_match()
    for key in catalog:
        if key in query or query in key:
            return MatchResult.hit(key, catalog[key], 0, "substring")
    return MatchResult.no_match()


def nearest_match(
    query: Optional[str],
    catalog: Catalog,
    threshold: int = DEFAULT_ACCEPTANCE_THRESHOLD
) -> MatchResult:
    """Closest key by edit distance, or no-match when it is farther than threshold"""
    best = None
    best_score = UNUSABLE_DISTANCE

    for key in catalog:
        dist = edit_distance(query, key)
        if dist < best_score:
            best_score = dist
            best = key

    if best is None or best_score > threshold:
        return MatchResult.no_match()
    return MatchResult.hit(best, catalog[best], best_score, "nearest")


class CatalogResolver:
    """
    Resolves queries against an injected pair of catalogs.

    Holds no mutable state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        meal_catalog: Catalog = MEAL_CATALOG,
        exercise_catalog: Catalog = EXERCISE_CATALOG,
        threshold: int = DEFAULT_ACCEPTANCE_THRESHOLD,
        exercise_substring_pass: bool = False
    ):
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ValueError(f"threshold must be a non-negative integer, got {threshold!r}")
        self._meal_catalog = meal_catalog
        self._exercise_catalog = exercise_catalog
        self._threshold = threshold
        self._exercise_substring_pass = exercise_substring_pass

    @property
    def meal_catalog(self) -> Catalog:
        return self._meal_catalog

    @property
    def exercise_catalog(self) -> Catalog:
        return self._exercise_catalog

    @property
    def threshold(self) -> int:
        return self._threshold

    def resolve_meal(self, query: Optional[str]) -> MatchResult:
        result = self._resolve_substring_first(query, self._meal_catalog)
        self._log_result("meal", query, result)
        return result

    def resolve_exercise(self, query: Optional[str]) -> MatchResult:
        if self._exercise_substring_pass:
            result = self._resolve_substring_first(query, self._exercise_catalog)
        else:
            result = nearest_match(query, self._exercise_catalog, self._threshold)
        self._log_result("exercise", query, result)
        return result

    def _resolve_substring_first(self, query: Optional[str], catalog: Catalog) -> MatchResult:
        trimmed = (query or "").strip()
        if not trimmed:
            return MatchResult.no_match()

        result = substring_match(trimmed, catalog)
        if result.matched:
            return result
        return nearest_match(trimmed, catalog, self._threshold)

    @staticmethod
    def _log_result(kind: str, query: Optional[str], result: MatchResult):
        if result.matched:
            logger.debug(
                "%s query %r -> %r (%s, distance=%d)",
                kind, query, result.name, result.strategy, result.distance
            )
        else:
            logger.info("%s query %r: no catalog entry within threshold", kind, query)


# Global resolver over the production catalogs
_resolver: Optional[CatalogResolver] = None


def get_resolver() -> CatalogResolver:
    """Get the process-wide resolver, built from config on first use"""
    global _resolver
    if _resolver is None:
        from config_loader import ACCEPTANCE_THRESHOLD, EXERCISE_SUBSTRING_PASS
        _resolver = CatalogResolver(
            MEAL_CATALOG,
            EXERCISE_CATALOG,
            threshold=ACCEPTANCE_THRESHOLD(),
            exercise_substring_pass=EXERCISE_SUBSTRING_PASS()
        )
    return _resolver


def resolve_meal(query: Optional[str]) -> MatchResult:
    """Substring-first resolution against the meal catalog"""
    return get_resolver().resolve_meal(query)


def resolve_exercise(query: Optional[str]) -> MatchResult:
    """Nearest-match resolution against the exercise catalog"""
    return get_resolver().resolve_exercise(query)
