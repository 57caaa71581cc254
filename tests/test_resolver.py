"""Tests for meal / exercise resolution."""
import pytest

import config_loader
from agents.matcher import (
    Catalog,
    CatalogResolver,
    get_resolver,
    nearest_match,
    resolve_exercise,
    resolve_meal,
    substring_match,
)


# --- production catalogs ---

def test_exact_meal_name():
    result = resolve_meal("ラーメン")
    assert result.matched
    assert (result.name, result.value) == ("ラーメン", 450)
    assert result.distance == 0


def test_meal_query_is_trimmed():
    result = resolve_meal("  ラーメン \n")
    assert result.name == "ラーメン"


def test_meal_superstring_query_hits_catalog_key():
    result = resolve_meal("唐揚げ弁当")
    assert (result.name, result.value) == ("唐揚げ", 450)
    assert result.strategy == "substring"


def test_meal_fragment_query_hits_first_key_containing_it():
    # カレーライス is declared before バターチキンカレー and the other curries
    result = resolve_meal("カレー")
    assert result.name == "カレーライス"


def test_matcher_is_character_literal_not_phonetic():
    # no substring relation; only the trailing げ lines up, so the distance
    # sits exactly on the threshold
    result = resolve_meal("からあげ")
    assert result.strategy == "nearest"
    assert result.name == "唐揚げ"
    assert result.distance == 3


def test_romanized_meal_name_has_no_match():
    assert resolve_meal("karaage").to_dict() == {"matched": False}


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_meal_query_has_no_match(query):
    assert not resolve_meal(query).matched


@pytest.mark.parametrize("query", ["", None])
def test_empty_exercise_query_has_no_match(query):
    assert not resolve_exercise(query).matched


def test_exact_exercise_name():
    result = resolve_exercise("ウォーキング")
    assert (result.name, result.value) == ("ウォーキング", 5)


def test_exercise_typo():
    result = resolve_exercise("ジョギンク")
    assert (result.name, result.value, result.distance) == ("ジョギング", 10, 1)


def test_exercise_tie_goes_to_earlier_declaration():
    # distance 2 to both ウォーキング and ウォーキング（速歩）
    result = resolve_exercise("ウォーキング速歩")
    assert result.name == "ウォーキング"
    assert result.distance == 2


def test_very_long_query_has_no_match():
    assert not resolve_meal("x" * 500).matched
    assert not resolve_exercise("x" * 500).matched


def test_repeated_calls_are_identical():
    first = resolve_meal("ハンバーグ定食")
    for _ in range(5):
        assert resolve_meal("ハンバーグ定食") == first
    first = resolve_exercise("スクワト")
    for _ in range(5):
        assert resolve_exercise("スクワト") == first


# --- injected catalogs ---

def test_substring_wins_over_closer_edit_distance(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    result = resolver.resolve_meal("ラーメン")
    # ラーメソ is one edit away but ラー is contained in the query
    assert result.name == "ラー"
    assert result.strategy == "substring"


def test_threshold_gate(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    assert resolver.resolve_meal("abcxyz").name == "abcdef"
    assert not resolver.resolve_meal("abwxyz").matched


def test_custom_threshold(small_meals, small_exercises):
    strict = CatalogResolver(small_meals, small_exercises, threshold=0)
    assert not strict.resolve_exercise("yogo").matched
    assert strict.resolve_exercise("yoga").name == "Yoga"


@pytest.mark.parametrize("threshold", [-1, 1.5, "3", True])
def test_invalid_threshold_rejected(small_meals, small_exercises, threshold):
    with pytest.raises(ValueError):
        CatalogResolver(small_meals, small_exercises, threshold=threshold)


def test_tie_break_is_declaration_order(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    for _ in range(3):
        assert resolver.resolve_meal("hat").name == "cat"
        assert resolver.resolve_exercise("hat").name == "cat"


def test_case_folding_applies_only_to_nearest_pass(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    meal = resolver.resolve_meal("PIZZA")
    assert (meal.name, meal.value, meal.strategy, meal.distance) == ("Pizza", 750, "nearest", 0)
    # "Pizza" is not a literal substring and the whole query is too far away
    assert not resolver.resolve_meal("PIZZA night").matched
    assert resolver.resolve_exercise("YOGO").name == "Yoga"


def test_substring_pass_is_case_sensitive():
    catalog = Catalog("meal", [("AB", 1), ("abc", 2)])
    resolver = CatalogResolver(catalog, catalog)
    result = resolver.resolve_meal("abc")
    assert (result.name, result.value, result.strategy) == ("abc", 2, "substring")


@pytest.mark.parametrize("query", ["x", " "])
def test_short_exercise_query_hits_first_two_character_key(query):
    # the exercise query is not trimmed; any one-character query is two
    # edits from 水泳, the first two-character key
    result = resolve_exercise(query)
    assert (result.name, result.distance, result.strategy) == ("水泳", 2, "nearest")


def test_exercise_path_has_no_substring_pass_by_default(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    assert not resolver.resolve_exercise("朝のランニングを一時間").matched


def test_exercise_substring_pass_can_be_enabled(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises, exercise_substring_pass=True)
    result = resolver.resolve_exercise("朝のランニングを一時間")
    assert (result.name, result.strategy) == ("ランニング", "substring")


def test_empty_catalog_never_matches():
    empty = Catalog("meal", [])
    resolver = CatalogResolver(empty, empty)
    assert not resolver.resolve_meal("ラーメン").matched
    assert not resolver.resolve_exercise("ラーメン").matched


def test_returned_name_is_always_a_catalog_key(small_meals, small_exercises):
    resolver = CatalogResolver(small_meals, small_exercises)
    for query in ["ラーメン", "hat", "abcxyz", "pizza", "yogo"]:
        result = resolver.resolve_meal(query)
        if result.matched:
            assert result.name in small_meals
            assert result.value == small_meals[result.name]


def test_pass_helpers(small_meals):
    assert substring_match("", small_meals).matched is False
    assert substring_match("ラー", small_meals).name == "ラーメソ"
    assert nearest_match("hat", small_meals, threshold=0).matched is False
    assert nearest_match("hat", small_meals, threshold=1).name == "cat"


# --- configuration ---

def test_global_resolver_reads_threshold_from_config(default_config):
    default_config["matcher"]["acceptance_threshold"] = 0
    assert get_resolver().threshold == 0
    assert not resolve_exercise("ジョギンク").matched


def test_global_resolver_is_built_once():
    assert get_resolver() is get_resolver()


def test_global_resolver_reads_substring_flag(default_config):
    default_config["matcher"]["exercise_substring_pass"] = True
    assert resolve_exercise("朝のジョギング").name == "ジョギング"
