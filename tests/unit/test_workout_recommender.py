"""
Модульные тесты рекомендаций тренировок.

Покрываемые функции:
- determine_fitness_level: ключевые слова профиля и объём активности за 30 дней
- extract_fitness_goals: enum-значения и свободный текст
- analyze_activity_pattern: длительность и частота по категориям тренировок
- calculate_workout_score / generate_workout_recommendations: скоринг, фильтр, топ-3
"""

import pytest

from app.core.workout_catalog import WORKOUT_CATALOG
from app.schemas.fitness import UserProfile
from app.schemas.workout import Difficulty
from app.services import workout_recommender
from app.services.workout_recommender import (
    ActivityPattern, FitnessSnapshot, analyze_activity_pattern, calculate_workout_score,
    determine_fitness_level, extract_fitness_goals, generate_workout_recommendations,
    get_workout_by_id,
)
from tests.factories import FIXED_NOW, make_category, daily_series

pytestmark = pytest.mark.unit

TODAY = FIXED_NOW.date()


def profile_with_goal(goal):
    return UserProfile(id="u", name="Sam", fitness_goal=goal)


# ---------------------------------------------------------------------------
# determine_fitness_level
# ---------------------------------------------------------------------------

def test_profile_keyword_beginner_wins():
    logs = daily_series("run", 90, range(0, 30))
    assert determine_fitness_level(profile_with_goal("Beginner, just starting"), logs, TODAY) == Difficulty.beginner


def test_profile_keyword_advanced_wins():
    assert determine_fitness_level(profile_with_goal("advanced athlete"), [], TODAY) == Difficulty.advanced


def test_level_beginner_without_logs():
    assert determine_fitness_level(None, [], TODAY) == Difficulty.beginner


@pytest.mark.parametrize("active_days, value, expected", [
    (5, 100, Difficulty.beginner),
    (10, 10, Difficulty.beginner),
    (10, 30, Difficulty.intermediate),
    (25, 30, Difficulty.intermediate),
    (25, 60, Difficulty.advanced),
])
def test_level_from_activity_volume(active_days, value, expected):
    logs = daily_series("run", value, range(0, active_days))
    assert determine_fitness_level(profile_with_goal("build_muscle"), logs, TODAY) == expected


# ---------------------------------------------------------------------------
# extract_fitness_goals
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("goal, expected", [
    (None, {"general_fitness"}),
    ("lose_weight", {"weight_loss"}),
    ("build_muscle", {"muscle_gain", "strength"}),
    ("gain_weight", {"muscle_gain", "strength"}),
    ("improve_endurance", {"endurance"}),
    ("maintain_health", {"general_fitness"}),
    ("muscle_gain", {"muscle_gain", "strength"}),
    ("more stretch and mobility", {"flexibility"}),
    ("get lean and improve cardio", {"weight_loss", "strength", "endurance"}),
    ("feel happier", {"general_fitness"}),
])
def test_extract_fitness_goals(goal, expected):
    assert extract_fitness_goals(profile_with_goal(goal)) == expected


# ---------------------------------------------------------------------------
# analyze_activity_pattern
# ---------------------------------------------------------------------------

def test_activity_pattern_defaults_without_signal():
    pattern = analyze_activity_pattern([], None, TODAY)
    assert pattern == ActivityPattern(avg_duration=30, frequency=2)


def test_activity_pattern_ignores_non_workout_categories():
    steps = make_category()
    logs = daily_series("steps", 8000, range(0, 10))
    assert analyze_activity_pattern(logs, [steps], TODAY) == ActivityPattern(avg_duration=30, frequency=2)


def test_activity_pattern_from_minutes_category():
    workout = make_category("gym", "Gym", "minutes", 45)
    logs = daily_series("gym", 45, range(0, 14, 2))  # 7 сессий за 13 дней

    pattern = analyze_activity_pattern(logs, [workout], TODAY)

    assert pattern.avg_duration == pytest.approx(45)
    assert pattern.frequency == pytest.approx(7 / (13 / 7))


# ---------------------------------------------------------------------------
# Скоринг
# ---------------------------------------------------------------------------

def beginner_muscle_snapshot():
    return FitnessSnapshot(
        fitness_level=Difficulty.beginner,
        goals={"muscle_gain", "strength"},
        pattern=ActivityPattern(avg_duration=30, frequency=2),
    )


def test_workout_scores_for_beginner_muscle_builder():
    scores = {w.id: calculate_workout_score(w, beginner_muscle_snapshot()) for w in WORKOUT_CATALOG}

    assert scores["strength_muscle_gain_intermediate"] == pytest.approx(0.65)
    assert scores["flexibility_recovery_all"] == pytest.approx(0.5667, abs=1e-3)
    assert scores["beginner-bodyweight"] == pytest.approx(0.5333, abs=1e-3)
    assert scores["cardio_endurance_advanced"] == pytest.approx(0.1667, abs=1e-3)


def snapshot_at(level):
    # цели и длительность не совпадают ни с одним шаблоном, остаётся только уровень
    return FitnessSnapshot(
        fitness_level=level,
        goals={"flexibility"},
        pattern=ActivityPattern(avg_duration=10, frequency=5),
    )


def catalog_workout(workout_id):
    return next(w for w in WORKOUT_CATALOG if w.id == workout_id)


def test_partial_level_credit_for_beginner_on_intermediate_workout():
    workout = catalog_workout("strength_muscle_gain_intermediate")
    assert calculate_workout_score(workout, snapshot_at(Difficulty.beginner)) == pytest.approx(0.15)


def test_no_level_credit_for_advanced_on_intermediate_workout():
    workout = catalog_workout("strength_muscle_gain_intermediate")
    assert calculate_workout_score(workout, snapshot_at(Difficulty.advanced)) == 0.0


def test_no_level_credit_for_intermediate_on_advanced_workout():
    workout = catalog_workout("cardio_endurance_advanced")
    assert calculate_workout_score(workout, snapshot_at(Difficulty.intermediate)) == 0.0


def test_recommendations_top_three_sorted(profile):
    recommendations = generate_workout_recommendations(profile, [], FIXED_NOW)

    assert [r.id for r in recommendations] == [
        "strength_muscle_gain_intermediate",
        "flexibility_recovery_all",
        "beginner-bodyweight",
    ]
    scores = [r.confidence_score for r in recommendations]
    assert scores == sorted(scores, reverse=True)
    assert all(0.3 < score <= 1.0 for score in scores)


def test_recommendation_reasoning_is_deterministic(profile):
    first = generate_workout_recommendations(profile, [], FIXED_NOW)
    second = generate_workout_recommendations(profile, [], FIXED_NOW)
    assert first == second
    assert first[0].reasoning == "Aligns with your muscle gain and strength goals."


def test_reasoning_mentions_level_equipment_and_habit():
    recommendations = generate_workout_recommendations(profile_with_goal("lose_weight"), [], FIXED_NOW)
    hiit = next(r for r in recommendations if r.id == "hiit_fat_loss_beginner")
    assert "Perfect for your beginner fitness level" in hiit.reasoning
    assert "No equipment needed" in hiit.reasoning
    assert "consistent exercise habit" in hiit.reasoning


def test_catalog_is_not_mutated(profile):
    catalog_before = [w.model_dump() for w in WORKOUT_CATALOG]

    recommendations = generate_workout_recommendations(profile, [], FIXED_NOW)
    top = recommendations[0]
    top.fitness_goals.append("changed")
    top.equipment_needed.clear()
    top.exercises.pop()

    assert [w.model_dump() for w in WORKOUT_CATALOG] == catalog_before
    assert all(w.confidence_score == 0.0 and w.reasoning == "" for w in WORKOUT_CATALOG)
    assert generate_workout_recommendations(profile, [], FIXED_NOW)[0].fitness_goals == ["muscle_gain", "strength"]


def test_fallback_when_scoring_fails(profile, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(workout_recommender, "build_fitness_snapshot", broken)

    [fallback] = generate_workout_recommendations(profile, [], FIXED_NOW)
    assert fallback.id == "fallback-workout"
    assert fallback.confidence_score > 0.3


def test_get_workout_by_id():
    assert get_workout_by_id("hiit_fat_loss_beginner").title == "HIIT Fat Burner - Beginner"
    assert get_workout_by_id("missing") is None


def test_get_workout_by_id_returns_copy():
    workout = get_workout_by_id("beginner-bodyweight")
    workout.fitness_goals.append("changed")
    assert get_workout_by_id("beginner-bodyweight").fitness_goals == ["general_fitness", "weight_loss"]
