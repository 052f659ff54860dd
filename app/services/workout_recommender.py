"""
Рекомендации тренировок: скоринг справочника шаблонов по профилю
пользователя (уровень, цели, привычная длительность и частота).

Итоговый балл = 0.30 * уровень + 0.40 * цели + 0.20 * длительность + 0.10 * бонус.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Set

from app.core.config import settings
from app.core.workout_catalog import WORKOUT_CATALOG, FALLBACK_WORKOUT
from app.schemas.fitness import DailyLog, FitnessGoal, TrackingCategory, UserProfile
from app.schemas.workout import Difficulty, WorkoutRecommendation, WorkoutType

logger = logging.getLogger(__name__)

ACTIVITY_WINDOW_DAYS = 30
DEFAULT_SESSION_MINUTES = 30
DEFAULT_SESSIONS_PER_WEEK = 2

PARTIAL_MATCH_LEVELS = {Difficulty.beginner, Difficulty.intermediate}

GOAL_TAGS_BY_PROFILE_GOAL = {
    FitnessGoal.lose_weight.value: ["weight_loss"],
    FitnessGoal.gain_weight.value: ["muscle_gain", "strength"],
    FitnessGoal.build_muscle.value: ["muscle_gain", "strength"],
    FitnessGoal.improve_endurance.value: ["endurance"],
    FitnessGoal.maintain_health.value: ["general_fitness"],
    FitnessGoal.other.value: ["general_fitness"],
}

# Ключевые слова свободного текста -> теги целей
GOAL_KEYWORDS = [
    (("weight", "lose", "fat"), ["weight_loss"]),
    (("muscle", "strength", "bulk"), ["muscle_gain", "strength"]),
    (("endurance", "cardio", "stamina"), ["endurance"]),
    (("flexibility", "stretch", "mobility"), ["flexibility"]),
    (("tone", "lean"), ["weight_loss", "strength"]),
]


@dataclass(frozen=True)
class ActivityPattern:
    avg_duration: float  # минуты за сессию
    frequency: float  # сессий в неделю


@dataclass(frozen=True)
class FitnessSnapshot:
    fitness_level: Difficulty
    goals: Set[str]
    pattern: ActivityPattern


def _recent_logs(logs: Sequence[DailyLog], today: date) -> List[DailyLog]:
    cutoff = today - timedelta(days=ACTIVITY_WINDOW_DAYS)
    return [log for log in logs if cutoff <= log.date <= today]


def determine_fitness_level(
        profile: Optional[UserProfile],
        logs: Sequence[DailyLog],
        today: date
) -> Difficulty:
    if profile and profile.fitness_goal:
        goal = profile.fitness_goal.lower()
        if "beginner" in goal or "start" in goal:
            return Difficulty.beginner
        if "advanced" in goal or "expert" in goal:
            return Difficulty.advanced

    day_totals: Dict[date, float] = {}
    for log in _recent_logs(logs, today):
        day_totals[log.date] = day_totals.get(log.date, 0) + log.value

    active_days = [total for total in day_totals.values() if total > 0]
    if not active_days:
        return Difficulty.beginner

    avg_daily_activity = sum(active_days) / len(active_days)

    if len(active_days) < 8 or avg_daily_activity < 20:
        return Difficulty.beginner
    if len(active_days) >= 20 and avg_daily_activity >= 45:
        return Difficulty.advanced
    return Difficulty.intermediate


def extract_fitness_goals(profile: Optional[UserProfile]) -> Set[str]:
    if not profile or not profile.fitness_goal:
        return {"general_fitness"}

    goal = profile.fitness_goal.strip().lower()
    if goal in GOAL_TAGS_BY_PROFILE_GOAL:
        return set(GOAL_TAGS_BY_PROFILE_GOAL[goal])

    goals: Set[str] = set()
    for keywords, tags in GOAL_KEYWORDS:
        if any(keyword in goal for keyword in keywords):
            goals.update(tags)

    return goals or {"general_fitness"}


def is_workout_category(category: TrackingCategory) -> bool:
    name = category.name.lower()
    return "workout" in name or "exercise" in name or "min" in category.unit.lower()


def analyze_activity_pattern(
        logs: Sequence[DailyLog],
        categories: Optional[Sequence[TrackingCategory]],
        today: date
) -> ActivityPattern:
    """Типичная длительность сессии и число сессий в неделю по логам тренировок"""
    default = ActivityPattern(avg_duration=DEFAULT_SESSION_MINUTES, frequency=DEFAULT_SESSIONS_PER_WEEK)
    if not categories:
        return default

    workout_ids = {category.id for category in categories if is_workout_category(category)}
    workout_logs = [
        log for log in _recent_logs(logs, today)
        if log.category_id in workout_ids and log.value > 0
    ]
    if not workout_logs:
        return default

    avg_duration = sum(log.value for log in workout_logs) / len(workout_logs)

    session_days = {log.date for log in workout_logs}
    span_days = (today - min(session_days)).days + 1
    weeks_of_data = max(1.0, span_days / 7)

    return ActivityPattern(avg_duration=avg_duration, frequency=len(session_days) / weeks_of_data)


def build_fitness_snapshot(
        profile: Optional[UserProfile],
        logs: Sequence[DailyLog],
        categories: Optional[Sequence[TrackingCategory]],
        today: date
) -> FitnessSnapshot:
    return FitnessSnapshot(
        fitness_level=determine_fitness_level(profile, logs, today),
        goals=extract_fitness_goals(profile),
        pattern=analyze_activity_pattern(logs, categories, today)
    )


def _difficulty_score(workout: WorkoutRecommendation, level: Difficulty) -> float:
    if workout.difficulty == level:
        return 1.0
    # Частичное совпадение только между beginner и intermediate
    if {workout.difficulty, level} == PARTIAL_MATCH_LEVELS:
        return 0.5
    return 0.0


def _goal_score(workout: WorkoutRecommendation, goals: Set[str]) -> float:
    if not workout.fitness_goals:
        return 0.0
    matches = sum(1 for goal in workout.fitness_goals if goal in goals)
    return matches / len(workout.fitness_goals)


def _duration_score(workout: WorkoutRecommendation, typical_duration: float) -> float:
    if typical_duration <= 0:
        return 0.0
    return max(0.0, 1 - abs(workout.duration - typical_duration) / typical_duration)


def _pattern_bonus(workout: WorkoutRecommendation, frequency: float) -> float:
    if frequency >= 4 and workout.workout_type == WorkoutType.flexibility:
        return 1.0
    if frequency < 3 and workout.difficulty == Difficulty.beginner:
        return 1.0
    return 0.0


def calculate_workout_score(workout: WorkoutRecommendation, snapshot: FitnessSnapshot) -> float:
    score = (
        0.30 * _difficulty_score(workout, snapshot.fitness_level)
        + 0.40 * _goal_score(workout, snapshot.goals)
        + 0.20 * _duration_score(workout, snapshot.pattern.avg_duration)
        + 0.10 * _pattern_bonus(workout, snapshot.pattern.frequency)
    )
    return min(round(score, 4), 1.0)


def generate_reasoning(workout: WorkoutRecommendation, snapshot: FitnessSnapshot) -> str:
    reasons = []

    if workout.difficulty == snapshot.fitness_level:
        reasons.append(f"Perfect for your {snapshot.fitness_level.value} fitness level")

    matching_goals = [goal for goal in workout.fitness_goals if goal in snapshot.goals]
    if matching_goals:
        readable = " and ".join(goal.replace("_", " ") for goal in matching_goals)
        reasons.append(f"Aligns with your {readable} goals")

    if abs(workout.duration - snapshot.pattern.avg_duration) <= 5:
        reasons.append(f"{workout.duration} minutes fits your typical workout duration")

    if not workout.equipment_needed:
        reasons.append("No equipment needed - perfect for home workouts")

    if snapshot.pattern.frequency < 3 and workout.difficulty == Difficulty.beginner:
        reasons.append("Great for building a consistent exercise habit")

    if not reasons:
        return "This workout matches your fitness profile and goals."
    return ". ".join(reasons) + "."


def generate_workout_recommendations(
        profile: Optional[UserProfile],
        logs: Sequence[DailyLog],
        now: datetime,
        categories: Optional[Sequence[TrackingCategory]] = None,
        catalog: Sequence[WorkoutRecommendation] = WORKOUT_CATALOG
) -> List[WorkoutRecommendation]:
    try:
        snapshot = build_fitness_snapshot(profile, logs or [], categories, now.date())
        logger.info(
            f"Workout snapshot: level={snapshot.fitness_level.value}, goals={sorted(snapshot.goals)}, "
            f"avg_duration={snapshot.pattern.avg_duration:.1f}, frequency={snapshot.pattern.frequency:.1f}"
        )

        scored = []
        for workout in catalog:
            score = calculate_workout_score(workout, snapshot)
            if score > settings.WORKOUT_MIN_SCORE:
                scored.append((score, workout))

        scored.sort(key=lambda item: item[0], reverse=True)

        return [
            workout.model_copy(update={
                "confidence_score": score,
                "reasoning": generate_reasoning(workout, snapshot),
                "created_at": now,
            }, deep=True)
            for score, workout in scored[:settings.WORKOUT_MAX_RESULTS]
        ]
    except Exception as e:
        logger.exception(f"Workout recommendation failed: {e}")
        return [FALLBACK_WORKOUT.model_copy(update={"created_at": now}, deep=True)]


def get_workout_by_id(workout_id: str) -> Optional[WorkoutRecommendation]:
    workout = next((workout for workout in WORKOUT_CATALOG if workout.id == workout_id), None)
    return workout.model_copy(deep=True) if workout is not None else None
