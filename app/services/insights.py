"""
Точка входа движка аналитики целей и рекомендаций.

Каждая функция - чистая функция среза данных пользователя и момента
времени now; срез не мутируется.
"""
import random
from datetime import datetime
from typing import List, Optional, Sequence

from app.schemas.fitness import DailyLog, TrackingCategory, UserProfile
from app.schemas.goal import GoalAnalysis, GoalAdjustmentSuggestion, DailySummary
from app.schemas.motivation import MotivationalMessage
from app.schemas.nutrition import NutritionRecommendation
from app.schemas.workout import WorkoutRecommendation
from app.services import goal_adjustment, goal_progress, motivation_service
from app.services import nutrition_recommender, workout_recommender


def analyze_goals(
        profile: Optional[UserProfile],
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime
) -> List[GoalAnalysis]:
    if not profile or not categories:
        return []
    return goal_progress.analyze_goal_progress(categories, logs or [], now)


def generate_motivational_messages(
        profile: Optional[UserProfile],
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime,
        rng: Optional[random.Random] = None
) -> List[MotivationalMessage]:
    return motivation_service.generate_motivational_messages(profile, categories, logs, now, rng=rng)


def generate_goal_adjustments(
        profile: Optional[UserProfile],
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime
) -> List[GoalAdjustmentSuggestion]:
    return goal_adjustment.generate_goal_adjustments(profile, categories, logs, now)


def generate_workout_recommendations(
        profile: Optional[UserProfile],
        logs: Sequence[DailyLog],
        now: datetime,
        categories: Optional[Sequence[TrackingCategory]] = None
) -> List[WorkoutRecommendation]:
    return workout_recommender.generate_workout_recommendations(profile, logs, now, categories)


def generate_nutrition_recommendations(
        profile: Optional[UserProfile],
        now: Optional[datetime] = None
) -> List[NutritionRecommendation]:
    return nutrition_recommender.generate_nutrition_recommendations(profile, now)


def summarize_daily_progress(
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime
) -> DailySummary:
    return goal_progress.summarize_daily_progress(categories, logs or [], now)


def get_workout_by_id(workout_id: str) -> Optional[WorkoutRecommendation]:
    return workout_recommender.get_workout_by_id(workout_id)
