import logging
import math
from datetime import datetime
from typing import List, Sequence

from app.schemas.fitness import DailyLog, TrackingCategory
from app.schemas.goal import GoalAnalysis, DailySummary, CategoryDailyProgress
from app.services.rounding import round_half_up
from app.services.time_series import (
    calculate_streak, calculate_trend, calculate_average_completion, daily_totals
)

logger = logging.getLogger(__name__)


def progress_percentage(current: float, target: float) -> float:
    """Процент выполнения для отображения, ограничен 100"""
    if target <= 0:
        return 0.0
    return min(current / target * 100, 100.0)


def estimate_days_to_complete(current: float, target: float, now: datetime) -> int:
    """Оценить, за сколько дней будет достигнута цель при текущем темпе за сегодня"""
    if current >= target:
        return 0

    hours_elapsed = now.hour + now.minute / 60
    if hours_elapsed <= 0:
        return 1

    progress_rate = current / hours_elapsed
    if progress_rate <= 0:
        return 1

    hours_needed = (target - current) / progress_rate
    return max(1, math.ceil(hours_needed / 24))


def analyze_goal_progress(
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime
) -> List[GoalAnalysis]:
    today = now.date()
    analyses = []

    for category in categories:
        current_progress = daily_totals(category.id, logs).get(today, 0.0)
        analyses.append(GoalAnalysis(
            category_id=category.id,
            category_name=category.name,
            current_progress=current_progress,
            target=category.daily_target,
            progress_percentage=progress_percentage(current_progress, category.daily_target),
            streak=calculate_streak(category.id, logs, today),
            trend=calculate_trend(category.id, logs, today),
            average_completion=calculate_average_completion(
                category.id, logs, category.daily_target, today
            ),
            days_to_complete=estimate_days_to_complete(current_progress, category.daily_target, now)
        ))

    logger.debug(f"Goal analysis: {len(analyses)} categories, {len(logs)} logs")
    return analyses


def summarize_daily_progress(
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime
) -> DailySummary:
    """Сводка за сегодня: сколько целей закрыто и прогресс по каждой категории"""
    today = now.date()
    items = []

    for category in categories:
        current = daily_totals(category.id, logs).get(today, 0.0)
        items.append(CategoryDailyProgress(
            category_id=category.id,
            category_name=category.name,
            unit=category.unit,
            current=current,
            target=category.daily_target,
            percentage=round_half_up(progress_percentage(current, category.daily_target)),
            completed=category.daily_target > 0 and current >= category.daily_target
        ))

    completed = sum(1 for item in items if item.completed)
    total = len(items)

    return DailySummary(
        date=today.isoformat(),
        total_goals=total,
        completed_goals=completed,
        completion_percentage=round_half_up(completed / total * 100) if total else 0,
        categories=items
    )
