import logging
from datetime import datetime
from typing import List, Optional, Sequence

from app.core.config import settings
from app.schemas.fitness import DailyLog, TrackingCategory, UserProfile
from app.schemas.goal import GoalAnalysis, GoalAdjustmentSuggestion, AdjustmentType, Trend
from app.services.goal_progress import analyze_goal_progress
from app.services.rounding import round_half_up

logger = logging.getLogger(__name__)


def calculate_goal_adjustment(analysis: GoalAnalysis) -> Optional[GoalAdjustmentSuggestion]:
    """Предложить новую дневную цель. Правила взаимоисключающие: первое совпадение выигрывает."""
    completion = analysis.average_completion
    target = analysis.target

    # Стабильно перевыполняет - поднимаем планку
    if completion > 1.3 and analysis.trend == Trend.improving and analysis.streak >= 7:
        increase = min(0.25, completion - 1)
        return GoalAdjustmentSuggestion(
            category_id=analysis.category_id,
            current_target=target,
            suggested_target=target + round_half_up(target * increase),
            reason=(
                f"You've been consistently exceeding your goal by {round_half_up((completion - 1) * 100)}% "
                f"for {analysis.streak} days. Time to level up!"
            ),
            confidence=min(0.95, 0.7 + (completion - 1.3) * 0.5),
            adjustment_type=AdjustmentType.increase
        )

    # Цель слишком амбициозна и результаты падают
    if completion < 0.4 and analysis.trend == Trend.declining:
        decrease = max(0.2, 0.6 - completion)
        return GoalAdjustmentSuggestion(
            category_id=analysis.category_id,
            current_target=target,
            suggested_target=max(1, target - round_half_up(target * decrease)),
            reason=(
                "Your current goal might be too ambitious. "
                "Let's build momentum with a more achievable target!"
            ),
            confidence=min(0.9, 0.6 + (0.4 - completion) * 0.75),
            adjustment_type=AdjustmentType.decrease
        )

    return None


def generate_goal_adjustments(
        profile: Optional[UserProfile],
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime,
        min_confidence: Optional[float] = None
) -> List[GoalAdjustmentSuggestion]:
    if not profile or not categories:
        return []

    threshold = settings.ADJUSTMENT_MIN_CONFIDENCE if min_confidence is None else min_confidence
    analyses = analyze_goal_progress(categories, logs or [], now)

    adjustments = []
    for analysis in analyses:
        adjustment = calculate_goal_adjustment(analysis)
        if adjustment and adjustment.confidence > threshold:
            adjustments.append(adjustment)

    logger.info(f"Generated {len(adjustments)} goal adjustments for {len(categories)} categories")
    return sorted(adjustments, key=lambda a: a.confidence, reverse=True)
