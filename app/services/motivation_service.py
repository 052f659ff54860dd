"""
Генератор мотивационных сообщений по результатам анализа целей.

Пять независимых генераторов (напоминания, поддержка, празднование,
челленджи, советы) выдают сообщения; итог сортируется по приоритету и
обрезается до лимита.
"""
import logging
import random
import zlib
from datetime import datetime
from typing import List, Optional, Sequence

from app.core.config import settings
from app.core.motivation_templates import MESSAGE_TEMPLATES, FITNESS_TIPS
from app.schemas.fitness import DailyLog, TrackingCategory, UserProfile
from app.schemas.goal import GoalAnalysis, Trend
from app.schemas.motivation import MotivationalMessage, MessageType, Priority, PRIORITY_WEIGHTS
from app.services.goal_progress import analyze_goal_progress
from app.services.rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = "Champion"

MORNING_HOURS = (6, 10)
MIDDAY_HOURS = (12, 15)
EVENING_HOURS = (18, 21)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _build_message(
        kind: str,
        message_type: MessageType,
        priority: Priority,
        now: datetime,
        name: str,
        analysis: Optional[GoalAnalysis] = None,
        **params
) -> MotivationalMessage:
    """Собрать сообщение из шаблона kind с подстановкой имени и категории"""
    template = MESSAGE_TEMPLATES[kind]
    values = {"name": name, **params}
    if analysis is not None:
        values["category"] = analysis.category_name

    suggested_action = template["suggested_action"]
    if suggested_action:
        suggested_action = suggested_action.format(**values)

    message_id = f"{kind}-{analysis.category_id}" if analysis is not None else kind
    return MotivationalMessage(
        id=f"{message_id}-{int(now.timestamp() * 1000)}",
        type=message_type,
        title=template["title"].format(**values),
        message=template["message"].format(**values),
        priority=priority,
        category=analysis.category_name if analysis is not None else None,
        actionable=suggested_action is not None,
        suggested_action=suggested_action,
        timestamp=now
    )


def _in_band(hour: int, band) -> bool:
    return band[0] <= hour <= band[1]


def generate_time_based_reminders(
        analyses: Sequence[GoalAnalysis],
        name: str,
        now: datetime
) -> List[MotivationalMessage]:
    messages = []
    hour = now.hour

    for analysis in analyses:
        percentage = analysis.progress_percentage

        if _in_band(hour, MORNING_HOURS) and percentage == 0:
            messages.append(_build_message(
                "morning", MessageType.reminder, Priority.medium, now, name, analysis
            ))

        if _in_band(hour, MIDDAY_HOURS) and percentage < 50:
            messages.append(_build_message(
                "afternoon", MessageType.reminder, Priority.low, now, name, analysis,
                percentage=round_half_up(percentage)
            ))

        if _in_band(hour, EVENING_HOURS) and 0 < percentage < 80:
            remaining = analysis.target - analysis.current_progress
            messages.append(_build_message(
                "evening", MessageType.reminder, Priority.high, now, name, analysis,
                remaining=_format_number(remaining)
            ))

    return messages


def generate_contextual_encouragement(
        analyses: Sequence[GoalAnalysis],
        name: str,
        now: datetime
) -> List[MotivationalMessage]:
    messages = []

    for analysis in analyses:
        completion = analysis.average_completion

        if completion < 0.5 and analysis.trend == Trend.declining:
            messages.append(_build_message(
                "struggling", MessageType.encouragement, Priority.high, now, name, analysis
            ))

        if 0.5 <= completion < 0.8:
            messages.append(_build_message(
                "consistent", MessageType.encouragement, Priority.medium, now, name, analysis,
                percentage=round_half_up(completion * 100)
            ))

        if analysis.streak == 0 and completion > 0.7:
            messages.append(_build_message(
                "comeback", MessageType.encouragement, Priority.medium, now, name, analysis
            ))

    return messages


def generate_progress_celebrations(
        analyses: Sequence[GoalAnalysis],
        name: str,
        now: datetime
) -> List[MotivationalMessage]:
    messages = []

    for analysis in analyses:
        if analysis.progress_percentage >= 100:
            messages.append(_build_message(
                "goal_complete", MessageType.celebration, Priority.high, now, name, analysis
            ))

        if analysis.streak == 7:
            messages.append(_build_message(
                "week_streak", MessageType.celebration, Priority.medium, now, name, analysis
            ))

        if analysis.streak == 30:
            messages.append(_build_message(
                "month_streak", MessageType.celebration, Priority.high, now, name, analysis
            ))

    return messages


def generate_smart_challenges(
        analyses: Sequence[GoalAnalysis],
        name: str,
        now: datetime
) -> List[MotivationalMessage]:
    messages = []

    for analysis in analyses:
        if analysis.average_completion > 1.2 and analysis.trend == Trend.improving:
            messages.append(_build_message(
                "level_up", MessageType.challenge, Priority.medium, now, name, analysis
            ))

        if 7 <= analysis.streak < 30:
            milestone = 30 if analysis.streak >= 14 else 14
            messages.append(_build_message(
                "streak_challenge", MessageType.challenge, Priority.low, now, name, analysis,
                streak=analysis.streak, milestone=milestone
            ))

    return messages


def find_relevant_tips(category_name: str) -> List[dict]:
    """Советы, теги которых встречаются в названии категории, плюс общие"""
    lowered = category_name.lower()
    return [
        tip for tip in FITNESS_TIPS
        if "general" in tip["tags"] or any(tag in lowered for tag in tip["tags"])
    ]


def pick_tip(tips: Sequence[dict], category_id: str, rng: Optional[random.Random] = None) -> dict:
    # Без rng выбор стабилен для категории, чтобы повторный вызов давал тот же совет
    if rng is not None:
        return rng.choice(list(tips))
    return tips[zlib.crc32(category_id.encode("utf-8")) % len(tips)]


def generate_personalized_tips(
        analyses: Sequence[GoalAnalysis],
        name: str,
        now: datetime,
        rng: Optional[random.Random] = None
) -> List[MotivationalMessage]:
    messages = []

    for analysis in analyses:
        if analysis.average_completion >= 0.6:
            continue

        relevant = find_relevant_tips(analysis.category_name)
        if not relevant:
            continue

        tip = pick_tip(relevant, analysis.category_id, rng)
        messages.append(_build_message(
            "tip", MessageType.tip, Priority.low, now, name, analysis,
            tip_title=tip["title"], tip_content=tip["content"]
        ))

    return messages


def rank_messages(messages: Sequence[MotivationalMessage], limit: int) -> List[MotivationalMessage]:
    """Сортировка: приоритет по убыванию, затем более свежие. Сортировка стабильная."""
    ranked = sorted(
        messages,
        key=lambda m: (PRIORITY_WEIGHTS[m.priority], m.timestamp),
        reverse=True
    )
    return ranked[:limit]


def generate_motivational_messages(
        profile: Optional[UserProfile],
        categories: Sequence[TrackingCategory],
        logs: Sequence[DailyLog],
        now: datetime,
        rng: Optional[random.Random] = None,
        limit: Optional[int] = None
) -> List[MotivationalMessage]:
    logger.info(
        f"Generating motivational messages: profile={'yes' if profile else 'no'}, "
        f"categories={len(categories or [])}, logs={len(logs or [])}"
    )

    if not profile or not categories:
        return [_build_message("onboarding", MessageType.tip, Priority.high, now, DEFAULT_USER_NAME)]

    name = profile.name or DEFAULT_USER_NAME
    analyses = analyze_goal_progress(categories, logs or [], now)

    messages: List[MotivationalMessage] = []
    messages.extend(generate_time_based_reminders(analyses, name, now))
    messages.extend(generate_contextual_encouragement(analyses, name, now))
    messages.extend(generate_progress_celebrations(analyses, name, now))
    messages.extend(generate_smart_challenges(analyses, name, now))
    messages.extend(generate_personalized_tips(analyses, name, now, rng))

    if not messages:
        messages.append(_build_message("default", MessageType.encouragement, Priority.medium, now, name))

    logger.debug(f"Generated {len(messages)} motivational messages before ranking")
    return rank_messages(messages, limit or settings.MAX_MOTIVATIONAL_MESSAGES)
