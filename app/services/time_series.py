"""
Анализ временных рядов по дневным логам категории: серия, тренд,
средний процент выполнения.

Все функции чистые: "сегодня" передаётся явно, логи не мутируются и
могут приходить в любом порядке.
"""
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List

from app.schemas.fitness import DailyLog
from app.schemas.goal import Trend

STREAK_WINDOW_DAYS = 30
TREND_WINDOW_DAYS = 14
COMPLETION_WINDOW_DAYS = 30
TREND_THRESHOLD = 0.1


def daily_totals(category_id: str, logs: Iterable[DailyLog]) -> Dict[date, float]:
    """Суммы значений по дням для одной категории"""
    totals: Dict[date, float] = defaultdict(float)
    for log in logs:
        if log.category_id == category_id:
            totals[log.date] += log.value
    return totals


def last_days(today: date, count: int) -> List[date]:
    """Последние count дней, от самого старого к сегодняшнему"""
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def calculate_streak(category_id: str, logs: Iterable[DailyLog], today: date) -> int:
    totals = daily_totals(category_id, logs)
    streak = 0

    for offset in range(STREAK_WINDOW_DAYS):
        day_total = totals.get(today - timedelta(days=offset), 0)
        if day_total > 0:
            streak += 1
        elif offset == 0:
            # Сегодня ещё можно успеть - пустой день не рвёт серию
            continue
        else:
            break

    return streak


def calculate_trend(category_id: str, logs: Iterable[DailyLog], today: date) -> Trend:
    totals = daily_totals(category_id, logs)
    days = last_days(today, TREND_WINDOW_DAYS)
    half = TREND_WINDOW_DAYS // 2
    older_days, recent_days = days[:half], days[half:]

    older_avg = sum(totals.get(day, 0) for day in older_days) / len(older_days)
    recent_avg = sum(totals.get(day, 0) for day in recent_days) / len(recent_days)

    difference = recent_avg - older_avg
    threshold = older_avg * TREND_THRESHOLD

    # При нулевой прошлой неделе порог тоже 0: любой рост - improving
    if difference > threshold:
        return Trend.improving
    if difference < -threshold:
        return Trend.declining
    return Trend.stable


def calculate_average_completion(
        category_id: str,
        logs: Iterable[DailyLog],
        target: float,
        today: date
) -> float:
    """Среднее отношение дневной суммы к цели за 30 дней (пустые дни = 0).

    Значение намеренно не ограничено сверху.
    """
    if target <= 0:
        return 0.0

    totals = daily_totals(category_id, logs)
    days = last_days(today, COMPLETION_WINDOW_DAYS)
    ratios = [totals.get(day, 0) / target for day in days]
    return sum(ratios) / len(ratios)
