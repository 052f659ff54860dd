"""
Модульные тесты GoalProgress: анализ по категориям, прогноз дней, сводка за сегодня.
"""

import pytest
from datetime import datetime

from app.schemas.fitness import TrackingCategory
from app.schemas.goal import Trend
from app.services.goal_progress import (
    analyze_goal_progress, estimate_days_to_complete, progress_percentage, summarize_daily_progress
)
from tests.factories import FIXED_NOW, make_category, make_log, daily_series

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# progress_percentage
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("current, expected", [(0, 0), (2500, 25), (10000, 100), (12000, 100)])
def test_progress_percentage_is_capped_at_hundred(current, expected):
    assert progress_percentage(current, 10000) == pytest.approx(expected)


def test_progress_percentage_zero_target():
    assert progress_percentage(50, 0) == 0


# ---------------------------------------------------------------------------
# estimate_days_to_complete
# ---------------------------------------------------------------------------

def test_days_to_complete_zero_when_goal_met():
    assert estimate_days_to_complete(10000, 10000, FIXED_NOW) == 0


def test_days_to_complete_minimum_one_without_progress():
    assert estimate_days_to_complete(0, 10000, FIXED_NOW) == 1


def test_days_to_complete_at_midnight_is_guarded():
    midnight = datetime(2024, 5, 15, 0, 0)
    assert estimate_days_to_complete(500, 10000, midnight) == 1


def test_days_to_complete_extrapolates_hourly_rate():
    """100 за 9 часов: осталось 9900, нужно 891 час -> 38 дней."""
    assert estimate_days_to_complete(100, 10000, FIXED_NOW) == 38


def test_days_to_complete_fast_pace_fits_in_one_day():
    assert estimate_days_to_complete(3000, 10000, FIXED_NOW) == 1


# ---------------------------------------------------------------------------
# analyze_goal_progress
# ---------------------------------------------------------------------------

def test_analysis_for_overachieved_steps():
    category = make_category()
    logs = [make_log("steps", 0, 7000), make_log("steps", 0, 5000)]

    [analysis] = analyze_goal_progress([category], logs, FIXED_NOW)

    assert analysis.category_id == "steps"
    assert analysis.current_progress == 12000
    assert analysis.progress_percentage == 100
    assert analysis.average_completion == pytest.approx(1.2 / 30)
    assert analysis.streak == 1
    assert analysis.trend == Trend.improving
    assert analysis.days_to_complete == 0


def test_analysis_one_record_per_category():
    categories = [make_category(), make_category("water", "Water", "glasses", 8)]
    logs = daily_series("water", 8, range(0, 5))

    analyses = analyze_goal_progress(categories, logs, FIXED_NOW)

    assert [a.category_id for a in analyses] == ["steps", "water"]
    assert analyses[0].streak == 0
    assert analyses[1].streak == 5
    assert analyses[1].progress_percentage == 100


def test_analysis_guards_zero_target():
    category = TrackingCategory.model_construct(id="c", name="Broken", unit="x", daily_target=0, color=None)
    [analysis] = analyze_goal_progress([category], [make_log("c", 0, 5)], FIXED_NOW)
    assert analysis.progress_percentage == 0
    assert analysis.average_completion == 0


def test_analysis_does_not_mutate_logs():
    logs = [make_log("steps", 1, 100), make_log("steps", 0, 200)]
    snapshot = [log.model_copy() for log in logs]
    analyze_goal_progress([make_category()], logs, FIXED_NOW)
    assert logs == snapshot


# ---------------------------------------------------------------------------
# summarize_daily_progress
# ---------------------------------------------------------------------------

def test_daily_summary_counts_completed_goals():
    categories = [make_category(), make_category("water", "Water", "glasses", 8)]
    logs = [make_log("steps", 0, 5000), make_log("water", 0, 9), make_log("water", 1, 8)]

    summary = summarize_daily_progress(categories, logs, FIXED_NOW)

    assert summary.date == "2024-05-15"
    assert summary.total_goals == 2
    assert summary.completed_goals == 1
    assert summary.completion_percentage == 50
    steps, water = summary.categories
    assert steps.percentage == 50 and not steps.completed
    assert water.percentage == 100 and water.completed


def test_daily_summary_empty():
    summary = summarize_daily_progress([], [], FIXED_NOW)
    assert summary.total_goals == 0
    assert summary.completion_percentage == 0
