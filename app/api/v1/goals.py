from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
import logging

from app.core.dependencies import get_now
from app.schemas.fitness import Snapshot
from app.schemas.goal import GoalAnalysis, GoalAdjustmentSuggestion, DailySummary
from app.services import insights

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analysis", response_model=List[GoalAnalysis])
async def analyze_goals(snapshot: Snapshot, now: datetime = Depends(get_now)):
    """Анализ прогресса по каждой категории: серия, тренд, среднее выполнение"""
    try:
        return insights.analyze_goals(
            snapshot.profile, snapshot.categories, snapshot.logs, snapshot.now or now
        )
    except Exception as e:
        logger.error(f"Ошибка в analyze_goals: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Ошибка при анализе целей: {str(e)}"
        )


@router.post("/adjustments", response_model=List[GoalAdjustmentSuggestion])
async def get_goal_adjustments(snapshot: Snapshot, now: datetime = Depends(get_now)):
    """Предложения по изменению дневных целей (только уверенные, > 0.7)"""
    try:
        return insights.generate_goal_adjustments(
            snapshot.profile, snapshot.categories, snapshot.logs, snapshot.now or now
        )
    except Exception as e:
        logger.error(f"Ошибка в get_goal_adjustments: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Ошибка при расчёте корректировок: {str(e)}"
        )


@router.post("/summary", response_model=DailySummary)
async def get_daily_summary(snapshot: Snapshot, now: datetime = Depends(get_now)):
    """Сводка за сегодня"""
    try:
        return insights.summarize_daily_progress(snapshot.categories, snapshot.logs, snapshot.now or now)
    except Exception as e:
        logger.error(f"Ошибка в get_daily_summary: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Ошибка при формировании сводки: {str(e)}"
        )
