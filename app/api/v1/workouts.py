from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_now
from app.core.workout_catalog import WORKOUT_CATALOG
from app.schemas.fitness import Snapshot
from app.schemas.workout import WorkoutRecommendation
from app.services import insights

router = APIRouter()


@router.post("/recommendations", response_model=List[WorkoutRecommendation])
async def get_workout_recommendations(snapshot: Snapshot, now: datetime = Depends(get_now)):
    """Топ-3 тренировки из справочника под уровень и цели пользователя"""
    return insights.generate_workout_recommendations(
        snapshot.profile, snapshot.logs, snapshot.now or now, categories=snapshot.categories
    )


@router.get("/catalog", response_model=List[WorkoutRecommendation])
async def get_workout_catalog():
    return list(WORKOUT_CATALOG)


@router.get("/catalog/{workout_id}", response_model=WorkoutRecommendation)
async def get_workout(workout_id: str):
    workout = insights.get_workout_by_id(workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Тренировка не найдена")
    return workout
