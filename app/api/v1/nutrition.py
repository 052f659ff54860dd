from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_now
from app.schemas.fitness import ProfileSnapshot
from app.schemas.nutrition import NutritionRecommendation
from app.services import insights

router = APIRouter()


@router.post("/recommendations", response_model=List[NutritionRecommendation])
async def get_nutrition_recommendations(payload: ProfileSnapshot, now: datetime = Depends(get_now)):
    """План питания, советы и рецепт по профилю пользователя"""
    return insights.generate_nutrition_recommendations(payload.profile, payload.now or now)
