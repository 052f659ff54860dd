from fastapi import APIRouter
from app.api.v1.goals import router as goals_router
from app.api.v1.motivation import router as motivation_router
from app.api.v1.workouts import router as workouts_router
from app.api.v1.nutrition import router as nutrition_router

api_router = APIRouter()

api_router.include_router(goals_router, prefix="/goals", tags=["goals"])
api_router.include_router(motivation_router, prefix="/motivation", tags=["motivation"])
api_router.include_router(workouts_router, prefix="/workouts", tags=["workouts"])
api_router.include_router(nutrition_router, prefix="/nutrition", tags=["nutrition"])
