import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(title=f"{settings.APP_NAME} - goal analytics & recommendations")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    base_url = "/api/v1"

    return {
        "app": settings.APP_NAME,
        "message": "Goal analytics, motivation and workout/nutrition recommendations",
        "links": {
            "🎯 Goal analysis": f"{base_url}/goals/analysis",
            "📊 Daily summary": f"{base_url}/goals/summary",
            "🔧 Goal adjustments": f"{base_url}/goals/adjustments",
            "💬 Motivation": f"{base_url}/motivation/messages",
            "💪 Workouts": f"{base_url}/workouts/recommendations",
            "🥗 Nutrition": f"{base_url}/nutrition/recommendations",
            "📚 Docs": "/docs",
        }
    }
