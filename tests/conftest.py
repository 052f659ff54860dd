"""
Общие фикстуры для тестов движка аналитики.

Стратегия:
- "Сейчас" фиксировано (FIXED_NOW), чтобы окна по датам были детерминированы.
- Логи строятся фабриками из tests/factories.py относительно FIXED_NOW.
- Тестовое FastAPI-приложение подменяет get_now через dependency_overrides.
"""

import pytest
from datetime import datetime
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from app.api.router import api_router
from app.core.dependencies import get_now
from app.schemas.fitness import TrackingCategory, UserProfile
from tests.factories import FIXED_NOW, make_category


def create_test_app(now: datetime = FIXED_NOW) -> FastAPI:
    """Тестовое FastAPI-приложение с зафиксированными часами."""
    test_app = FastAPI(title="FitTrack Insights Test App")
    test_app.include_router(api_router, prefix="/api/v1")
    test_app.dependency_overrides[get_now] = lambda: now
    return test_app


# ---------------------------------------------------------------------------
# Фикстуры данных
# ---------------------------------------------------------------------------

@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        id="user-1",
        name="Alex",
        age=30,
        gender="male",
        weight=80,
        height=180,
        fitness_goal="build_muscle",
    )


@pytest.fixture
def steps_category() -> TrackingCategory:
    return make_category()


# ---------------------------------------------------------------------------
# HTTP-клиент
# ---------------------------------------------------------------------------

@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Клиент к тестовому приложению, now = FIXED_NOW."""
    app = create_test_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
