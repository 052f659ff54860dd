from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "FitTrack Insights"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]

    # Мотивационные сообщения: сколько максимум отдаём клиенту
    MAX_MOTIVATIONAL_MESSAGES: int = 5
    # Seed для выбора советов в API; None - детерминированный выбор по id категории
    TIP_RANDOM_SEED: Optional[int] = None

    ADJUSTMENT_MIN_CONFIDENCE: float = 0.7
    WORKOUT_MIN_SCORE: float = 0.3
    WORKOUT_MAX_RESULTS: int = 3

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
