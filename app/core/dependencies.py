import random
from datetime import datetime
from typing import Optional

from app.core.config import settings


def get_now() -> datetime:
    """Текущее время запроса. В тестах подменяется через dependency_overrides."""
    return datetime.now()


def get_tip_random() -> Optional[random.Random]:
    """Источник случайности для выбора советов.

    Без TIP_RANDOM_SEED возвращается None - тогда выбор детерминирован
    по id категории.
    """
    if settings.TIP_RANDOM_SEED is None:
        return None
    return random.Random(settings.TIP_RANDOM_SEED)
