from app.core.config import settings
from app.core.dependencies import get_now, get_tip_random

__all__ = ["settings", "get_now", "get_tip_random"]
