import random
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.core.dependencies import get_now, get_tip_random
from app.schemas.fitness import Snapshot
from app.schemas.motivation import MotivationalMessage
from app.services import insights

router = APIRouter()


@router.post("/messages", response_model=List[MotivationalMessage])
async def get_motivational_messages(
        snapshot: Snapshot,
        now: datetime = Depends(get_now),
        rng: Optional[random.Random] = Depends(get_tip_random)
):
    """До 5 мотивационных сообщений, отсортированных по приоритету"""
    return insights.generate_motivational_messages(
        snapshot.profile, snapshot.categories, snapshot.logs, snapshot.now or now, rng=rng
    )
