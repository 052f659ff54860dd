from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum


class MessageType(str, Enum):
    reminder = "reminder"
    encouragement = "encouragement"
    challenge = "challenge"
    celebration = "celebration"
    tip = "tip"


class Priority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


PRIORITY_WEIGHTS = {
    Priority.high: 3,
    Priority.medium: 2,
    Priority.low: 1,
}


class MotivationalMessage(BaseModel):
    id: str
    type: MessageType
    title: str
    message: str
    priority: Priority
    category: Optional[str] = None
    actionable: bool = False
    suggested_action: Optional[str] = None
    timestamp: datetime
