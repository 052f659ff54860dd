from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from enum import Enum


class FitnessGoal(str, Enum):
    lose_weight = "lose_weight"
    gain_weight = "gain_weight"
    build_muscle = "build_muscle"
    improve_endurance = "improve_endurance"
    maintain_health = "maintain_health"
    other = "other"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class TrackingCategory(BaseModel):
    id: str
    name: str
    unit: str
    daily_target: float = Field(gt=0)
    color: Optional[str] = None

    class Config:
        from_attributes = True


class DailyLog(BaseModel):
    id: str
    category_id: str
    date: date  # календарный день без времени, "2024-05-01"
    value: float = Field(ge=0)
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class UserProfile(BaseModel):
    id: str
    name: str
    age: Optional[int] = None
    gender: Optional[Gender] = None
    weight: Optional[float] = None  # кг
    height: Optional[float] = None  # см
    # Значение из FitnessGoal или свободный текст пользователя
    fitness_goal: Optional[str] = None

    class Config:
        from_attributes = True


class Snapshot(BaseModel):
    """Срез данных пользователя, который передаёт вызывающая сторона."""
    profile: Optional[UserProfile] = None
    categories: List[TrackingCategory] = []
    logs: List[DailyLog] = []
    now: Optional[datetime] = None


class ProfileSnapshot(BaseModel):
    profile: Optional[UserProfile] = None
    now: Optional[datetime] = None
