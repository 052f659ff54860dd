from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class WorkoutType(str, Enum):
    hiit = "hiit"
    strength = "strength"
    cardio = "cardio"
    flexibility = "flexibility"


class WorkoutExercise(BaseModel):
    name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration: Optional[int] = None  # секунды
    rest_time: Optional[int] = None  # секунды
    instructions: str
    modifications: Optional[str] = None

    class Config:
        frozen = True


class WorkoutRecommendation(BaseModel):
    id: str
    type: str = "workout_plan"
    title: str
    description: str
    difficulty: Difficulty
    duration: int  # минуты
    calories_estimate: int
    equipment_needed: List[str] = []
    fitness_goals: List[str] = []
    body_parts: List[str] = []
    workout_type: WorkoutType
    exercises: List[WorkoutExercise] = []
    confidence_score: float = Field(default=0.0, ge=0, le=1)
    reasoning: str = ""
    priority: str = "medium"
    created_at: Optional[datetime] = None

    class Config:
        frozen = True
