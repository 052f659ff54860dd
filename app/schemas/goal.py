from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class Trend(str, Enum):
    improving = "improving"
    declining = "declining"
    stable = "stable"


class AdjustmentType(str, Enum):
    increase = "increase"
    decrease = "decrease"


class GoalAnalysis(BaseModel):
    category_id: str
    category_name: str
    current_progress: float
    target: float
    progress_percentage: float  # 0-100, для отображения
    streak: int
    trend: Trend
    average_completion: float  # без ограничения сверху, 1.0 = цель выполнена
    days_to_complete: int

    class Config:
        from_attributes = True


class GoalAdjustmentSuggestion(BaseModel):
    category_id: str
    current_target: float
    suggested_target: float
    reason: str
    confidence: float = Field(ge=0, le=1)
    adjustment_type: AdjustmentType


class CategoryDailyProgress(BaseModel):
    category_id: str
    category_name: str
    unit: str
    current: float
    target: float
    percentage: float
    completed: bool


class DailySummary(BaseModel):
    date: str
    total_goals: int
    completed_goals: int
    completion_percentage: float
    categories: List[CategoryDailyProgress]
