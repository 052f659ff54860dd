from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from enum import Enum


class RecommendationType(str, Enum):
    meal_plan = "meal_plan"
    nutrition_tip = "nutrition_tip"
    recipe = "recipe"


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class Ingredient(BaseModel):
    name: str
    amount: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float


class Meal(BaseModel):
    id: str
    type: MealType
    name: str
    description: str
    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int = 0
    ingredients: List[Ingredient] = []
    instructions: List[str] = []
    prep_time: int  # минуты
    servings: int = 1


class MealPlan(BaseModel):
    id: str
    name: str
    description: str
    target_calories: int
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    meals: List[Meal]
    prep_time: int
    difficulty: str = "intermediate"


class NutritionTip(BaseModel):
    title: str
    description: str
    content: str
    reasoning: str


class NutritionRecommendation(BaseModel):
    id: str
    type: RecommendationType
    title: str
    description: str
    confidence_score: float
    reasoning: str
    priority: str
    created_at: datetime
    meal_plan: Optional[MealPlan] = None
    tip: Optional[str] = None
    recipe: Optional[Meal] = None
