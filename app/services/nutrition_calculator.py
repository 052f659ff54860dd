from typing import Dict, Optional

from app.services.rounding import round_half_up


class NutritionCalculator:
    DEFAULT_WEIGHT = 70

    # ккал на кг веса тела
    CALORIE_MULTIPLIERS = {
        "weight_loss": 22,
        "muscle_gain": 28,
        "maintenance": 25
    }

    # доля дневных калорий и доли БЖУ (по калориям) для каждого приёма пищи
    MEAL_SPLITS = {
        "breakfast": {"share": 0.25, "protein": 0.25, "carbs": 0.45, "fat": 0.30},
        "lunch": {"share": 0.30, "protein": 0.30, "carbs": 0.40, "fat": 0.30},
        "dinner": {"share": 0.35, "protein": 0.28, "carbs": 0.42, "fat": 0.30},
        "snack": {"share": 0.10, "protein": 0.40, "carbs": 0.50, "fat": 0.10}
    }

    GOAL_ALIASES = {
        "weight_loss": "weight_loss",
        "lose_weight": "weight_loss",
        "muscle_gain": "muscle_gain",
        "build_muscle": "muscle_gain",
        "gain_weight": "muscle_gain",
    }

    @classmethod
    def normalize_goal(cls, goal: Optional[str]) -> str:
        if not goal:
            return "maintenance"
        return cls.GOAL_ALIASES.get(goal.strip().lower(), "maintenance")

    @classmethod
    def calculate_target_calories(cls, weight: Optional[float], goal: Optional[str]) -> int:
        if not weight or weight <= 0:
            weight = cls.DEFAULT_WEIGHT
        multiplier = cls.CALORIE_MULTIPLIERS[cls.normalize_goal(goal)]
        return round_half_up(weight * multiplier)

    @classmethod
    def calculate_meal_macros(cls, target_calories: int, meal_type: str) -> Dict[str, int]:
        split = cls.MEAL_SPLITS[meal_type]
        meal_calories = target_calories * split["share"]

        return {
            "calories": round_half_up(meal_calories),
            "protein": round_half_up(meal_calories * split["protein"] / 4),
            "carbs": round_half_up(meal_calories * split["carbs"] / 4),
            "fat": round_half_up(meal_calories * split["fat"] / 9)
        }
