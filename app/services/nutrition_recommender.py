"""
Рекомендации по питанию: план на день, до двух советов и рецепт.
Работает с любым профилем, недостающие поля заменяются средними значениями.
"""
import logging
from datetime import datetime
from typing import List, Optional

from app.core.nutrition_content import (
    MEAL_TEMPLATES, MEAL_PLAN_NAMES, HYDRATION_TIP, PROTEIN_TIP, GOAL_TIPS, FEATURED_RECIPE
)
from app.schemas.fitness import UserProfile
from app.schemas.nutrition import (
    NutritionRecommendation, RecommendationType, MealPlan, Meal, MealType
)
from app.services.nutrition_calculator import NutritionCalculator

logger = logging.getLogger(__name__)

MAX_TIPS = 2


def build_meal_plan(profile: Optional[UserProfile]) -> MealPlan:
    goal = NutritionCalculator.normalize_goal(profile.fitness_goal if profile else None)
    weight = profile.weight if profile else None
    target_calories = NutritionCalculator.calculate_target_calories(weight, goal)

    logger.debug(f"Target calories {target_calories} for goal {goal}")

    meals = []
    for meal_type in MealType:
        template = MEAL_TEMPLATES[meal_type.value]
        macros = NutritionCalculator.calculate_meal_macros(target_calories, meal_type.value)
        meals.append(Meal(type=meal_type, **template, **macros))

    return MealPlan(
        id=f"plan-{goal}",
        name=MEAL_PLAN_NAMES[goal],
        description=f"Customized meal plan for your {goal.replace('_', ' ')} goals",
        target_calories=target_calories,
        total_calories=sum(meal.calories for meal in meals),
        total_protein=sum(meal.protein for meal in meals),
        total_carbs=sum(meal.carbs for meal in meals),
        total_fat=sum(meal.fat for meal in meals),
        meals=meals,
        prep_time=sum(meal.prep_time for meal in meals)
    )


def select_nutrition_tips(profile: Optional[UserProfile]) -> List[dict]:
    """Гидратация всегда первой, второй совет - под цель пользователя"""
    goal = NutritionCalculator.normalize_goal(profile.fitness_goal if profile else None)
    tips = [HYDRATION_TIP, GOAL_TIPS.get(goal, PROTEIN_TIP)]
    return tips[:MAX_TIPS]


def _fallback_recommendation(now: datetime) -> NutritionRecommendation:
    return NutritionRecommendation(
        id="fallback-hydration",
        type=RecommendationType.nutrition_tip,
        title="Stay Hydrated",
        description="Drinking enough water is crucial for optimal performance",
        confidence_score=0.9,
        tip="Aim for at least 8 glasses of water per day to maintain proper hydration levels.",
        reasoning="Hydration is essential for all fitness goals and overall health.",
        priority="high",
        created_at=now
    )


def generate_nutrition_recommendations(
        profile: Optional[UserProfile],
        now: Optional[datetime] = None
) -> List[NutritionRecommendation]:
    now = now or datetime.now()

    try:
        meal_plan = build_meal_plan(profile)
        recommendations = [NutritionRecommendation(
            id=f"meal-{meal_plan.id}",
            type=RecommendationType.meal_plan,
            title="Balanced Daily Meal Plan",
            description="A well-rounded meal plan designed for your fitness goals",
            confidence_score=0.85,
            meal_plan=meal_plan,
            reasoning="Generated based on balanced nutrition principles and your fitness goals.",
            priority="high",
            created_at=now
        )]

        for index, tip in enumerate(select_nutrition_tips(profile)):
            recommendations.append(NutritionRecommendation(
                id=f"tip-{index}",
                type=RecommendationType.nutrition_tip,
                title=tip["title"],
                description=tip["description"],
                confidence_score=0.75,
                tip=tip["content"],
                reasoning=tip["reasoning"],
                priority="medium",
                created_at=now
            ))

        recipe = Meal(**FEATURED_RECIPE)
        recommendations.append(NutritionRecommendation(
            id=recipe.id,
            type=RecommendationType.recipe,
            title=recipe.name,
            description=recipe.description,
            confidence_score=0.8,
            recipe=recipe,
            reasoning="Perfect for your current fitness goals and easy to prepare.",
            priority="medium",
            created_at=now
        ))

        logger.info(f"Generated {len(recommendations)} nutrition recommendations")
        return recommendations
    except Exception as e:
        logger.exception(f"Nutrition recommendation failed: {e}")
        return [_fallback_recommendation(now)]
