"""
Статический контент для рекомендаций по питанию: блюда плана, советы, рецепт.
Калории и БЖУ приёмов пищи считаются на лету по целевой калорийности.
"""

MEAL_TEMPLATES = {
    "breakfast": {
        "id": "breakfast-1",
        "name": "Power Breakfast Bowl",
        "description": "Protein-rich breakfast to fuel your morning",
        "fiber": 8,
        "prep_time": 5,
        "ingredients": [
            {"name": "Greek Yogurt", "amount": 150, "unit": "g", "calories": 100, "protein": 15, "carbs": 6, "fat": 0},
            {"name": "Berries", "amount": 100, "unit": "g", "calories": 50, "protein": 1, "carbs": 12, "fat": 0},
            {"name": "Granola", "amount": 30, "unit": "g", "calories": 130, "protein": 4, "carbs": 20, "fat": 5},
            {"name": "Almonds", "amount": 20, "unit": "g", "calories": 120, "protein": 4, "carbs": 2, "fat": 10},
        ],
        "instructions": [
            "Place Greek yogurt in a bowl",
            "Top with fresh berries",
            "Sprinkle granola over the berries",
            "Add sliced almonds",
            "Serve immediately",
        ],
    },
    "lunch": {
        "id": "lunch-1",
        "name": "Grilled Chicken Salad",
        "description": "Light but satisfying lunch with lean protein",
        "fiber": 6,
        "prep_time": 15,
        "ingredients": [
            {"name": "Chicken Breast", "amount": 120, "unit": "g", "calories": 200, "protein": 37, "carbs": 0, "fat": 4},
            {"name": "Mixed Greens", "amount": 100, "unit": "g", "calories": 20, "protein": 2, "carbs": 4, "fat": 0},
            {"name": "Cherry Tomatoes", "amount": 100, "unit": "g", "calories": 18, "protein": 1, "carbs": 4, "fat": 0},
            {"name": "Olive Oil", "amount": 10, "unit": "ml", "calories": 90, "protein": 0, "carbs": 0, "fat": 10},
        ],
        "instructions": [
            "Season and grill chicken breast until cooked through",
            "Slice chicken into strips",
            "Combine mixed greens and cherry tomatoes in bowl",
            "Top with sliced chicken",
            "Drizzle with olive oil and season to taste",
        ],
    },
    "dinner": {
        "id": "dinner-1",
        "name": "Salmon with Quinoa",
        "description": "Omega-3 rich dinner with complete protein",
        "fiber": 4,
        "prep_time": 25,
        "ingredients": [
            {"name": "Salmon Fillet", "amount": 150, "unit": "g", "calories": 250, "protein": 35, "carbs": 0, "fat": 12},
            {"name": "Quinoa", "amount": 80, "unit": "g dry", "calories": 290, "protein": 11, "carbs": 52, "fat": 5},
            {"name": "Broccoli", "amount": 150, "unit": "g", "calories": 40, "protein": 4, "carbs": 8, "fat": 0},
            {"name": "Lemon", "amount": 1, "unit": "piece", "calories": 5, "protein": 0, "carbs": 1, "fat": 0},
        ],
        "instructions": [
            "Cook quinoa according to package instructions",
            "Steam broccoli until tender-crisp",
            "Season salmon with salt, pepper, and lemon",
            "Pan-sear salmon for 4-5 minutes each side",
            "Serve salmon over quinoa with broccoli on the side",
        ],
    },
    "snack": {
        "id": "snack-1",
        "name": "Protein Smoothie",
        "description": "Quick post-workout recovery drink",
        "fiber": 3,
        "prep_time": 3,
        "ingredients": [
            {"name": "Protein Powder", "amount": 30, "unit": "g", "calories": 120, "protein": 24, "carbs": 2, "fat": 1},
            {"name": "Banana", "amount": 100, "unit": "g", "calories": 90, "protein": 1, "carbs": 23, "fat": 0},
            {"name": "Almond Milk", "amount": 250, "unit": "ml", "calories": 40, "protein": 2, "carbs": 2, "fat": 3},
        ],
        "instructions": [
            "Add all ingredients to blender",
            "Blend until smooth",
            "Serve immediately",
        ],
    },
}

MEAL_PLAN_NAMES = {
    "weight_loss": "Weight Loss Meal Plan",
    "muscle_gain": "Muscle Building Meal Plan",
    "maintenance": "Balanced Nutrition Plan",
}

HYDRATION_TIP = {
    "title": "Hydration First",
    "description": "Start your day with water",
    "content": "Drink a large glass of water as soon as you wake up to kickstart your metabolism "
               "and rehydrate after sleep.",
    "reasoning": "Proper hydration improves energy levels and supports all bodily functions.",
}

PROTEIN_TIP = {
    "title": "Protein at Every Meal",
    "description": "Include protein in each meal for sustained energy",
    "content": "Aim to include a palm-sized portion of protein (chicken, fish, beans, tofu) at every "
               "meal to maintain muscle mass and feel fuller longer.",
    "reasoning": "Protein helps with muscle repair, satiety, and maintaining stable blood sugar levels.",
}

GOAL_TIPS = {
    "weight_loss": {
        "title": "Mindful Portions",
        "description": "Control portions without feeling deprived",
        "content": "Use smaller plates and eat slowly to naturally reduce portion sizes while still "
                   "feeling satisfied.",
        "reasoning": "Portion control is key for weight loss, and smaller plates create the illusion "
                     "of larger portions.",
    },
    "muscle_gain": {
        "title": "Post-Workout Nutrition",
        "description": "Fuel your recovery properly",
        "content": "Consume protein and carbohydrates within 30 minutes after your workout to optimize "
                   "muscle recovery and growth.",
        "reasoning": "The post-workout window is crucial for muscle protein synthesis and glycogen "
                     "replenishment.",
    },
}

FEATURED_RECIPE = {
    "id": "recipe-balanced",
    "type": "lunch",
    "name": "Balanced Buddha Bowl",
    "description": "Perfectly balanced meal with all macronutrients",
    "calories": 450,
    "protein": 25,
    "carbs": 50,
    "fat": 16,
    "fiber": 10,
    "prep_time": 25,
    "servings": 1,
    "ingredients": [
        {"name": "Tofu", "amount": 100, "unit": "g", "calories": 150, "protein": 15, "carbs": 3, "fat": 8},
        {"name": "Sweet Potato", "amount": 150, "unit": "g", "calories": 130, "protein": 2, "carbs": 30, "fat": 0},
        {"name": "Spinach", "amount": 100, "unit": "g", "calories": 25, "protein": 3, "carbs": 4, "fat": 0},
        {"name": "Chickpeas", "amount": 80, "unit": "g", "calories": 120, "protein": 6, "carbs": 18, "fat": 2},
        {"name": "Tahini", "amount": 15, "unit": "g", "calories": 90, "protein": 3, "carbs": 3, "fat": 8},
    ],
    "instructions": [
        "Roast cubed sweet potato until tender",
        "Pan-fry seasoned tofu until crispy",
        "Sauté spinach until wilted",
        "Warm chickpeas with spices",
        "Arrange all components in bowl and drizzle with tahini",
    ],
}
