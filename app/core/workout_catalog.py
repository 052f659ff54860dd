"""
Справочник шаблонов тренировок для рекомендаций.
Загружается один раз при импорте; скоринг работает только с копиями.
"""
from app.schemas.workout import WorkoutRecommendation, WorkoutExercise, Difficulty, WorkoutType

WORKOUT_CATALOG = (
    WorkoutRecommendation(
        id="beginner-bodyweight",
        title="Beginner Bodyweight Routine",
        description="Perfect for beginners starting their fitness journey",
        difficulty=Difficulty.beginner,
        duration=20,
        calories_estimate=150,
        equipment_needed=[],
        fitness_goals=["general_fitness", "weight_loss"],
        body_parts=["full_body"],
        workout_type=WorkoutType.strength,
        priority="high",
        exercises=[
            WorkoutExercise(
                name="Bodyweight Squats",
                sets=3,
                reps=12,
                rest_time=45,
                instructions="Stand with feet shoulder-width apart, lower down as if sitting, then stand back up",
                modifications="Hold onto a chair for balance"
            ),
            WorkoutExercise(
                name="Push-ups",
                sets=3,
                reps=8,
                rest_time=45,
                instructions="Start in plank position, lower chest to the ground, push back up",
                modifications="Do push-ups from your knees or against a wall"
            ),
            WorkoutExercise(
                name="Glute Bridges",
                sets=3,
                reps=12,
                rest_time=30,
                instructions="Lie on your back, knees bent, lift hips until body forms a straight line"
            ),
            WorkoutExercise(
                name="Plank Hold",
                sets=3,
                duration=20,
                rest_time=30,
                instructions="Hold a forearm plank keeping the body straight",
                modifications="Drop to your knees"
            ),
        ]
    ),
    WorkoutRecommendation(
        id="hiit_fat_loss_beginner",
        title="HIIT Fat Burner - Beginner",
        description="High-intensity interval training designed for beginners to maximize fat burn",
        difficulty=Difficulty.beginner,
        duration=20,
        calories_estimate=200,
        equipment_needed=[],
        fitness_goals=["weight_loss", "endurance"],
        body_parts=["full_body", "legs", "core"],
        workout_type=WorkoutType.hiit,
        priority="high",
        exercises=[
            WorkoutExercise(
                name="Jumping Jacks",
                sets=4,
                duration=30,
                rest_time=30,
                instructions="Jump feet apart while raising arms overhead, then jump back",
                modifications="Step side to side instead of jumping"
            ),
            WorkoutExercise(
                name="High Knees",
                sets=4,
                duration=30,
                rest_time=30,
                instructions="Run in place bringing knees up to hip height",
                modifications="March in place"
            ),
            WorkoutExercise(
                name="Squat Jumps",
                sets=4,
                duration=30,
                rest_time=30,
                instructions="Squat down, then explode upward and land softly",
                modifications="Regular squats without the jump"
            ),
            WorkoutExercise(
                name="Mountain Climbers",
                sets=4,
                duration=30,
                rest_time=30,
                instructions="From a plank, drive knees toward the chest alternately",
                modifications="Slow alternating steps"
            ),
        ]
    ),
    WorkoutRecommendation(
        id="strength_muscle_gain_intermediate",
        title="Upper Body Strength Builder",
        description="Intermediate strength training focused on building upper body muscle",
        difficulty=Difficulty.intermediate,
        duration=45,
        calories_estimate=300,
        equipment_needed=["dumbbells", "resistance_bands"],
        fitness_goals=["muscle_gain", "strength"],
        body_parts=["chest", "back", "shoulders", "arms"],
        workout_type=WorkoutType.strength,
        exercises=[
            WorkoutExercise(
                name="Dumbbell Bench Press",
                sets=4,
                reps=10,
                rest_time=90,
                instructions="Press the dumbbells up from chest level until arms are extended",
                modifications="Use a floor press if no bench is available"
            ),
            WorkoutExercise(
                name="Bent-over Dumbbell Row",
                sets=4,
                reps=10,
                rest_time=90,
                instructions="Hinge at the hips and pull the dumbbells toward your ribs"
            ),
            WorkoutExercise(
                name="Overhead Press",
                sets=3,
                reps=10,
                rest_time=60,
                instructions="Press the dumbbells overhead without arching the lower back",
                modifications="Seated press for more stability"
            ),
            WorkoutExercise(
                name="Band Face Pulls",
                sets=3,
                reps=15,
                rest_time=45,
                instructions="Pull the band toward your face, elbows high"
            ),
            WorkoutExercise(
                name="Bicep Curl to Tricep Extension",
                sets=3,
                reps=12,
                rest_time=45,
                instructions="Curl the dumbbells, then press one overhead for a tricep extension"
            ),
        ]
    ),
    WorkoutRecommendation(
        id="cardio_endurance_advanced",
        title="Advanced Cardio Circuit",
        description="High-intensity cardio workout for advanced fitness enthusiasts",
        difficulty=Difficulty.advanced,
        duration=35,
        calories_estimate=400,
        equipment_needed=[],
        fitness_goals=["endurance", "weight_loss"],
        body_parts=["full_body", "legs"],
        workout_type=WorkoutType.cardio,
        exercises=[
            WorkoutExercise(
                name="Burpees",
                sets=5,
                reps=15,
                rest_time=30,
                instructions="Squat, jump back to plank, push-up, jump forward and jump up"
            ),
            WorkoutExercise(
                name="Tuck Jumps",
                sets=5,
                reps=12,
                rest_time=30,
                instructions="Jump and pull knees toward the chest at the top"
            ),
            WorkoutExercise(
                name="Sprint in Place",
                sets=5,
                duration=45,
                rest_time=15,
                instructions="Sprint on the spot at maximum effort"
            ),
            WorkoutExercise(
                name="Skater Hops",
                sets=5,
                duration=45,
                rest_time=15,
                instructions="Leap laterally from one foot to the other"
            ),
        ]
    ),
    WorkoutRecommendation(
        id="flexibility_recovery_all",
        title="Full Body Flexibility & Recovery",
        description="Gentle stretching and mobility work for recovery and flexibility",
        difficulty=Difficulty.beginner,
        duration=25,
        calories_estimate=80,
        equipment_needed=["yoga_mat"],
        fitness_goals=["flexibility", "recovery"],
        body_parts=["full_body", "hips", "back", "hamstrings"],
        workout_type=WorkoutType.flexibility,
        priority="low",
        exercises=[
            WorkoutExercise(
                name="Cat-Cow Stretch",
                sets=2,
                duration=60,
                rest_time=15,
                instructions="On all fours, alternate arching and rounding the spine with your breath"
            ),
            WorkoutExercise(
                name="World's Greatest Stretch",
                sets=2,
                reps=5,
                rest_time=15,
                instructions="Lunge forward, drop the elbow to the instep, then rotate the arm to the sky"
            ),
            WorkoutExercise(
                name="Seated Hamstring Stretch",
                sets=2,
                duration=45,
                rest_time=15,
                instructions="Sit with legs extended and hinge forward from the hips",
                modifications="Bend the knees slightly"
            ),
            WorkoutExercise(
                name="Child's Pose",
                sets=1,
                duration=90,
                instructions="Kneel, sit back on the heels and stretch the arms forward"
            ),
        ]
    ),
)

# Отдаётся, если скоринг упал
FALLBACK_WORKOUT = WorkoutRecommendation(
    id="fallback-workout",
    type="exercise",
    title="Basic Exercise",
    description="Simple bodyweight exercise to get started",
    difficulty=Difficulty.beginner,
    duration=15,
    calories_estimate=80,
    fitness_goals=["general_fitness"],
    body_parts=["full_body"],
    workout_type=WorkoutType.strength,
    confidence_score=0.9,
    reasoning="A basic exercise to help you get started with your fitness journey.",
    priority="high",
    exercises=[
        WorkoutExercise(
            name="Bodyweight Squats",
            sets=2,
            reps=10,
            rest_time=45,
            instructions="Stand with feet shoulder-width apart, lower down as if sitting, then stand back up"
        ),
    ]
)
