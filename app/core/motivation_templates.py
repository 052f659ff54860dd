"""
Шаблоны мотивационных сообщений и база советов.

Правила выбора живут в app/services/motivation_service.py, здесь только текст.
Плейсхолдеры: {name}, {category}, {percentage}, {remaining}, {streak}, {milestone}.
"""

MESSAGE_TEMPLATES = {
    "onboarding": {
        "title": "Welcome to FitTrack!",
        "message": "Start by adding some fitness categories and logging your daily activities. "
                   "I'll provide personalized insights and motivation based on your progress! 🎯",
        "suggested_action": "Add your first fitness category",
    },
    "default": {
        "title": "Hello {name}!",
        "message": "Ready to make progress on your fitness goals today? "
                   "Every small step counts towards building lasting habits! 💪",
        "suggested_action": "Log some activity today",
    },
    "morning": {
        "title": "Good Morning! Start Strong",
        "message": "Good morning, {name}! Today is a fresh start. Your {category} goal awaits! 🌅",
        "suggested_action": "Log some {category} activity",
    },
    "afternoon": {
        "title": "Midday Momentum Check",
        "message": "{name}, you're {percentage}% toward your {category} goal. "
                   "Small steps lead to big wins! 🎯",
        "suggested_action": "Add to your {category} progress",
    },
    "evening": {
        "title": "Evening Excellence Time!",
        "message": "Almost there, {name}! Just {remaining} more {category} to hit your goal. "
                   "The finish line is calling! 🏁",
        "suggested_action": "Complete your {category} goal",
    },
    "struggling": {
        "title": "Every Step Counts",
        "message": "Hey {name}, I noticed {category} has been challenging. Remember, every small "
                   "step counts! Progress isn't always linear. 🌟",
        "suggested_action": "Start with a smaller, achievable goal today",
    },
    "consistent": {
        "title": "Building Strong Habits!",
        "message": "Your consistency with {category} is impressive, {name}! "
                   "You're {percentage}% of the way there on average. 📈",
        "suggested_action": None,
    },
    "comeback": {
        "title": "Comeback Champions Rise Again",
        "message": "One missed day doesn't define you, {name}! Your {category} track record "
                   "speaks volumes. Ready for a strong comeback? 💪",
        "suggested_action": "Restart your {category} streak today",
    },
    "goal_complete": {
        "title": "Goal Crushed! 🎉",
        "message": "Fantastic work, {name}! You've crushed your {category} goal today. You're on fire! 🔥",
        "suggested_action": None,
    },
    "week_streak": {
        "title": "One Week Warrior! 🗡️",
        "message": "7 days straight of {category}, {name}! You're building an unstoppable habit. "
                   "This is what dedication looks like! 🌟",
        "suggested_action": None,
    },
    "month_streak": {
        "title": "Monthly Master! 👑",
        "message": "30 days of consistent {category}, {name}! You've officially built a lasting "
                   "habit. Absolutely incredible! 🏆",
        "suggested_action": None,
    },
    "level_up": {
        "title": "Ready for the Next Level?",
        "message": "Ready to level up, {name}? Your {category} performance suggests you can handle more! 🚀",
        "suggested_action": "Consider increasing your daily target",
    },
    "streak_challenge": {
        "title": "Streak Legend in the Making!",
        "message": "{streak} days strong with {category}, {name}! Your next milestone: "
                   "{milestone} days. The legend continues! 🔥",
        "suggested_action": "Keep your {category} streak alive",
    },
    "tip": {
        "title": "💡 Smart Tip for {name}",
        "message": "{tip_title}: {tip_content}",
        "suggested_action": None,
    },
}

FITNESS_TIPS = [
    {
        "title": "The 2-Minute Rule",
        "content": "If a goal feels overwhelming, commit to just 2 minutes. "
                   "Often, you'll keep going once you start!",
        "tags": ("general", "exercise", "workout"),
    },
    {
        "title": "Habit Stacking Power",
        "content": "Link your fitness goal to something you already do daily, like having morning coffee.",
        "tags": ("general", "habits"),
    },
    {
        "title": "Small Wins Strategy",
        "content": "Break big goals into smaller chunks throughout the day. Every bit counts!",
        "tags": ("general", "strategy"),
    },
    {
        "title": "Keep a Bottle in Sight",
        "content": "Leave a filled water bottle where you work. Seeing it is the easiest reminder to sip.",
        "tags": ("water", "hydration"),
    },
    {
        "title": "Walk While You Talk",
        "content": "Take phone calls on your feet. A few calls a day quietly adds thousands of steps.",
        "tags": ("steps", "walk"),
    },
    {
        "title": "Wind Down Routine",
        "content": "Dim the screens 30 minutes before bed so falling asleep on time gets easier.",
        "tags": ("sleep",),
    },
]
