VLOG_CATEGORIES = [
    "technology", "travel", "lifestyle", "food", "fashion",
    "fitness", "music", "art", "business", "education",
    "entertainment", "gaming", "sports", "health", "science",
    "photography", "diy", "other",
]

# Generic vlogging tags matched against any description
COMMON_TAGS = [
    "vlog", "daily", "life", "adventure", "travel", "food", "tech",
    "lifestyle", "fitness", "music", "art", "photography", "diy",
    "tutorial", "review", "challenge", "comedy", "gaming", "sports",
    "health", "education", "business", "entertainment", "fashion",
    "beauty", "cooking", "nature", "city", "culture", "experience",
]

CATEGORY_TAGS = {
    "technology": [
        "tech", "gadget", "software", "hardware", "innovation", "digital", "AI",
        "coding", "programming"
    ],
    "travel": [
        "travel", "adventure", "explore", "journey", "destination", "culture",
        "vacation", "trip", "wanderlust"
    ],
    "lifestyle": [
        "lifestyle", "daily", "routine", "habits", "wellness", "mindfulness",
        "productivity", "selfcare"
    ],
    "food": [
        "food", "cooking", "recipe", "kitchen", "culinary", "delicious", "meal",
        "restaurant", "taste"
    ],
    "fashion": [
        "fashion", "style", "outfit", "clothing", "trend", "design", "wardrobe",
        "accessories"
    ],
    "fitness": [
        "fitness", "workout", "exercise", "health", "gym", "training", "strength",
        "cardio", "yoga"
    ],
    "music": [
        "music", "song", "melody", "performance", "concert", "instrument", "band",
        "artist", "rhythm"
    ],
    "art": [
        "art", "creative", "painting", "drawing", "design", "artist", "gallery",
        "masterpiece", "inspiration"
    ],
    "business": [
        "business", "entrepreneur", "startup", "marketing", "success", "leadership",
        "strategy", "growth"
    ],
    "education": [
        "education", "learning", "tutorial", "knowledge", "study", "lesson",
        "teaching", "skill"
    ],
    "entertainment": [
        "entertainment", "fun", "show", "performance", "comedy", "drama", "movie",
        "celebrity"
    ],
    "gaming": [
        "gaming", "game", "playthrough", "stream", "esports", "console", "pc",
        "multiplayer"
    ],
    "sports": [
        "sports", "athlete", "competition", "training", "game", "championship",
        "fitness", "exercise"
    ],
    "health": [
        "health", "wellness", "medical", "nutrition", "mentalhealth", "selfcare",
        "healing", "recovery"
    ],
    "science": [
        "science", "research", "discovery", "experiment", "laboratory",
        "technology", "innovation"
    ],
    "photography": [
        "photography", "photo", "camera", "shoot", "portrait", "landscape",
        "editing", "visual"
    ],
    "diy": [
        "diy", "craft", "handmade", "project", "creative", "build", "make",
        "tutorial"
    ],
    "other": [
        "vlog", "video", "content", "creator", "youtube", "social", "media"
    ],
}
