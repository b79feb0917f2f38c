# nutrition_calculator/config.py

# --- Calorie Policy ---

# Flat daily calorie baseline in kcal, before any activity adjustment.
BASE_DAILY_CALORIES = 2000.0
# Only the exact "active" level earns the bonus; "very-active" does not.
ACTIVE_CALORIE_BONUS = 300.0
BONUS_ACTIVITY_LEVEL = "active"

# --- Per-Kilogram Coefficients ---
# Each value is multiplied by body weight in kg.
PROTEIN_G_PER_KG = 1.5
CARBS_G_PER_KG = 3.0
FAT_G_PER_KG = 0.5
WATER_L_PER_KG = 0.03

# --- Validation Messages ---
# Keyed by field name, in field declaration order.
FIELD_ISSUE_MESSAGES = {
    "height": "Height is required",
    "weight": "Weight is required",
    "age": "Age is required",
    "activity": "Activity level is required",
}
UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"
