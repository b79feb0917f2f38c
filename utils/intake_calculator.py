import config
from models.nutrition_input import ActivityLevel


def calculate_daily_calories(activity: ActivityLevel) -> float:
    """Flat baseline, plus a bonus for the exact "active" level only."""
    if activity == config.BONUS_ACTIVITY_LEVEL:
        return config.BASE_DAILY_CALORIES + config.ACTIVE_CALORIE_BONUS
    return config.BASE_DAILY_CALORIES


def calculate_protein_g(weight_kg: float) -> float:
    return weight_kg * config.PROTEIN_G_PER_KG


def calculate_carbs_g(weight_kg: float) -> float:
    return weight_kg * config.CARBS_G_PER_KG


def calculate_fat_g(weight_kg: float) -> float:
    return weight_kg * config.FAT_G_PER_KG


def calculate_water_l(weight_kg: float) -> float:
    return weight_kg * config.WATER_L_PER_KG
