from models.nutrition_estimate import NutritionEstimate
from models.nutrition_input import ValidatedInput
from utils.intake_calculator import (
    calculate_carbs_g,
    calculate_daily_calories,
    calculate_fat_g,
    calculate_protein_g,
    calculate_water_l,
)


def estimate(validated: ValidatedInput) -> NutritionEstimate:
    """
    Derives the recommended daily intake from validated metrics.

    Only weight and activity feed the current formulas; height and age are
    accepted but have no effect on the result.
    """
    return NutritionEstimate(
        calories=calculate_daily_calories(validated.activity),
        protein=calculate_protein_g(validated.weight),
        carbs=calculate_carbs_g(validated.weight),
        fat=calculate_fat_g(validated.weight),
        water=calculate_water_l(validated.weight),
    )
