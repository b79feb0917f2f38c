from pydantic import BaseModel, ConfigDict, Field


class NutritionEstimate(BaseModel):
    """
    Recommended daily intake derived from a ValidatedInput.
    Values are unrounded; how they are displayed is up to the caller.
    """

    calories: float = Field(..., description="Daily energy in kcal.")
    protein: float = Field(..., description="Daily protein in grams.")
    carbs: float = Field(..., description="Daily carbohydrates in grams.")
    fat: float = Field(..., description="Daily fat in grams.")
    water: float = Field(..., description="Daily water in litres.")

    model_config = ConfigDict(frozen=True)
