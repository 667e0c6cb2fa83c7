"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union

from mealplan.utilities.constants import DAYS, PROTEINS


class PlannerConfig(BaseModel):
    """Household and planning settings read at generation time."""
    model_config = ConfigDict(extra='ignore', validate_assignment=True)

    adults: int = Field(2, ge=1, le=20)
    children: int = Field(1, ge=0, le=20)
    lunch_portions: int = Field(10, ge=1, le=100,
                                validation_alias=AliasChoices('lunch_portions', 'lunchPortions'))
    dinner_recipes: int = Field(3, ge=1, le=len(DAYS),
                                validation_alias=AliasChoices('dinner_recipes', 'dinnerRecipes'))
    weekend_family_meals: bool = Field(True, validation_alias=AliasChoices('weekend_family_meals', 'weekendFamilyMeals'))
    # Persisted and editable, not consulted by plan generation
    child_separate_weekdays: bool = Field(True, validation_alias=AliasChoices('child_separate_weekdays', 'childSeparateWeekdays'))
    number_of_weeks: int = Field(1, ge=1, le=12,
                                 validation_alias=AliasChoices('number_of_weeks', 'numberOfWeeks'))

    @property
    def household_size(self) -> int:
        return self.adults + self.children


class RecipeInput(BaseModel):
    """Schema for one catalog entry."""
    model_config = ConfigDict(extra='ignore')

    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    protein: str = 'other'
    servings: Optional[Union[int, str]] = None
    prep_time: Optional[str] = Field(None, validation_alias=AliasChoices('prep_time', 'prepTime'))
    cook_time: Optional[str] = Field(None, validation_alias=AliasChoices('cook_time', 'cookTime'))
    tags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator('id', 'name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('must not be blank')
        return v

    @field_validator('protein', mode='before')
    @classmethod
    def normalize_protein(cls, v):
        """Map unknown protein categories to 'other'."""
        p = str(v or '').strip().lower()
        return p if p in PROTEINS else 'other'

    @field_validator('tags', 'ingredients', 'instructions')
    @classmethod
    def drop_blank_entries(cls, v):
        return [item.strip() for item in v if item and item.strip()]


class BatchDaysInput(BaseModel):
    """Schema for reassigning the days of a batch item."""
    days: List[str] = Field(..., min_length=1)

    @field_validator('days')
    @classmethod
    def validate_days(cls, v):
        """Ensure real weekday names; dedupe and keep week order."""
        unknown = [d for d in v if d not in DAYS]
        if unknown:
            raise ValueError(f"Unknown day name(s): {', '.join(unknown)}")
        chosen = set(v)
        return [d for d in DAYS if d in chosen]
