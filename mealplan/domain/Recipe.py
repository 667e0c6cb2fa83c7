"""Recipe domain entity: id, name, protein, servings, times, tags, ingredients, instructions."""
import re
from typing import List, Optional, Union

from mealplan.utilities.constants import DEFAULT_BASE_SERVINGS
from mealplan.utilities.validators import RecipeInput

_FIRST_NUMBER = re.compile(r'(\d+)')


class Recipe:
    def __init__(self, id: str = "", name: str = "", protein: str = "other",
                 servings: Optional[Union[int, str]] = None, prep_time: Optional[str] = None,
                 cook_time: Optional[str] = None, tags: Optional[List[str]] = None,
                 ingredients: Optional[List[str]] = None, instructions: Optional[List[str]] = None,
                 notes: Optional[str] = None):
        self.id = id
        self.name = name
        self.protein = protein
        self.servings = servings
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.tags = tags[:] if tags else []
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.notes = notes

    def __str__(self) -> str:
        return f"{self.name} [{self.id}] - {self.protein} - serves {self.servings} - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    def has_any_tag(self, tags) -> bool:
        return any(tag in self.tags for tag in tags)

    @property
    def base_servings(self) -> int:
        """Servings the recipe yields as written; '4-6' counts as 4."""
        if isinstance(self.servings, bool):
            return DEFAULT_BASE_SERVINGS
        if isinstance(self.servings, int):
            return self.servings if self.servings > 0 else DEFAULT_BASE_SERVINGS
        if isinstance(self.servings, str):
            match = _FIRST_NUMBER.search(self.servings)
            if match and int(match.group(1)) > 0:
                return int(match.group(1))
        return DEFAULT_BASE_SERVINGS

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a catalog entry (snake_case or camelCase keys). Raises pydantic.ValidationError.'''
        checked = RecipeInput.model_validate(data)
        return Recipe(**checked.model_dump())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "protein": self.protein,
            "servings": self.servings,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "tags": self.tags,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "notes": self.notes,
        }
