"""BatchItem domain entity: one recipe cooked in bulk to cover a set of days."""
from typing import List, Optional


class BatchItem:
    def __init__(self, recipe_id: str = "", recipe_name: str = "", days: Optional[List[str]] = None,
                 portions: int = 0, prep_time: int = 0, cook_time: int = 0, is_family_meal: bool = False):
        self.recipe_id = recipe_id
        self.recipe_name = recipe_name
        self.days = days[:] if days else []
        self.portions = portions
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.is_family_meal = is_family_meal

    def __str__(self) -> str:
        family = " (family meal)" if self.is_family_meal else ""
        return f"{self.recipe_name}{family} - {self.portions} portions - Days: {', '.join(self.days)}"

    __repr__ = __str__

    def single_day_copy(self, day: str, portions: int) -> "BatchItem":
        return BatchItem(self.recipe_id, self.recipe_name, [day], portions,
                         self.prep_time, self.cook_time, self.is_family_meal)

    @staticmethod
    def from_dict(data):
        '''Creates a BatchItem from its persisted dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return BatchItem(
            recipe_id=str(d.get("recipe_id", "")),
            recipe_name=str(d.get("recipe_name", "")),
            days=list(d.get("days") or []),
            portions=int(d.get("portions") or 0),
            prep_time=int(d.get("prep_time") or 0),
            cook_time=int(d.get("cook_time") or 0),
            is_family_meal=bool(d.get("is_family_meal", False)),
        )

    def to_dict(self):
        return {
            "recipe_id": self.recipe_id,
            "recipe_name": self.recipe_name,
            "days": self.days,
            "portions": self.portions,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "is_family_meal": self.is_family_meal,
        }
