"""Week domain entity: lunch and dinner batches plus the week's cooking-time summary."""
from typing import List, Optional

from mealplan.domain.BatchItem import BatchItem
from mealplan.logic.planning.durations import format_duration


class Week:
    def __init__(self, week_number: int, lunches: Optional[List[BatchItem]] = None,
                 dinners: Optional[List[BatchItem]] = None):
        self.week_number = week_number
        self.lunches = lunches[:] if lunches else []
        self.dinners = dinners[:] if dinners else []
        self.total_cooking_time = {}
        self.recompute_cooking_time()

    def items(self) -> List[BatchItem]:
        return [*self.lunches, *self.dinners]

    def batches(self, meal_type: str) -> List[BatchItem]:
        '''Returns the live list for 'lunch' or 'dinner'; KeyError otherwise.'''
        return {"lunch": self.lunches, "dinner": self.dinners}[meal_type]

    def recompute_cooking_time(self):
        """Sum prep/cook minutes over every batch; total is always prep + cook."""
        prep = sum(item.prep_time for item in self.items())
        cook = sum(item.cook_time for item in self.items())
        self.total_cooking_time = {
            "prep": prep,
            "cook": cook,
            "total": prep + cook,
            "formatted": format_duration(prep + cook),
        }
        return self.total_cooking_time

    def __str__(self) -> str:
        return (f"Week {self.week_number}: {len(self.lunches)} lunch batch(es), "
                f"{len(self.dinners)} dinner batch(es), {self.total_cooking_time['formatted']} cooking")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Week(
            week_number=int(d.get("week_number", 1)),
            lunches=[BatchItem.from_dict(i) for i in d.get("lunches", [])],
            dinners=[BatchItem.from_dict(i) for i in d.get("dinners", [])],
        )

    def to_dict(self):
        return {
            "week_number": self.week_number,
            "lunches": [item.to_dict() for item in self.lunches],
            "dinners": [item.to_dict() for item in self.dinners],
            "total_cooking_time": dict(self.total_cooking_time),
        }
