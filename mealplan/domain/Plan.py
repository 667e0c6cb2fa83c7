"""Plan domain entity: generated weeks, the config snapshot used and the generation time."""
from typing import List, Optional

from mealplan.domain.Week import Week


class Plan:
    def __init__(self, weeks: List[Week], config: Optional[dict] = None, generated_at: str = ""):
        self.weeks = weeks
        self.config = dict(config or {})
        self.generated_at = generated_at

    def get_week(self, week_number: int) -> Optional[Week]:
        if 1 <= week_number <= len(self.weeks):
            return self.weeks[week_number - 1]
        return None

    @staticmethod
    def from_dict(data):
        return Plan(
            weeks=[Week.from_dict(w) for w in data.get("weeks", [])],
            config=data.get("config") or {},
            generated_at=data.get("generated_at", ""),
        )

    def to_dict(self):
        return {
            "weeks": [w.to_dict() for w in self.weeks],
            "config": self.config,
            "generated_at": self.generated_at,
        }
