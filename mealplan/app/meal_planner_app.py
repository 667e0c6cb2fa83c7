"""Application state and the operations the front end calls.

MealPlannerApp owns the catalog, the current plan and the household config.
Planning functions receive these explicitly; changes are announced on the
event bus, where the storage observer persists them.
"""
import logging
from pathlib import Path
from typing import List, Optional

from mealplan.domain.BatchItem import BatchItem
from mealplan.domain.Plan import Plan
from mealplan.domain.Recipe import Recipe
from mealplan.events.Event_Bus import EventBus, PLAN_GENERATED, PLAN_UPDATED, CONFIG_UPDATED
from mealplan.events.storage_observers import StorageObserver
from mealplan.infra.Config_Repository import ConfigRepository
from mealplan.infra.Local_Storage import LocalStorage
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import reading_from_recipes
from mealplan.infra.pdf_utils import generate_pdf_for_week
from mealplan.logic.planning import editing
from mealplan.logic.planning.generator import generate_plan
from mealplan.logic.shopping.list_builder import build_shopping_list
from mealplan.utilities.config import RECIPES_FILE, STORAGE_FILE
from mealplan.utilities.errors import CatalogLoadError, PlanEditError, PlanGenerationError
from mealplan.utilities.validators import PlannerConfig

logger = logging.getLogger(__name__)


class MealPlannerApp:
    def __init__(self, recipes_file: Path = RECIPES_FILE, storage: Optional[LocalStorage] = None,
                 bus: Optional[EventBus] = None, rng=None):
        self.recipes_file = Path(recipes_file)
        self.storage = storage or LocalStorage(STORAGE_FILE)
        self.bus = bus or EventBus()
        self.rng = rng
        self.plan_repository = PlanRepository(self.storage)
        self.config_repository = ConfigRepository(self.storage)
        StorageObserver(self.plan_repository, self.config_repository).start(self.bus)

        self.recipes: List[Recipe] = []
        self.plan: Optional[Plan] = None
        self.config = PlannerConfig()
        self.current_week = 1
        self.last_generated_at: Optional[str] = None

    # --- Startup ------------------------------------------------------------
    def init(self) -> "MealPlannerApp":
        """Load config, catalog and any saved plan. CatalogLoadError is fatal."""
        self.config = self.config_repository.load_config()
        try:
            self.recipes = reading_from_recipes(self.recipes_file)
        except CatalogLoadError as e:
            logger.error(f"Failed to initialize app: {e}")
            raise
        self.plan = self.plan_repository.load_plan()
        if self.plan is not None:
            self.last_generated_at = self.plan.generated_at
        return self

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self.recipes if r.id == recipe_id), None)

    # --- Generation ---------------------------------------------------------
    def generate_new_plan(self) -> Plan:
        logger.info(f"Generating meal plan with config: {self.config.model_dump()}")
        try:
            plan = generate_plan(self.recipes, self.config, rng=self.rng,
                                 previous_generated_at=self.last_generated_at)
        except Exception as e:
            logger.exception("Error generating meal plan")
            raise PlanGenerationError(f"Failed to generate meal plan: {e}") from e
        self.plan = plan
        self.last_generated_at = plan.generated_at
        self.current_week = 1
        self.bus.publish(PLAN_GENERATED, {'plan': plan})
        return plan

    # --- Batch edits --------------------------------------------------------
    def _announce_edit(self, week_number: int, action: str):
        self.bus.publish(PLAN_UPDATED, {'plan': self.plan, 'week_number': week_number, 'action': action})

    def swap_recipe(self, week_number: int, meal_type: str, index: int, recipe_id: str) -> BatchItem:
        recipe = self.get_recipe_by_id(recipe_id)
        if recipe is None:
            raise PlanEditError(f"Recipe '{recipe_id}' not found")
        item = editing.swap_batch_recipe(self.plan, week_number, meal_type, index, recipe)
        self._announce_edit(week_number, 'swap')
        return item

    def edit_batch_days(self, week_number: int, meal_type: str, index: int, days: List[str]) -> BatchItem:
        item = editing.edit_batch_days(self.plan, week_number, meal_type, index, days, self.config)
        self._announce_edit(week_number, 'edit_days')
        return item

    def split_batch_to_daily(self, week_number: int, meal_type: str, index: int) -> List[BatchItem]:
        items = editing.split_batch_to_daily(self.plan, week_number, meal_type, index, self.config)
        self._announce_edit(week_number, 'split')
        return items

    # --- Views --------------------------------------------------------------
    def switch_week(self, week_number: int) -> int:
        if self.plan is None or self.plan.get_week(week_number) is None:
            raise PlanEditError(f"Week {week_number} not found")
        self.current_week = week_number
        return week_number

    def shopping_list(self, week_number: Optional[int] = None) -> Optional[dict]:
        number = self.current_week if week_number is None else week_number
        return build_shopping_list(self.plan, number, self.recipes)

    def export_week_pdf(self, week_number: Optional[int] = None) -> bytes:
        number = self.current_week if week_number is None else week_number
        week = self.plan.get_week(number) if self.plan else None
        if week is None:
            raise PlanEditError(f"Week {number} not found")
        return generate_pdf_for_week(week, self.recipes, self.shopping_list(number))

    # --- Config -------------------------------------------------------------
    def update_config(self, **changes) -> PlannerConfig:
        """Merge and validate changes; a new week count regenerates an existing plan."""
        old_weeks = self.config.number_of_weeks
        self.config = PlannerConfig.model_validate({**self.config.model_dump(), **changes})
        self.bus.publish(CONFIG_UPDATED, {'config': self.config})
        if self.plan is not None and self.config.number_of_weeks != old_weeks:
            logger.info(f"Week count changed from {old_weeks} to {self.config.number_of_weeks}, regenerating plan")
            self.generate_new_plan()
        return self.config


__all__ = ['MealPlannerApp']
