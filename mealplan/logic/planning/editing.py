"""User edits on a generated plan: swap a batch's recipe, move its days, split it per day.

Every edit locates its target before touching anything, so a bad week, meal
type or index raises PlanEditError with the plan unchanged. Every successful
edit recomputes the week's cooking time.
"""
import logging
import math
from typing import List, Tuple

from pydantic import ValidationError

from mealplan.domain.BatchItem import BatchItem
from mealplan.domain.Plan import Plan
from mealplan.domain.Recipe import Recipe
from mealplan.domain.Week import Week
from mealplan.logic.planning.durations import parse_duration
from mealplan.utilities.constants import CHILD_PORTION, MEAL_TYPES
from mealplan.utilities.errors import PlanEditError
from mealplan.utilities.validators import BatchDaysInput, PlannerConfig

logger = logging.getLogger(__name__)


def portions_for_days(config: PlannerConfig, day_count: int) -> int:
    """Adults eat a full portion, children half; rounded up."""
    return math.ceil((config.adults + config.children * CHILD_PORTION) * day_count)


def _locate(plan: Plan, week_number: int, meal_type: str, index: int) -> Tuple[Week, List[BatchItem]]:
    if plan is None:
        raise PlanEditError("There is no meal plan to edit")
    week = plan.get_week(week_number)
    if week is None:
        raise PlanEditError(f"Week {week_number} not found")
    if meal_type not in MEAL_TYPES:
        raise PlanEditError(f"Unknown meal type '{meal_type}' (expected lunch or dinner)")
    batches = week.batches(meal_type)
    if not 0 <= index < len(batches):
        raise PlanEditError(f"No {meal_type} batch #{index + 1} in week {week_number}")
    return week, batches


def swap_batch_recipe(plan: Plan, week_number: int, meal_type: str, index: int, recipe: Recipe) -> BatchItem:
    """Replace the recipe of a batch, keeping its days and portions."""
    week, batches = _locate(plan, week_number, meal_type, index)
    item = batches[index]
    logger.info(f"Week {week_number} {meal_type}: replacing {item.recipe_name} with {recipe.name}")
    item.recipe_id = recipe.id
    item.recipe_name = recipe.name
    item.prep_time = parse_duration(recipe.prep_time)
    item.cook_time = parse_duration(recipe.cook_time)
    week.recompute_cooking_time()
    return item


def edit_batch_days(plan: Plan, week_number: int, meal_type: str, index: int,
                    days: List[str], config: PlannerConfig) -> BatchItem:
    """Reassign a batch to new days and resize its portions for them."""
    week, batches = _locate(plan, week_number, meal_type, index)
    try:
        checked = BatchDaysInput(days=days)
    except ValidationError as e:
        raise PlanEditError(f"Please select at least one valid day ({e.errors()[0]['msg']})") from e
    item = batches[index]
    item.days = checked.days
    item.portions = portions_for_days(config, len(checked.days))
    week.recompute_cooking_time()
    logger.info(f"Batch days updated: week {week_number} {meal_type} {item.recipe_name} "
                f"-> {item.days} ({item.portions} portions)")
    return item


def split_batch_to_daily(plan: Plan, week_number: int, meal_type: str, index: int,
                         config: PlannerConfig) -> List[BatchItem]:
    """Replace a batch, in place, with one single-day batch per assigned day."""
    week, batches = _locate(plan, week_number, meal_type, index)
    item = batches[index]
    per_day = portions_for_days(config, 1)
    daily = [item.single_day_copy(day, per_day) for day in item.days]
    batches[index:index + 1] = daily
    week.recompute_cooking_time()
    logger.info(f"Split {item.recipe_name} into {len(daily)} daily batches")
    return daily


__all__ = ['portions_for_days', 'swap_batch_recipe', 'edit_batch_days', 'split_batch_to_daily']
