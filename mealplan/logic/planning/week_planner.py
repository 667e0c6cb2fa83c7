"""Allocate one week's lunch batch and dinner batches across the days."""
import logging
import math
from typing import List, Sequence

from mealplan.domain.BatchItem import BatchItem
from mealplan.domain.Recipe import Recipe
from mealplan.domain.Week import Week
from mealplan.logic.planning.durations import parse_duration
from mealplan.logic.planning.selector import select_recipe
from mealplan.utilities.constants import (
    DAYS, WEEKDAYS, WEEKEND, LUNCH_TAGS, FAMILY_DINNER_TAGS, WEEKNIGHT_DINNER_TAGS,
    PREFERRED_FIRST_DINNER_PROTEIN
)
from mealplan.utilities.validators import PlannerConfig

logger = logging.getLogger(__name__)


def split_days_into_runs(days: Sequence[str], run_count: int) -> List[List[str]]:
    """Partition days into run_count contiguous, non-empty runs (run_count <= len(days)).

    Run i takes ceil(remaining days / remaining runs) days from the front.
    """
    remaining = list(days)
    runs = []
    for i in range(run_count):
        size = math.ceil(len(remaining) / (run_count - i))
        runs.append(remaining[:size])
        remaining = remaining[size:]
    return runs


def _batch_for(recipe: Recipe, days: List[str], portions: int, is_family_meal: bool = False) -> BatchItem:
    return BatchItem(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        days=days,
        portions=portions,
        prep_time=parse_duration(recipe.prep_time),
        cook_time=parse_duration(recipe.cook_time),
        is_family_meal=is_family_meal,
    )


def plan_week(recipes: List[Recipe], week_number: int, config: PlannerConfig, rng=None) -> Week:
    """Build one week: a weekday lunch batch, then dinner runs covering all 7 days.

    Proteins already chosen this week (lunch included) are excluded from every
    later dinner pick. A slot whose selection comes back empty is left out.
    """
    used_proteins: List[str] = []
    lunches: List[BatchItem] = []
    dinners: List[BatchItem] = []

    lunch = select_recipe(recipes, required_tags=LUNCH_TAGS, rng=rng)
    if lunch:
        lunches.append(_batch_for(lunch, list(WEEKDAYS), config.lunch_portions))
        used_proteins.append(lunch.protein)
    else:
        logger.debug(f"Week {week_number}: no lunch recipe available")

    for i, run in enumerate(split_days_into_runs(DAYS, config.dinner_recipes)):
        is_family_meal = config.weekend_family_meals and any(day in WEEKEND for day in run)
        tags = FAMILY_DINNER_TAGS if is_family_meal else WEEKNIGHT_DINNER_TAGS
        dinner = select_recipe(
            recipes,
            required_tags=tags,
            excluded_proteins=used_proteins,
            preferred_protein=PREFERRED_FIRST_DINNER_PROTEIN if i == 0 else None,
            rng=rng,
        )
        if not dinner:
            logger.debug(f"Week {week_number}: no dinner left for {', '.join(run)} (used: {used_proteins})")
            continue
        dinners.append(_batch_for(dinner, run, len(run) * config.household_size, is_family_meal))
        used_proteins.append(dinner.protein)

    return Week(week_number, lunches, dinners)


__all__ = ['plan_week', 'split_days_into_runs']
