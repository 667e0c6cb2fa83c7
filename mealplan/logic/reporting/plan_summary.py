"""Plain-text views of a plan for the command line and PDF export."""
from typing import Dict, List, Optional

from mealplan.domain.BatchItem import BatchItem
from mealplan.domain.Recipe import Recipe
from mealplan.domain.Week import Week
from mealplan.logic.planning.durations import format_duration
from mealplan.utilities.constants import DEFAULT_BASE_SERVINGS
from mealplan.utilities.validators import PlannerConfig


def portion_multiplier(item: BatchItem, recipe: Optional[Recipe]) -> str:
    """How many times the written recipe to cook, one decimal place."""
    base = recipe.base_servings if recipe else DEFAULT_BASE_SERVINGS
    return f"{item.portions / base:.1f}"


def describe_portions(item: BatchItem, recipe: Optional[Recipe]) -> str:
    multiplier = portion_multiplier(item, recipe)
    if multiplier == "1.0":
        return f"{item.portions} portions (as per recipe)"
    return f"{multiplier}x the recipe ({item.portions} portions)"


def cooking_time_banner(week: Week) -> str:
    t = week.total_cooking_time
    return (f"Total Batch Cooking Time: {t['formatted']} "
            f"({format_duration(t['prep'])} prep + {format_duration(t['cook'])} cook)")


def household_summary(config: PlannerConfig) -> str:
    adults = "1 adult" if config.adults == 1 else f"{config.adults} adults"
    if config.children == 0:
        children = "no children"
    elif config.children == 1:
        children = "1 child"
    else:
        children = f"{config.children} children"
    return f"{adults} + {children}"


def _batch_lines(title: str, items: List[BatchItem], recipe_index: Dict[str, Recipe]) -> List[str]:
    lines = [f"{title}:"]
    if not items:
        lines.append("  (none planned)")
        return lines
    for n, item in enumerate(items, start=1):
        family = " [family meal]" if item.is_family_meal else ""
        lines.append(f"  {n}. {item.recipe_name}{family}")
        lines.append(f"     Days: {', '.join(item.days)}")
        lines.append(f"     Make: {describe_portions(item, recipe_index.get(item.recipe_id))}")
        lines.append(f"     Time: {format_duration(item.prep_time)} prep, {format_duration(item.cook_time)} cook")
    return lines


def week_summary(week: Week, recipes: List[Recipe]) -> str:
    recipe_index = {r.id: r for r in recipes}
    lines = [f"=== Week {week.week_number} ===", cooking_time_banner(week)]
    lines += _batch_lines("Lunches (batch cook)", week.lunches, recipe_index)
    lines += _batch_lines("Dinners", week.dinners, recipe_index)
    return "\n".join(lines)


__all__ = ['portion_multiplier', 'describe_portions', 'cooking_time_banner', 'household_summary', 'week_summary']
