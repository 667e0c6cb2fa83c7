"""Shopping list builder.

Provides build_shopping_list(plan, week_number, recipes): the ingredients of
every batch in one week, grouped by supermarket section. Only presence is
tracked; quantities are not scaled by portions.
"""
import logging
from typing import Dict, List, Optional, Any

from mealplan.domain.Plan import Plan
from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import SHOPPING_CATEGORIES, FALLBACK_CATEGORY, CATEGORY_DISPLAY_ORDER

logger = logging.getLogger(__name__)


def detect_category(ingredient: str) -> str:
    """First category (in declaration order) with a keyword contained in the ingredient."""
    lowered = (ingredient or '').lower()
    for category, keywords in SHOPPING_CATEGORIES.items():
        for keyword in keywords:
            if keyword in lowered:
                return category
    return FALLBACK_CATEGORY


def categorize_ingredients(ingredients: List[str]) -> Dict[str, List[str]]:
    categorized: Dict[str, List[str]] = {category: [] for category in SHOPPING_CATEGORIES}
    for ingredient in ingredients:
        categorized[detect_category(ingredient)].append(ingredient)
    return {category: items for category, items in categorized.items() if items}


def build_shopping_list(plan: Plan, week_number: int, recipes: List[Recipe]) -> Optional[Dict[str, Any]]:
    """Collect and categorize a week's ingredients.

    Args:
        plan: generated Plan.
        week_number: 1-based week index.
        recipes: catalog used to resolve each batch's recipe id.

    Returns:
        { 'week_number': int, 'categories': { category: [ingredient, ...] } },
        or None when the week does not exist.
    """
    if not plan:
        return None
    week = plan.get_week(week_number)
    if week is None:
        return None

    recipe_index: Dict[str, Recipe] = {r.id: r for r in recipes}
    # dict keeps first-occurrence order
    seen: Dict[str, None] = {}
    for item in week.items():
        recipe = recipe_index.get(item.recipe_id)
        if not recipe:
            logger.warning(f"Recipe '{item.recipe_id}' from week {week_number} is not in the catalog")
            continue
        for ingredient in recipe.ingredients:
            seen.setdefault(ingredient, None)

    return {
        'week_number': week_number,
        'categories': categorize_ingredients(list(seen)),
    }


def ordered_categories(shopping_list: Dict[str, Any]):
    """(category, items) pairs in aisle display order."""
    categories = shopping_list.get('categories', {})
    return [(name, categories[name]) for name in CATEGORY_DISPLAY_ORDER if name in categories]


__all__ = ['build_shopping_list', 'categorize_ingredients', 'detect_category', 'ordered_categories']
