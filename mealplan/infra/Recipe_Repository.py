import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from mealplan.domain.Recipe import Recipe
from mealplan.utilities.config import RECIPES_FILE
from mealplan.utilities.errors import CatalogLoadError

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Path = RECIPES_FILE) -> List[Recipe]:
    """Read the recipe catalog ({"recipes": [...]}); any failure is fatal to startup."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Recipes file not found: {path}")
        raise CatalogLoadError(f"Recipes file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Recipes file {path} could not be read: {e}")
        raise CatalogLoadError(f"Recipes file {path} could not be read: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file: {e}")
        raise CatalogLoadError(f"Invalid JSON in recipes file {path}: {e}") from e

    entries = data.get('recipes') if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise CatalogLoadError(f"Recipes file {path} has no 'recipes' list")

    try:
        recipes = [Recipe.from_dict(entry) for entry in entries]
    except ValidationError as e:
        logger.error(f"Invalid recipe entry in {path}: {e}")
        raise CatalogLoadError(f"Invalid recipe entry in {path}: {e}") from e

    ids = [r.id for r in recipes]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise CatalogLoadError(f"Duplicate recipe ids in {path}: {', '.join(duplicates)}")

    logger.info(f"Loaded {len(recipes)} recipes")
    return recipes
