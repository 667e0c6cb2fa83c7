import json
import random

import pytest

from mealplan.domain.Recipe import Recipe
from mealplan.infra.Local_Storage import LocalStorage
from mealplan.utilities.validators import PlannerConfig


FIVE_RECIPES = [
    {"id": "chicken-curry", "name": "Chicken Curry", "protein": "chicken", "servings": "4-6",
     "prepTime": "15 minutes", "cookTime": "45 minutes", "tags": ["batch-cooking", "freezer-friendly"],
     "ingredients": ["Chicken breast", "Onion", "Coconut milk", "Basmati rice"]},
    {"id": "beef-stew", "name": "Beef Stew", "protein": "beef", "servings": 6,
     "prepTime": "20 minutes", "cookTime": "2 hours", "tags": ["sunday-special"],
     "ingredients": ["Beef chuck", "Carrot", "Onion", "Beef stock"]},
    {"id": "fish-tacos", "name": "Fish Tacos", "protein": "fish", "servings": 4,
     "prepTime": "10 min", "cookTime": "15 min", "tags": ["weeknight"],
     "ingredients": ["Cod fillets", "Taco shells", "Lettuce", "Sour cream"]},
    {"id": "pork-chops", "name": "Pork Chops", "protein": "pork", "servings": 4,
     "prepTime": "5 minutes", "cookTime": "20 minutes", "tags": ["weeknight"],
     "ingredients": ["Pork chops", "Potato", "Frozen peas"]},
    {"id": "lamb-roast", "name": "Lamb Roast", "protein": "lamb", "servings": "6-8",
     "prepTime": "15 minutes", "cookTime": "1 hour 30 minutes", "tags": ["sunday-special", "family-favorite"],
     "ingredients": ["Lamb leg", "Garlic", "Quinoa", "Onion"]},
]


@pytest.fixture
def five_recipes():
    return [Recipe.from_dict(r) for r in FIVE_RECIPES]


@pytest.fixture
def scenario_config():
    return PlannerConfig(adults=2, children=1, lunch_portions=10, dinner_recipes=3,
                         weekend_family_meals=True, number_of_weeks=1)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"recipes": FIVE_RECIPES}), encoding="utf-8")
    return path


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storage.json")
