import json
import random

from mealplan.domain.Recipe import Recipe
from mealplan.infra.Plan_Repository import (
    PlanFormat, PlanRepository, classify_plan_payload, migrate_plan_payload
)
from mealplan.logic.planning.generator import generate_plan
from mealplan.utilities.constants import PLAN_KEY, PLAN_DATE_KEY
from mealplan.utilities.validators import PlannerConfig
from conftest import FIVE_RECIPES

LEGACY_PLAN = {
    "weeks": [{"weekNumber": 1, "days": [
        {"day": "Monday", "lunch": {"recipeId": "chicken-curry"}, "dinner": {"isLeftover": True}},
    ]}],
    "generatedAt": "2024-01-01T00:00:00",
}


def _plan():
    recipes = [Recipe.from_dict(r) for r in FIVE_RECIPES]
    return generate_plan(recipes, PlannerConfig(number_of_weeks=2), rng=random.Random(11))


def test_classify_payloads():
    assert classify_plan_payload(_plan().to_dict()) is PlanFormat.BATCH
    assert classify_plan_payload(LEGACY_PLAN) is PlanFormat.LEGACY_DAILY
    assert classify_plan_payload({"weeks": []}) is PlanFormat.INVALID
    assert classify_plan_payload({"weeks": [{"week_number": 1}]}) is PlanFormat.INVALID
    assert classify_plan_payload([1, 2]) is PlanFormat.INVALID
    assert classify_plan_payload(None) is PlanFormat.INVALID


def test_migrate_rejects_legacy():
    assert migrate_plan_payload(LEGACY_PLAN) is None


def test_save_and_load_round_trip(storage):
    repo = PlanRepository(storage)
    plan = _plan()
    repo.save_plan(plan)

    loaded = repo.load_plan()
    assert loaded is not None
    assert loaded.to_dict() == plan.to_dict()
    assert loaded.generated_at == plan.generated_at
    assert repo.saved_at() is not None


def test_legacy_plan_is_discarded_and_cleared(storage):
    storage.set_item(PLAN_KEY, json.dumps(LEGACY_PLAN))
    storage.set_item(PLAN_DATE_KEY, "2024-01-01T00:00:00")
    assert PlanRepository(storage).load_plan() is None
    assert storage.get_item(PLAN_KEY) is None
    assert storage.get_item(PLAN_DATE_KEY) is None


def test_invalid_and_corrupt_plans_are_cleared(storage):
    repo = PlanRepository(storage)
    for raw in ("{not json", json.dumps({"weeks": []}), json.dumps("hello")):
        storage.set_item(PLAN_KEY, raw)
        assert repo.load_plan() is None
        assert storage.get_item(PLAN_KEY) is None


def test_missing_plan(storage):
    assert PlanRepository(storage).load_plan() is None


def test_stored_totals_are_recomputed(storage):
    plan = _plan()
    data = plan.to_dict()
    data["weeks"][0]["total_cooking_time"] = {"prep": 1, "cook": 1, "total": 99, "formatted": "x"}
    storage.set_item(PLAN_KEY, json.dumps(data))
    week = PlanRepository(storage).load_plan().weeks[0]
    assert week.total_cooking_time["total"] == week.total_cooking_time["prep"] + week.total_cooking_time["cook"]
    assert week.total_cooking_time == plan.weeks[0].total_cooking_time
