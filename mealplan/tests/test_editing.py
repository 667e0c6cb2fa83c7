import unittest

from mealplan.domain.BatchItem import BatchItem
from mealplan.domain.Plan import Plan
from mealplan.domain.Recipe import Recipe
from mealplan.domain.Week import Week
from mealplan.logic.planning.editing import (
    portions_for_days, swap_batch_recipe, edit_batch_days, split_batch_to_daily
)
from mealplan.utilities.errors import PlanEditError
from mealplan.utilities.validators import PlannerConfig


class TestBatchEdits(unittest.TestCase):
    def setUp(self):
        self.config = PlannerConfig(adults=2, children=1)
        lunch = BatchItem("chicken-curry", "Chicken Curry",
                          ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"], 10, 15, 45)
        dinners = [
            BatchItem("fish-tacos", "Fish Tacos", ["Monday", "Tuesday", "Wednesday"], 9, 10, 15),
            BatchItem("pork-chops", "Pork Chops", ["Thursday", "Friday"], 6, 5, 20),
            BatchItem("lamb-roast", "Lamb Roast", ["Saturday", "Sunday"], 6, 15, 90, is_family_meal=True),
        ]
        self.plan = Plan([Week(1, [lunch], dinners)], config=self.config.model_dump(), generated_at="x")
        self.week = self.plan.weeks[0]

    def test_portions_for_days(self):
        self.assertEqual(portions_for_days(self.config, 2), 5)
        self.assertEqual(portions_for_days(self.config, 1), 3)
        self.assertEqual(portions_for_days(PlannerConfig(adults=1, children=0), 4), 4)
        self.assertEqual(portions_for_days(PlannerConfig(adults=2, children=3), 3), 11)

    def test_edit_days_resizes_portions(self):
        item = edit_batch_days(self.plan, 1, "dinner", 0, ["Tuesday", "Monday"], self.config)
        self.assertEqual(item.days, ["Monday", "Tuesday"])
        self.assertEqual(item.portions, 5)
        self.assertIs(self.week.dinners[0], item)

    def test_edit_days_rejects_empty_and_unknown(self):
        before = self.plan.to_dict()
        with self.assertRaises(PlanEditError):
            edit_batch_days(self.plan, 1, "dinner", 0, [], self.config)
        with self.assertRaises(PlanEditError):
            edit_batch_days(self.plan, 1, "dinner", 0, ["Monday", "Funday"], self.config)
        self.assertEqual(self.plan.to_dict(), before)

    def test_bad_targets_leave_plan_unchanged(self):
        before = self.plan.to_dict()
        for week, meal, index in ((2, "dinner", 0), (1, "breakfast", 0), (1, "dinner", 3), (1, "lunch", -1)):
            with self.subTest(week=week, meal=meal, index=index):
                with self.assertRaises(PlanEditError):
                    edit_batch_days(self.plan, week, meal, index, ["Monday"], self.config)
        self.assertEqual(self.plan.to_dict(), before)

    def test_edit_without_plan(self):
        with self.assertRaises(PlanEditError):
            split_batch_to_daily(None, 1, "dinner", 0, self.config)

    def test_swap_keeps_days_and_portions(self):
        beef = Recipe.from_dict({"id": "beef-stew", "name": "Beef Stew", "protein": "beef",
                                 "prepTime": "20 minutes", "cookTime": "2 hours"})
        item = swap_batch_recipe(self.plan, 1, "dinner", 2, beef)
        self.assertEqual((item.recipe_id, item.recipe_name), ("beef-stew", "Beef Stew"))
        self.assertEqual(item.days, ["Saturday", "Sunday"])
        self.assertEqual(item.portions, 6)
        self.assertTrue(item.is_family_meal)
        self.assertEqual((item.prep_time, item.cook_time), (20, 120))
        t = self.week.total_cooking_time
        self.assertEqual(t["prep"], 15 + 10 + 5 + 20)
        self.assertEqual(t["cook"], 45 + 15 + 20 + 120)
        self.assertEqual(t["total"], t["prep"] + t["cook"])

    def test_split_replaces_batch_in_place(self):
        daily = split_batch_to_daily(self.plan, 1, "dinner", 0, self.config)
        self.assertEqual([d.days for d in daily], [["Monday"], ["Tuesday"], ["Wednesday"]])
        self.assertTrue(all(d.portions == 3 for d in daily))
        self.assertEqual([d.recipe_id for d in self.week.dinners],
                         ["fish-tacos", "fish-tacos", "fish-tacos", "pork-chops", "lamb-roast"])
        t = self.week.total_cooking_time
        self.assertEqual(t["prep"], 15 + 3 * 10 + 5 + 15)
        self.assertEqual(t["cook"], 45 + 3 * 15 + 20 + 90)
        self.assertEqual(t["formatted"], "4h 25min")

    def test_split_single_day_batch(self):
        edit_batch_days(self.plan, 1, "lunch", 0, ["Friday"], self.config)
        daily = split_batch_to_daily(self.plan, 1, "lunch", 0, self.config)
        self.assertEqual(len(daily), 1)
        self.assertEqual(len(self.week.lunches), 1)
        self.assertEqual(daily[0].portions, 3)


if __name__ == '__main__':
    unittest.main()
