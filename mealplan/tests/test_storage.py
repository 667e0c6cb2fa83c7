import json
import unittest
import tempfile
from pathlib import Path

from mealplan.infra.Config_Repository import ConfigRepository
from mealplan.infra.Local_Storage import LocalStorage
from mealplan.utilities.constants import CONFIG_KEY
from mealplan.utilities.validators import PlannerConfig


class TestLocalStorage(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "nested" / "storage.json"
        self.storage = LocalStorage(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_set_get_remove(self):
        self.assertIsNone(self.storage.get_item("a"))
        self.storage.set_item("a", "1")
        self.storage.set_item("b", "2")
        self.assertEqual(self.storage.get_item("a"), "1")
        self.storage.remove_item("a")
        self.assertIsNone(self.storage.get_item("a"))
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"b": "2"})
        self.storage.clear()
        self.assertIsNone(self.storage.get_item("b"))

    def test_no_temp_files_left_behind(self):
        self.storage.set_item("a", "1")
        self.assertEqual([p.name for p in self.path.parent.iterdir()], ["storage.json"])

    def test_corrupt_file_reads_as_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{oops", encoding="utf-8")
        self.assertIsNone(self.storage.get_item("a"))
        self.storage.set_item("a", "1")
        self.assertEqual(self.storage.get_item("a"), "1")

    def test_invalid_utf8_file_reads_as_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_bytes(b"\xff\xfe")
        self.assertIsNone(self.storage.get_item("a"))
        self.storage.set_item("a", "1")
        self.assertEqual(self.storage.get_item("a"), "1")

    def test_non_object_file_reads_as_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2]", encoding="utf-8")
        self.assertIsNone(self.storage.get_item("0"))


class TestConfigRepository(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.storage = LocalStorage(Path(self.tmp.name) / "storage.json")
        self.repo = ConfigRepository(self.storage)

    def tearDown(self):
        self.tmp.cleanup()

    def test_defaults_when_nothing_saved(self):
        config = self.repo.load_config()
        self.assertEqual(config, PlannerConfig())
        self.assertEqual((config.adults, config.children, config.lunch_portions), (2, 1, 10))
        self.assertEqual((config.dinner_recipes, config.number_of_weeks), (3, 1))
        self.assertTrue(config.weekend_family_meals)

    def test_round_trip(self):
        self.repo.save_config(PlannerConfig(adults=3, children=0, number_of_weeks=2))
        config = self.repo.load_config()
        self.assertEqual((config.adults, config.children, config.number_of_weeks), (3, 0, 2))

    def test_partial_camel_case_config_merges_over_defaults(self):
        self.storage.set_item(CONFIG_KEY, json.dumps({"numberOfWeeks": 3, "dinnerRecipes": 5}))
        config = self.repo.load_config()
        self.assertEqual((config.number_of_weeks, config.dinner_recipes, config.adults), (3, 5, 2))

    def test_undecodable_storage_falls_back_to_defaults(self):
        self.storage.path.write_bytes(b'{"mealPlanConfig": "\xff\xfe"}')
        self.assertEqual(self.repo.load_config(), PlannerConfig())

    def test_corrupt_or_invalid_config_falls_back_to_defaults(self):
        for raw in ("{bad json", json.dumps([1]), json.dumps({"adults": 0})):
            with self.subTest(raw=raw):
                self.storage.set_item(CONFIG_KEY, raw)
                self.assertEqual(self.repo.load_config(), PlannerConfig())
                self.assertIsNone(self.storage.get_item(CONFIG_KEY))


if __name__ == '__main__':
    unittest.main()
