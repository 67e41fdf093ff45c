import json
import tempfile
import unittest
from pathlib import Path

from diet.infra.Plan_Repository import PlanRepository
from diet.logic.metabolism.adaptation import DEFAULT_PROFILE
from diet.logic.planning.engine import generate_plan
from diet.tests.helpers import example_input
from diet.utilities.config import PLAN_ID_LENGTH


class TestPlanRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "data" / "plans.json"
        self.repo = PlanRepository(self.path)
        self.plan = generate_plan(example_input(), DEFAULT_PROFILE)

    def tearDown(self):
        self._tmp.cleanup()

    def test_put_and_get_round_trip(self):
        self.repo.put("abc123", self.plan)
        self.assertTrue(self.path.exists())
        self.assertEqual(self.repo.get("abc123"), self.plan)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.repo.get("nope"))
        self.repo.put("abc123", self.plan)
        self.assertIsNone(self.repo.get("nope"))

    def test_keys_are_write_once(self):
        self.repo.put("abc123", self.plan)
        with self.assertRaises(ValueError):
            self.repo.put("abc123", self.plan[:3])
        self.assertEqual(len(self.repo.get("abc123")), len(self.plan))

    def test_create_issues_unique_ids(self):
        first = self.repo.create(self.plan)
        second = self.repo.create(self.plan)
        self.assertNotEqual(first, second)
        self.assertEqual(len(first), PLAN_ID_LENGTH)
        self.assertIsNotNone(self.repo.get(first))
        self.assertEqual(self.repo.get(second), self.plan)

    def test_stored_format(self):
        self.repo.put("abc123", self.plan)
        with open(self.path, encoding="utf-8") as f:
            stored = json.load(f)
        first = stored["abc123"][0]
        self.assertEqual(first["week_number"], 1)
        self.assertEqual(first["start_date"], "2024-01-01")
        self.assertEqual(first["phase_name"], "Initial Maintenance")
        self.assertIsNone(first["calorie_change_from_previous_week"])

    def test_corrupt_store_reads_as_empty(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.repo.get("abc123"))

    def test_corrupt_store_is_not_overwritten(self):
        self.repo.put("abc123", self.plan)
        original = self.path.read_bytes()
        self.path.write_bytes(original[:-5])
        truncated = self.path.read_bytes()

        with self.assertRaises(json.JSONDecodeError):
            self.repo.put("def456", self.plan)
        with self.assertRaises(json.JSONDecodeError):
            self.repo.create(self.plan)
        self.assertEqual(self.path.read_bytes(), truncated)


if __name__ == '__main__':
    unittest.main()
