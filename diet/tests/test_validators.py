import unittest
from diet.domain.PlanInput import ActivityLevel, PlanInput, Sex
from diet.domain.errors import InvalidInput
from diet.tests.helpers import EXAMPLE_REQUEST, example_input
from diet.utilities.validators import PlanRequestInput, collect_plan_input


class TestCollectPlanInput(unittest.TestCase):

    def test_camel_case_request(self):
        plan_input = collect_plan_input(dict(EXAMPLE_REQUEST))
        self.assertIsInstance(plan_input, PlanInput)
        self.assertEqual(plan_input, example_input())
        self.assertIs(plan_input.sex, Sex.FEMALE)
        self.assertIs(plan_input.initial_activity_level, ActivityLevel.LIGHTLY_ACTIVE)
        self.assertIsNone(plan_input.deficit_activity_level)

    def test_snake_case_request(self):
        data = {
            "age": 30, "weight_kg": 70, "height_cm": 170, "sex": "female",
            "current_maintenance_calories": 2000, "start_date": "2024-01-01",
            "initial_activity_level": "lightlyActive", "target_weight_loss_kg": 5,
            "daily_deficit_kcal": 500, "target_final_maintenance_calories": 2200,
            "weekly_reverse_increase_kcal": 100,
        }
        self.assertEqual(collect_plan_input(data), example_input())

    def test_zero_weight_loss_allowed(self):
        plan_input = collect_plan_input(dict(EXAMPLE_REQUEST, targetWeightLossKg=0))
        self.assertEqual(plan_input.target_weight_loss_kg, 0)

    def test_blank_override_means_same_as_initial(self):
        plan_input = collect_plan_input(dict(EXAMPLE_REQUEST, deficitActivityLevel="", reverseActivityLevel="veryActive"))
        self.assertIsNone(plan_input.deficit_activity_level)
        self.assertEqual(plan_input.deficit_level, ActivityLevel.LIGHTLY_ACTIVE)
        self.assertEqual(plan_input.reverse_level, ActivityLevel.VERY_ACTIVE)

    def test_non_positive_quantities_rejected(self):
        for field in ("age", "weightKg", "heightCm", "currentMaintenanceCalories", "dailyDeficitKcal",
                      "targetFinalMaintenanceCalories", "weeklyReverseIncreaseKcal"):
            with self.subTest(field=field):
                with self.assertRaises(InvalidInput) as ctx:
                    collect_plan_input(dict(EXAMPLE_REQUEST, **{field: 0}))
                self.assertIn(field, [e["field"] for e in ctx.exception.errors])

    def test_age_has_no_upper_bound(self):
        self.assertEqual(collect_plan_input(dict(EXAMPLE_REQUEST, age=130)).age, 130)

    def test_negative_weight_loss_rejected(self):
        with self.assertRaises(InvalidInput):
            collect_plan_input(dict(EXAMPLE_REQUEST, targetWeightLossKg=-1))

    def test_missing_field_rejected(self):
        data = dict(EXAMPLE_REQUEST)
        del data["sex"]
        with self.assertRaises(InvalidInput) as ctx:
            collect_plan_input(data)
        self.assertEqual(ctx.exception.errors[0]["field"], "sex")

    def test_unknown_enum_values_rejected(self):
        with self.assertRaises(InvalidInput):
            collect_plan_input(dict(EXAMPLE_REQUEST, sex="other"))
        with self.assertRaises(InvalidInput):
            collect_plan_input(dict(EXAMPLE_REQUEST, initialActivityLevel="couchPotato"))

    def test_bad_start_date_rejected(self):
        for bad in ("2024-02-30", "01/01/2024", ""):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInput) as ctx:
                    collect_plan_input(dict(EXAMPLE_REQUEST, startDate=bad))
                self.assertEqual(ctx.exception.errors[0]["field"], "startDate")

    def test_non_object_body_rejected(self):
        with self.assertRaises(InvalidInput):
            collect_plan_input([EXAMPLE_REQUEST])

    def test_schema_model(self):
        model = PlanRequestInput.model_validate(EXAMPLE_REQUEST)
        self.assertEqual(model.weight_kg, 70)
        self.assertEqual(model.to_plan_input().start_date, "2024-01-01")


if __name__ == '__main__':
    unittest.main()
