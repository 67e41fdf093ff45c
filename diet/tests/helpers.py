from dataclasses import replace

from diet.domain.PlanInput import ActivityLevel, PlanInput, Sex

EXAMPLE_REQUEST = {
    "age": 30,
    "weightKg": 70,
    "heightCm": 170,
    "sex": "female",
    "currentMaintenanceCalories": 2000,
    "startDate": "2024-01-01",
    "initialActivityLevel": "lightlyActive",
    "targetWeightLossKg": 5,
    "dailyDeficitKcal": 500,
    "targetFinalMaintenanceCalories": 2200,
    "weeklyReverseIncreaseKcal": 100,
}


def example_input(**overrides) -> PlanInput:
    """30y / 70kg / 170cm female, 5 kg at -500 kcal, reverse +100/week to 2200."""
    base = PlanInput(
        age=30,
        weight_kg=70,
        height_cm=170,
        sex=Sex.FEMALE,
        current_maintenance_calories=2000,
        start_date="2024-01-01",
        initial_activity_level=ActivityLevel.LIGHTLY_ACTIVE,
        target_weight_loss_kg=5,
        daily_deficit_kcal=500,
        target_final_maintenance_calories=2200,
        weekly_reverse_increase_kcal=100,
    )
    return replace(base, **overrides)
