"""Basal energy and activity-adjusted expenditure."""
from diet.domain.PlanInput import ActivityLevel, Sex

__all__ = ["basal_energy", "expenditure"]


def basal_energy(weight_kg: float, height_cm: float, age: float, sex: Sex) -> float:
    """Mifflin-St Jeor resting energy need in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Sex(sex) is Sex.MALE:
        return base + 5
    return base - 161


def expenditure(basal: float, activity_level: ActivityLevel) -> float:
    """Total daily energy expenditure: basal energy scaled by the activity multiplier."""
    return basal * ActivityLevel(activity_level).multiplier
