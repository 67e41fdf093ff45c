"""PlanInput value: body stats, activity levels and calorie goals for one plan."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from diet.utilities.constants import ACTIVITY_MULTIPLIERS


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity level used to scale basal energy into daily expenditure.

    - SEDENTARY: little to no exercise
    - LIGHTLY_ACTIVE: light exercise/sports 1-3 days/week
    - MODERATELY_ACTIVE: moderate exercise/sports 3-5 days/week
    - VERY_ACTIVE: hard exercise/sports 6-7 days a week
    - EXTRA_ACTIVE: very hard exercise/sports and a physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightlyActive"
    MODERATELY_ACTIVE = "moderatelyActive"
    VERY_ACTIVE = "veryActive"
    EXTRA_ACTIVE = "extraActive"

    @property
    def multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self.value]


@dataclass(frozen=True)
class PlanInput:
    age: float
    weight_kg: float
    height_cm: float
    sex: Sex
    current_maintenance_calories: float
    start_date: Union[str, date]
    initial_activity_level: ActivityLevel
    target_weight_loss_kg: float
    daily_deficit_kcal: float
    target_final_maintenance_calories: float
    weekly_reverse_increase_kcal: float
    deficit_activity_level: Optional[ActivityLevel] = None
    reverse_activity_level: Optional[ActivityLevel] = None
    new_maintenance_activity_level: Optional[ActivityLevel] = None

    # Per-phase overrides fall back to the initial level when absent
    @property
    def deficit_level(self) -> ActivityLevel:
        return self.deficit_activity_level or self.initial_activity_level

    @property
    def reverse_level(self) -> ActivityLevel:
        return self.reverse_activity_level or self.initial_activity_level

    @property
    def new_maintenance_level(self) -> ActivityLevel:
        return self.new_maintenance_activity_level or self.initial_activity_level
