"""
Input validation schemas using Pydantic: the plan request collector.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from diet.domain.PlanInput import ActivityLevel, PlanInput, Sex
from diet.domain.errors import InvalidInput
from diet.utilities.constants import DATE_FORMAT


class PlanRequestInput(BaseModel):
    """Schema for a plan request. Accepts camelCase (form/JSON) or snake_case keys."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False, str_strip_whitespace=True)

    # Personal stats
    age: float = Field(..., gt=0)
    weight_kg: float = Field(..., gt=0, alias="weightKg")
    height_cm: float = Field(..., gt=0, alias="heightCm")
    sex: Sex
    current_maintenance_calories: float = Field(..., gt=0, alias="currentMaintenanceCalories")
    start_date: str = Field(..., alias="startDate")

    # Activity levels (per-phase overrides are optional)
    initial_activity_level: ActivityLevel = Field(..., alias="initialActivityLevel")
    deficit_activity_level: Optional[ActivityLevel] = Field(None, alias="deficitActivityLevel")
    reverse_activity_level: Optional[ActivityLevel] = Field(None, alias="reverseActivityLevel")
    new_maintenance_activity_level: Optional[ActivityLevel] = Field(None, alias="newMaintenanceActivityLevel")

    # Goals
    target_weight_loss_kg: float = Field(..., ge=0, alias="targetWeightLossKg")
    daily_deficit_kcal: float = Field(..., gt=0, alias="dailyDeficitKcal")
    target_final_maintenance_calories: float = Field(..., gt=0, alias="targetFinalMaintenanceCalories")
    weekly_reverse_increase_kcal: float = Field(..., gt=0, alias="weeklyReverseIncreaseKcal")

    @field_validator('deficit_activity_level', 'reverse_activity_level', 'new_maintenance_activity_level',
                     mode='before')
    @classmethod
    def blank_override_is_none(cls, v):
        """Form selects send '' for 'same as initial'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('start_date')
    @classmethod
    def validate_start_date(cls, v):
        """Ensure the start date is a real YYYY-MM-DD date."""
        try:
            datetime.strptime(v, DATE_FORMAT)
        except ValueError:
            raise ValueError('Invalid start date format. Please use YYYY-MM-DD.')
        return v

    def to_plan_input(self) -> PlanInput:
        return PlanInput(**self.model_dump())


def _describe_errors(error: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in error.errors()
    ]


def collect_plan_input(data: Any) -> PlanInput:
    """Validate raw request data and build a PlanInput; raises InvalidInput on any rejection."""
    if not isinstance(data, dict):
        raise InvalidInput(errors=[{"field": "", "message": "Request body must be a JSON object"}])
    try:
        return PlanRequestInput.model_validate(data).to_plan_input()
    except ValidationError as e:
        raise InvalidInput(errors=_describe_errors(e)) from e
