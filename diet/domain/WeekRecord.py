"""WeekRecord domain entity: one simulated week of a reverse diet plan."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from diet.utilities.constants import DATE_FORMAT


class Phase(str, Enum):
    """Plan phases, in the order the engine traverses them."""

    INITIAL_MAINTENANCE = "Initial Maintenance"
    CALORIE_DEFICIT = "Calorie Deficit"
    POST_DEFICIT_MAINTENANCE = "Post-Deficit Maintenance"
    REVERSE_DIET = "Reverse Diet"
    NEW_MAINTENANCE = "New Maintenance"


@dataclass(frozen=True)
class WeekRecord:
    week_number: int
    start_date: date
    end_date: date
    phase_name: Phase
    target_calories: int
    calorie_change_from_previous_week: Optional[int]
    estimated_tdee_for_phase: int
    estimated_weekly_balance: int
    estimated_weekly_weight_change_kg: float
    estimated_cumulative_weight_change_kg: float
    estimated_end_weight_kg: float

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "WeekRecord":
        '''Creates a WeekRecord from its JSON representation.'''
        change = data.get("calorie_change_from_previous_week")
        return WeekRecord(
            week_number=int(data["week_number"]),
            start_date=datetime.strptime(data["start_date"], DATE_FORMAT).date(),
            end_date=datetime.strptime(data["end_date"], DATE_FORMAT).date(),
            phase_name=Phase(data["phase_name"]),
            target_calories=int(data["target_calories"]),
            calorie_change_from_previous_week=None if change is None else int(change),
            estimated_tdee_for_phase=int(data["estimated_tdee_for_phase"]),
            estimated_weekly_balance=int(data["estimated_weekly_balance"]),
            estimated_weekly_weight_change_kg=float(data["estimated_weekly_weight_change_kg"]),
            estimated_cumulative_weight_change_kg=float(data["estimated_cumulative_weight_change_kg"]),
            estimated_end_weight_kg=float(data["estimated_end_weight_kg"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the WeekRecord to a dictionary for JSON persistence.'''
        return {
            "week_number": self.week_number,
            "start_date": self.start_date.strftime(DATE_FORMAT),
            "end_date": self.end_date.strftime(DATE_FORMAT),
            "phase_name": self.phase_name.value,
            "target_calories": self.target_calories,
            "calorie_change_from_previous_week": self.calorie_change_from_previous_week,
            "estimated_tdee_for_phase": self.estimated_tdee_for_phase,
            "estimated_weekly_balance": self.estimated_weekly_balance,
            "estimated_weekly_weight_change_kg": self.estimated_weekly_weight_change_kg,
            "estimated_cumulative_weight_change_kg": self.estimated_cumulative_weight_change_kg,
            "estimated_end_weight_kg": self.estimated_end_weight_kg,
        }


FullPlan = List[WeekRecord]


def plan_to_dicts(plan: FullPlan) -> List[Dict[str, Any]]:
    return [week.to_dict() for week in plan]


def plan_from_dicts(data: List[Dict[str, Any]]) -> FullPlan:
    return [WeekRecord.from_dict(entry) for entry in data]
