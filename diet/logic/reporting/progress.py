"""Read-only queries over a generated plan for the plan page.

Nothing here changes the plan; everything is derived from the week windows
and today's date.
"""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Optional

from diet.domain.WeekRecord import FullPlan, Phase, WeekRecord

__all__ = ["find_current_week_index", "weeks_left_in_phase", "summarize_progress", "build_chart_series",
           "PHASE_COLORS"]

PHASE_COLORS: Dict[Phase, str] = {
    Phase.INITIAL_MAINTENANCE: "rgba(200, 200, 200, 0.1)",
    Phase.CALORIE_DEFICIT: "rgba(255, 99, 132, 0.1)",
    Phase.POST_DEFICIT_MAINTENANCE: "rgba(255, 159, 64, 0.1)",
    Phase.REVERSE_DIET: "rgba(75, 192, 192, 0.1)",
    Phase.NEW_MAINTENANCE: "rgba(54, 162, 235, 0.1)",
}

STATUS_UPCOMING = "upcoming"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"


def find_current_week_index(plan: FullPlan, today: date) -> Optional[int]:
    """Index of the week whose window contains ``today``, or None."""
    for i, week in enumerate(plan):
        if week.contains(today):
            return i
    return None


def weeks_left_in_phase(plan: FullPlan, index: int) -> int:
    """Weeks after ``plan[index]`` that still belong to the same phase."""
    phase = plan[index].phase_name
    remaining = 0
    for week in plan[index + 1:]:
        if week.phase_name != phase:
            break
        remaining += 1
    return remaining


def summarize_progress(plan: FullPlan, today: date) -> Dict[str, Any]:
    """Summary used by the plan page: current/next week and what is left.

    Returns structure:
    {
      'total_weeks': int, 'status': 'upcoming' | 'active' | 'completed',
      'start_date': date, 'end_date': date,
      'current_week': WeekRecord | None, 'next_week': WeekRecord | None,
      'weeks_left_in_phase': int | None, 'weeks_left_in_plan': int,
      'projected_total_change_kg': float, 'projected_end_weight_kg': float
    }
    """
    if not plan:
        raise ValueError("Plan has no weeks")
    total = len(plan)
    index = find_current_week_index(plan, today)
    current: Optional[WeekRecord] = plan[index] if index is not None else None
    next_week = plan[index + 1] if index is not None and index + 1 < total else None

    if current is not None:
        status = STATUS_ACTIVE
        left_in_plan = total - current.week_number
        left_in_phase: Optional[int] = weeks_left_in_phase(plan, index)
    elif today < plan[0].start_date:
        status = STATUS_UPCOMING
        left_in_plan = total
        left_in_phase = None
    else:
        status = STATUS_COMPLETED
        left_in_plan = 0
        left_in_phase = None

    last = plan[-1]
    return {
        "total_weeks": total,
        "status": status,
        "start_date": plan[0].start_date,
        "end_date": last.end_date,
        "current_week": current,
        "next_week": next_week,
        "weeks_left_in_phase": left_in_phase,
        "weeks_left_in_plan": left_in_plan,
        "projected_total_change_kg": last.estimated_cumulative_weight_change_kg,
        "projected_end_weight_kg": last.estimated_end_weight_kg,
    }


def _phase_bands(plan: FullPlan) -> List[Dict[str, Any]]:
    bands: List[Dict[str, Any]] = []
    for week in plan:
        if bands and bands[-1]["phase"] == week.phase_name.value:
            bands[-1]["last_week"] = week.week_number
            continue
        bands.append({
            "phase": week.phase_name.value,
            "first_week": week.week_number,
            "last_week": week.week_number,
            "color": PHASE_COLORS[week.phase_name],
        })
    return bands


def build_chart_series(plan: FullPlan, current_week_number: Optional[int] = None) -> Dict[str, Any]:
    """Series for the calorie / weight chart drawn client-side."""
    return {
        "labels": [f"Week {w.week_number}" for w in plan],
        "target_calories": [w.target_calories for w in plan],
        "estimated_tdee": [w.estimated_tdee_for_phase for w in plan],
        "estimated_end_weight_kg": [round(w.estimated_end_weight_kg, 2) for w in plan],
        "phases": _phase_bands(plan),
        "current_week_number": current_week_number,
    }
