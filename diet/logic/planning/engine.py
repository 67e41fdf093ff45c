"""Reverse diet plan engine.

Simulates a plan week by week through five phases, always in this order:

  Initial Maintenance -> Calorie Deficit -> Post-Deficit Maintenance
  -> Reverse Diet -> New Maintenance

Each phase is a transition ``(state, plan_input, profile) -> (state, weeks)``
over an immutable SimulationState carrying the running weight, cumulative
change, calendar pointer and the adaptation level reached so far.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from diet.domain.PlanInput import PlanInput
from diet.domain.WeekRecord import FullPlan, Phase, WeekRecord
from diet.logic.metabolism.adaptation import (
    AdaptationProfile,
    adaptation_factor,
    configured_profile,
    post_deficit_recovery,
    reverse_recovery,
)
from diet.logic.metabolism.energy import basal_energy, expenditure
from diet.utilities.constants import (
    DAYS_PER_WEEK,
    DEFICIT_DURATION_BUFFER,
    DEFICIT_EFFICIENCY_DECAY_PER_WEEK,
    DEFICIT_EFFICIENCY_FLOOR,
    KCAL_PER_KG,
    MAX_DEFICIT_WEEKS,
    MIN_DEFICIT_WEEKS,
    POST_DEFICIT_EFFICIENCY,
    REVERSE_SURPLUS_EFFICIENCY,
    WEEKS_INITIAL_MAINTENANCE,
    WEEKS_NEW_MAINTENANCE,
    WEEKS_POST_DEFICIT_MAINTENANCE,
)
from diet.utilities.dates import parse_start_date, round_half_up, week_window

logger = logging.getLogger(__name__)

__all__ = [
    "SimulationState", "generate_plan", "deficit_duration_weeks", "reverse_duration_weeks",
]


@dataclass(frozen=True)
class SimulationState:
    week_number: int
    current_date: date
    current_weight_kg: float
    cumulative_change_kg: float = 0.0
    last_target: Optional[int] = None
    # Adaptation factor reached when the deficit ended
    deficit_end_factor: float = 1.0
    # Latest recovery multiplier applied after the deficit
    recovery_factor: float = 1.0


PhaseStep = Callable[[SimulationState, PlanInput, AdaptationProfile], Tuple[SimulationState, List[WeekRecord]]]


def deficit_duration_weeks(target_weight_loss_kg: float, daily_deficit_kcal: float) -> int:
    """Weeks needed to lose the target at the given deficit, padded by 10% and clamped to [4, 52]."""
    raw = (target_weight_loss_kg * KCAL_PER_KG) / (daily_deficit_kcal * DAYS_PER_WEEK)
    weeks = math.ceil(raw * DEFICIT_DURATION_BUFFER)
    return max(MIN_DEFICIT_WEEKS, min(MAX_DEFICIT_WEEKS, weeks))


def reverse_duration_weeks(start_calories: float, final_calories: float, weekly_increase: float) -> int:
    """Weeks of scheduled increases to climb from ``start_calories`` to ``final_calories`` (never negative)."""
    return max(0, math.ceil((final_calories - start_calories) / weekly_increase))


def _simulate_week(state: SimulationState, phase: Phase, target: float, tdee: float,
                   kcal_per_kg: float = KCAL_PER_KG, change_scale: float = 1.0) -> Tuple[SimulationState, WeekRecord]:
    """Advance one week: energy balance -> weight change -> record."""
    weekly_balance = DAYS_PER_WEEK * (target - tdee)
    weekly_change = weekly_balance / kcal_per_kg * change_scale
    cumulative = state.cumulative_change_kg + weekly_change
    weight = state.current_weight_kg + weekly_change

    rounded_target = round_half_up(target)
    start, end = week_window(state.current_date)
    record = WeekRecord(
        week_number=state.week_number,
        start_date=start,
        end_date=end,
        phase_name=phase,
        target_calories=rounded_target,
        calorie_change_from_previous_week=(
            None if state.last_target is None else rounded_target - state.last_target
        ),
        estimated_tdee_for_phase=round_half_up(tdee),
        estimated_weekly_balance=round_half_up(weekly_balance),
        estimated_weekly_weight_change_kg=weekly_change,
        estimated_cumulative_weight_change_kg=cumulative,
        estimated_end_weight_kg=weight,
    )
    next_state = replace(
        state,
        week_number=state.week_number + 1,
        current_date=state.current_date + timedelta(days=DAYS_PER_WEEK),
        current_weight_kg=weight,
        cumulative_change_kg=cumulative,
        last_target=rounded_target,
    )
    return next_state, record


def _basal_at(weight_kg: float, plan_input: PlanInput) -> float:
    return basal_energy(weight_kg, plan_input.height_cm, plan_input.age, plan_input.sex)


def _initial_maintenance(state: SimulationState, plan_input: PlanInput,
                         profile: AdaptationProfile) -> Tuple[SimulationState, List[WeekRecord]]:
    tdee = expenditure(_basal_at(plan_input.weight_kg, plan_input), plan_input.initial_activity_level)
    weeks = []
    for _ in range(WEEKS_INITIAL_MAINTENANCE):
        state, week = _simulate_week(state, Phase.INITIAL_MAINTENANCE,
                                     plan_input.current_maintenance_calories, tdee)
        weeks.append(week)
    return state, weeks


def _calorie_deficit(state: SimulationState, plan_input: PlanInput,
                     profile: AdaptationProfile) -> Tuple[SimulationState, List[WeekRecord]]:
    # Deficit expenditure is anchored to the starting weight for the whole phase
    base_tdee = expenditure(_basal_at(plan_input.weight_kg, plan_input), plan_input.deficit_level)
    target = plan_input.current_maintenance_calories - plan_input.daily_deficit_kcal
    duration = deficit_duration_weeks(plan_input.target_weight_loss_kg, plan_input.daily_deficit_kcal)
    logger.debug("Deficit phase: %s weeks at %.0f kcal", duration, target)

    weeks = []
    for elapsed in range(duration):
        tdee = base_tdee * adaptation_factor(elapsed, profile)
        efficiency = max(DEFICIT_EFFICIENCY_FLOOR, 1.0 - DEFICIT_EFFICIENCY_DECAY_PER_WEEK * elapsed)
        state, week = _simulate_week(state, Phase.CALORIE_DEFICIT, target, tdee,
                                     kcal_per_kg=KCAL_PER_KG * efficiency)
        weeks.append(week)
    end_factor = adaptation_factor(duration, profile)
    return replace(state, deficit_end_factor=end_factor, recovery_factor=end_factor), weeks


def _post_deficit_maintenance(state: SimulationState, plan_input: PlanInput,
                              profile: AdaptationProfile) -> Tuple[SimulationState, List[WeekRecord]]:
    base_tdee = expenditure(_basal_at(state.current_weight_kg, plan_input), plan_input.deficit_level)
    target = plan_input.current_maintenance_calories - plan_input.daily_deficit_kcal
    weeks = []
    for elapsed in range(WEEKS_POST_DEFICIT_MAINTENANCE):
        factor = post_deficit_recovery(state.deficit_end_factor, elapsed, profile)
        state, week = _simulate_week(state, Phase.POST_DEFICIT_MAINTENANCE, target, base_tdee * factor,
                                     change_scale=1.0 / POST_DEFICIT_EFFICIENCY)
        state = replace(state, recovery_factor=factor)
        weeks.append(week)
    return state, weeks


def _reverse_diet(state: SimulationState, plan_input: PlanInput,
                  profile: AdaptationProfile) -> Tuple[SimulationState, List[WeekRecord]]:
    base_tdee = expenditure(_basal_at(state.current_weight_kg, plan_input), plan_input.reverse_level)
    final = plan_input.target_final_maintenance_calories
    calories = plan_input.current_maintenance_calories - plan_input.daily_deficit_kcal
    duration = reverse_duration_weeks(calories, final, plan_input.weekly_reverse_increase_kcal)
    start_factor = state.recovery_factor
    logger.debug("Reverse phase: up to %s weeks from %.0f to %.0f kcal", duration, calories, final)

    weeks = []
    for elapsed in range(duration):
        calories = min(calories + plan_input.weekly_reverse_increase_kcal, final)
        factor = reverse_recovery(start_factor, elapsed, profile)
        tdee = base_tdee * factor
        # A surplus is stored less efficiently than a deficit is burned
        scale = REVERSE_SURPLUS_EFFICIENCY if calories > tdee else 1.0
        state, week = _simulate_week(state, Phase.REVERSE_DIET, calories, tdee, change_scale=scale)
        state = replace(state, recovery_factor=factor)
        weeks.append(week)
        if calories >= final:
            break
    return state, weeks


def _new_maintenance(state: SimulationState, plan_input: PlanInput,
                     profile: AdaptationProfile) -> Tuple[SimulationState, List[WeekRecord]]:
    tdee = expenditure(_basal_at(state.current_weight_kg, plan_input), plan_input.new_maintenance_level)
    weeks = []
    for _ in range(WEEKS_NEW_MAINTENANCE):
        state, week = _simulate_week(state, Phase.NEW_MAINTENANCE,
                                     plan_input.target_final_maintenance_calories, tdee)
        weeks.append(week)
    return replace(state, recovery_factor=1.0), weeks


_PHASE_STEPS: Dict[Phase, PhaseStep] = {
    Phase.INITIAL_MAINTENANCE: _initial_maintenance,
    Phase.CALORIE_DEFICIT: _calorie_deficit,
    Phase.POST_DEFICIT_MAINTENANCE: _post_deficit_maintenance,
    Phase.REVERSE_DIET: _reverse_diet,
    Phase.NEW_MAINTENANCE: _new_maintenance,
}


def generate_plan(plan_input: PlanInput, profile: Optional[AdaptationProfile] = None) -> FullPlan:
    """Generate the full week-by-week plan for a validated PlanInput.

    Raises DateParseError before any simulation if the start date is not a
    valid ``YYYY-MM-DD`` date.
    """
    start = parse_start_date(plan_input.start_date)
    if profile is None:
        profile = configured_profile()

    state = SimulationState(week_number=1, current_date=start, current_weight_kg=plan_input.weight_kg)
    plan: FullPlan = []
    for phase in Phase:
        state, weeks = _PHASE_STEPS[phase](state, plan_input, profile)
        plan.extend(weeks)

    logger.debug("Generated plan: %s weeks starting %s", len(plan), start)
    return plan
