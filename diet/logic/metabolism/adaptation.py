"""Metabolic adaptation model.

During a sustained deficit expenditure is suppressed by a factor that grows
with time in deficit and saturates at ``max_adaptation``. After the deficit
ends, each following phase computes its own partial recovery:

  - post-deficit maintenance: half of the suppression is recovered at once,
    the remainder decays geometrically by ``recovery_decay`` per week;
  - reverse diet: the multiplier inherited from post-deficit maintenance
    moves linearly toward 1.0 over ``reverse_recovery_weeks``.

Two calibrations are available. ``sqrt`` (the default) grows suppression with
the square root of months in deficit; ``linear`` is the older linear curve
with slower recovery.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Dict, Optional

from diet.utilities import config
from diet.utilities.constants import POST_DEFICIT_RECOVERED_SHARE, WEEKS_PER_MONTH

__all__ = [
    "AdaptationProfile", "PROFILES", "DEFAULT_PROFILE", "get_profile",
    "adaptation_factor", "post_deficit_recovery", "reverse_recovery", "configured_profile",
]

CURVE_SQRT = "sqrt"
CURVE_LINEAR = "linear"


@dataclass(frozen=True)
class AdaptationProfile:
    name: str
    curve: str
    rate: float
    max_adaptation: float
    recovery_decay: float
    reverse_recovery_weeks: int

    def __post_init__(self):
        if self.curve not in (CURVE_SQRT, CURVE_LINEAR):
            raise ValueError(f"Unknown adaptation curve: {self.curve}")
        if not 0 <= self.max_adaptation < 1:
            raise ValueError("max_adaptation must be in [0, 1)")
        if self.rate < 0:
            raise ValueError("rate must be non-negative")
        if not 0 < self.recovery_decay < 1:
            raise ValueError("recovery_decay must be in (0, 1)")
        if self.reverse_recovery_weeks < 1:
            raise ValueError("reverse_recovery_weeks must be at least 1")


PROFILES: Dict[str, AdaptationProfile] = {
    CURVE_SQRT: AdaptationProfile(
        name=CURVE_SQRT, curve=CURVE_SQRT, rate=0.05, max_adaptation=0.15,
        recovery_decay=0.67, reverse_recovery_weeks=8,
    ),
    CURVE_LINEAR: AdaptationProfile(
        name=CURVE_LINEAR, curve=CURVE_LINEAR, rate=0.025, max_adaptation=0.10,
        recovery_decay=0.75, reverse_recovery_weeks=8,
    ),
}
DEFAULT_PROFILE = PROFILES[CURVE_SQRT]


def get_profile(name: str = CURVE_SQRT, rate: Optional[float] = None,
                max_adaptation: Optional[float] = None) -> AdaptationProfile:
    """Return a named profile, optionally overriding its rate and cap."""
    try:
        profile = PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown adaptation profile: {name!r} (expected one of {sorted(PROFILES)})") from None
    overrides = {}
    if rate is not None:
        overrides["rate"] = rate
    if max_adaptation is not None:
        overrides["max_adaptation"] = max_adaptation
    return replace(profile, **overrides) if overrides else profile


def _suppression(weeks_in_deficit: float, profile: AdaptationProfile) -> float:
    if weeks_in_deficit <= 0:
        return 0.0
    months = weeks_in_deficit / WEEKS_PER_MONTH
    if profile.curve == CURVE_SQRT:
        raw = profile.rate * math.sqrt(months)
    else:
        raw = profile.rate * months
    return min(raw, profile.max_adaptation)


def adaptation_factor(weeks_in_deficit: float, profile: AdaptationProfile = DEFAULT_PROFILE) -> float:
    """Expenditure multiplier after ``weeks_in_deficit`` weeks of deficit.

    1.0 at week 0, decreasing with time and never below ``1 - max_adaptation``.
    """
    return 1.0 - _suppression(weeks_in_deficit, profile)


def post_deficit_recovery(end_factor: float, weeks_elapsed: int,
                          profile: AdaptationProfile = DEFAULT_PROFILE) -> float:
    """Multiplier for the post-deficit maintenance week ``weeks_elapsed`` (0-based).

    ``end_factor`` is the adaptation factor reached at the end of the deficit.
    """
    remaining = (1.0 - end_factor) * (1.0 - POST_DEFICIT_RECOVERED_SHARE)
    return 1.0 - remaining * profile.recovery_decay ** weeks_elapsed


def reverse_recovery(start_factor: float, weeks_elapsed: int,
                     profile: AdaptationProfile = DEFAULT_PROFILE) -> float:
    """Multiplier for reverse-diet week ``weeks_elapsed`` (0-based).

    Moves linearly from ``start_factor`` (the multiplier left after post-deficit
    maintenance) to full recovery, reaching 1.0 after ``reverse_recovery_weeks``.
    """
    progress = (weeks_elapsed + 1) / profile.reverse_recovery_weeks
    if progress >= 1.0:
        return 1.0
    return min(1.0, start_factor + (1.0 - start_factor) * progress)


def configured_profile() -> AdaptationProfile:
    """Build the profile selected by ADAPTATION_PROFILE / ADAPTATION_RATE / MAX_ADAPTATION."""
    rate = float(config.ADAPTATION_RATE) if config.ADAPTATION_RATE else None
    cap = float(config.MAX_ADAPTATION) if config.MAX_ADAPTATION else None
    return get_profile(config.ADAPTATION_PROFILE, rate=rate, max_adaptation=cap)
