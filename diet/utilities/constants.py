from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DISPLAY_DATE_FORMAT: Final[str] = "%d.%m.%Y"
DAYS_PER_WEEK: Final[int] = 7

# Energy density of body-mass change
KCAL_PER_KG: Final[float] = 7700.0

# Phase lengths (weeks)
WEEKS_INITIAL_MAINTENANCE: Final[int] = 1
WEEKS_POST_DEFICIT_MAINTENANCE: Final[int] = 2
WEEKS_NEW_MAINTENANCE: Final[int] = 1
MIN_DEFICIT_WEEKS: Final[int] = 4
MAX_DEFICIT_WEEKS: Final[int] = 52
# Deficit length is padded to absorb the slowdown from adaptation
DEFICIT_DURATION_BUFFER: Final[float] = 1.1

# Weight-change efficiency
DEFICIT_EFFICIENCY_DECAY_PER_WEEK: Final[float] = 0.003
DEFICIT_EFFICIENCY_FLOOR: Final[float] = 0.9
POST_DEFICIT_EFFICIENCY: Final[float] = 0.9
REVERSE_SURPLUS_EFFICIENCY: Final[float] = 0.9

# Adaptation model
WEEKS_PER_MONTH: Final[float] = 4.33
POST_DEFICIT_RECOVERED_SHARE: Final[float] = 0.5

ACTIVITY_MULTIPLIERS: Final[dict[str, float]] = {
    "sedentary": 1.2,
    "lightlyActive": 1.375,
    "moderatelyActive": 1.55,
    "veryActive": 1.725,
    "extraActive": 1.9,
}
