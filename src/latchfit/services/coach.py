"""Daily calorie and macro targets for breastfeeding parents."""

import math

from latchfit.domain.plans import CaloriePlan
from latchfit.domain.profile import (
    ActivityLevel,
    BreastfeedingStatus,
    GoalPace,
    Profile,
    parse_activity,
    parse_breastfeeding_status,
    parse_goal_pace,
)

LB_TO_KG = 0.45359237
MIN_WEIGHT_KG = 30.0
MAX_WEIGHT_KG = 700.0
MAX_HEIGHT_CM = 300.0
MAX_AGE_YEARS = 150.0
MAX_CALORIE_FLOOR = 10_000
PROTEIN_G_PER_KG = 1.6
FAT_CALORIE_SHARE = 0.30

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.MODERATE: 1.7,
    ActivityLevel.LIGHT: 1.5,
}
_SEDENTARY_MULTIPLIER = 1.3

_BREASTFEEDING_ADDITIONS = {
    BreastfeedingStatus.EXCLUSIVE: 400.0,
    BreastfeedingStatus.PARTIAL: 250.0,
}

_GOAL_DELTAS = {
    GoalPace.MAINTAIN: 0.0,
    GoalPace.LOSE_QUARTER_LB: -250.0,
    GoalPace.LOSE_HALF_LB: -500.0,
}


def daily_plan(  # noqa: PLR0913
    age: int,
    height_cm: float,
    weight_lb: float,
    activity: ActivityLevel | str,
    breastfeeding_status: BreastfeedingStatus | str,
    calorie_floor: int = 1800,
    goal: GoalPace | str = GoalPace.MAINTAIN,
) -> CaloriePlan:
    """Compute daily calories and macros.

    Uses the Mifflin-St Jeor female BMR, an activity multiplier, an energy
    add-on for breastfeeding and a gentle goal deficit. Calories never drop
    below ``calorie_floor`` and never below what the macros add up to.

    Inputs are clamped to physical ranges, so any number yields a plan.
    """
    kg = _clamp(_finite(weight_lb) * LB_TO_KG, MIN_WEIGHT_KG, MAX_WEIGHT_KG)
    height = _clamp(_finite(height_cm), 0.0, MAX_HEIGHT_CM)
    years = _clamp(_finite(age), 0.0, MAX_AGE_YEARS)
    floor = int(_clamp(_finite(calorie_floor), 0, MAX_CALORIE_FLOOR))

    bmr = 10 * kg + 6.25 * height - 5 * years - 161
    multiplier = _ACTIVITY_MULTIPLIERS.get(
        parse_activity(activity), _SEDENTARY_MULTIPLIER
    )
    bf_add = _BREASTFEEDING_ADDITIONS.get(
        parse_breastfeeding_status(breastfeeding_status), 0.0
    )
    tdee = bmr * multiplier + bf_add
    delta = _GOAL_DELTAS[parse_goal_pace(goal)]

    calories = round_half_up(max(float(floor), tdee + delta))

    protein_g = round_half_up(PROTEIN_G_PER_KG * kg)
    fat_g = round_half_up(FAT_CALORIE_SHARE * calories / 9)
    carbs_g = max(0, round_half_up((calories - (protein_g * 4 + fat_g * 9)) / 4))

    # rounding can push the macro sum above the calorie target
    recomputed = protein_g * 4 + fat_g * 9 + carbs_g * 4
    calories = max(calories, recomputed)

    return CaloriePlan(
        calories=calories,
        protein_g=protein_g,
        fat_g=fat_g,
        carbs_g=carbs_g,
    )


def plan_for_profile(profile: Profile) -> CaloriePlan:
    """Compute the daily plan for a stored profile."""
    return daily_plan(
        age=profile.age,
        height_cm=profile.height_cm,
        weight_lb=profile.weight_lb,
        activity=profile.activity_level,
        breastfeeding_status=profile.breastfeeding_status,
        calorie_floor=profile.calorie_floor,
        goal=profile.goal_pace,
    )


def per_meal_targets(
    plan: CaloriePlan,
    meals_per_day: int,
    min_calories: int = 300,
    min_protein_g: int = 18,
) -> tuple[int, int]:
    """Split the daily plan into per-meal calorie and protein targets."""
    meals = max(3, meals_per_day)
    calories = max(min_calories, plan.calories // meals)
    protein_g = max(min_protein_g, plan.protein_g // meals)
    return calories, protein_g


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _finite(value: float) -> float:
    """Return the value as a float, or 0.0 when it is not finite."""
    number = float(value)
    return number if math.isfinite(number) else 0.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))
